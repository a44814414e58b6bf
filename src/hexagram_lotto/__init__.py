"""Deterministic hexagram-themed number draws seeded by a date and a counter."""

__version__ = "0.1.0"
