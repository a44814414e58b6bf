"""Seed digests: SHA-256 when the platform has it, FNV-1a expansion otherwise."""

from __future__ import annotations

import hashlib
import os
from functools import lru_cache
from typing import Protocol

DIGEST_SIZE = 32
DIGEST_ENV_VAR = "HEXAGRAM_LOTTO_DIGEST"

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
GOLDEN_RATIO_32 = 0x9E3779B9
MASK_32 = 0xFFFFFFFF


class DigestStrategy(Protocol):
    name: str

    def digest(self, seed: str) -> bytes:
        """Return exactly ``DIGEST_SIZE`` bytes derived from ``seed``."""
        ...


class Sha256Digest:
    """SHA-256 over the UTF-8 encoded seed; lone surrogates become U+FFFD."""

    name = "sha256"

    def digest(self, seed: str) -> bytes:
        return hashlib.sha256(_utf8_with_replacement(seed)).digest()


class Fnv1aDigest:
    """Non-cryptographic fallback: FNV-1a over UTF-16 code units, re-mixed to 32 bytes.

    Deterministic and well spread for distinct seeds, but predictable. Never use
    it where unpredictability matters.
    """

    name = "fnv1a"

    def digest(self, seed: str) -> bytes:
        h = FNV_OFFSET_BASIS
        for unit in _utf16_units(seed):
            h ^= unit
            h = (h * FNV_PRIME) & MASK_32

        out = bytearray(DIGEST_SIZE)
        for i in range(DIGEST_SIZE):
            h ^= (i + GOLDEN_RATIO_32) & MASK_32
            h = (h * FNV_PRIME) & MASK_32
            out[i] = (h >> ((i % 4) * 8)) & 0xFF
        return bytes(out)


def _utf8_with_replacement(text: str) -> bytes:
    raw = text.encode("utf-16-le", errors="surrogatepass")
    return raw.decode("utf-16-le", errors="replace").encode("utf-8")


def _utf16_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le", errors="surrogatepass")
    return [raw[idx] | (raw[idx + 1] << 8) for idx in range(0, len(raw), 2)]


def sha256_available() -> bool:
    return "sha256" in hashlib.algorithms_available


def select_digest_strategy(preference: str | None = None) -> DigestStrategy:
    """Pick the digest strategy for this process.

    Resolution order:
    1. ``preference`` argument.
    2. ``HEXAGRAM_LOTTO_DIGEST`` environment variable.
    3. ``auto``: SHA-256 when available, FNV-1a otherwise.

    Raises:
        ValueError: If the preference names an unknown strategy.
        RuntimeError: If SHA-256 is requested but the platform lacks it.
    """
    choice = (preference or os.getenv(DIGEST_ENV_VAR) or "auto").strip().lower()

    if choice == "auto":
        return Sha256Digest() if sha256_available() else Fnv1aDigest()
    if choice == Sha256Digest.name:
        if not sha256_available():
            raise RuntimeError("sha256 requested but not provided by this Python build")
        return Sha256Digest()
    if choice == Fnv1aDigest.name:
        return Fnv1aDigest()

    raise ValueError(f"Unknown digest strategy {choice!r} (expected auto, sha256, or fnv1a)")


@lru_cache(maxsize=1)
def default_strategy() -> DigestStrategy:
    """Strategy resolved once per process from platform and environment."""
    return select_digest_strategy()


def digest(seed: str, strategy: DigestStrategy | None = None) -> bytes:
    active = strategy or default_strategy()
    data = active.digest(seed)
    if len(data) != DIGEST_SIZE:
        raise RuntimeError(f"{active.name} produced {len(data)} bytes, expected {DIGEST_SIZE}")
    return data
