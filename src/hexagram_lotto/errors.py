"""Error types raised by the draw pipeline."""

from __future__ import annotations


class HexagramLottoError(Exception):
    """Base class for all pipeline errors."""


class InputIncomplete(HexagramLottoError, ValueError):
    """Raised when the date part of a seed is missing or malformed."""


class SelectionExhausted(HexagramLottoError, RuntimeError):
    """Raised when a bounded draw loop runs out of attempts."""

    def __init__(self, requested: int, collected: int, start_offset: int):
        self.requested = requested
        self.collected = collected
        self.start_offset = start_offset
        super().__init__(
            f"Collected {collected}/{requested} unique numbers from offset {start_offset} before the draw guard ran out"
        )


class MalformedCategoryLookup(HexagramLottoError, ValueError):
    """Raised when a trigram lookup receives something other than three 0/1 lines."""

    def __init__(self, pattern: object):
        self.pattern = pattern
        super().__init__(f"No trigram for line pattern: {pattern!r}")
