from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hexagram_lotto.digest import DIGEST_ENV_VAR, default_strategy
from hexagram_lotto.models import Figure


class FixedDigest:
    """Digest strategy that ignores the seed and returns preset bytes."""

    name = "fixed"

    def __init__(self, data: bytes) -> None:
        self.data = data

    def digest(self, seed: str) -> bytes:
        return self.data


@pytest.fixture(autouse=True)
def isolated_digest_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(DIGEST_ENV_VAR, raising=False)
    default_strategy.cache_clear()
    yield
    default_strategy.cache_clear()


@pytest.fixture
def counting_bytes() -> bytes:
    return bytes(range(32))


@pytest.fixture
def zero_bytes() -> bytes:
    return bytes(32)


@pytest.fixture
def counting_strategy(counting_bytes) -> FixedDigest:
    return FixedDigest(counting_bytes)


@pytest.fixture
def zero_strategy(zero_bytes) -> FixedDigest:
    return FixedDigest(zero_bytes)


@pytest.fixture
def counting_figure() -> Figure:
    # Figure cast from bytes(range(32)): bytes 0..5.
    return Figure(
        lines=[0, 1, 0, 1, 0, 1],
        changing=[False, False, True, True, False, False],
        complementary=[0, 1, 1, 0, 0, 1],
    )
