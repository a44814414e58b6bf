from __future__ import annotations

from hexagram_lotto.models import Figure

LINE_COUNT = 6


def derive_figure(data: bytes) -> Figure:
    """Build the six-line figure from the first six digest bytes.

    Bit 0 of each byte is the line (1 = yang, 0 = yin) and bit 1 marks it as
    changing. The complementary figure flips only the changing lines.
    """
    if len(data) < LINE_COUNT:
        raise ValueError(f"Need at least {LINE_COUNT} bytes, got {len(data)}")

    lines: list[int] = []
    changing: list[bool] = []
    for value in data[:LINE_COUNT]:
        lines.append(value & 1)
        changing.append(bool((value >> 1) & 1))

    complementary = [1 - line if moving else line for line, moving in zip(lines, changing)]
    return Figure(lines=lines, changing=changing, complementary=complementary)
