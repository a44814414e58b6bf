from __future__ import annotations

from hexagram_lotto.errors import SelectionExhausted
from hexagram_lotto.models import NumberGroup
from hexagram_lotto.trigrams import attribute_of

BALL_MAX = 45
GROUP_COUNT = 5
GROUP_SIZE = 5
GROUP_STRIDE = 7

DRAWS_PER_NUMBER = 400

BONUS_BASE_OFFSET = 200
BONUS_STRIDE = 3
BONUS_SALT_INDEX = 10
BONUS_RETRIES = 200

ALT_BATCH_SIZE = 10
ALT_START_OFFSET = 13
ALT_STRIDE = 7
ALT_BATCH_LIMIT = 200
ALT_FILL_OFFSET = 999
ALT_FILL_LIMIT = 100


def _draw_value(data: bytes, position: int) -> int:
    hi = data[position % len(data)]
    lo = data[(position + 1) % len(data)]
    return ((hi << 8) | lo) % BALL_MAX + 1


def _draw_unique(data: bytes, count: int, start_offset: int) -> list[int]:
    """Collect up to ``count`` distinct values in draw order; may come back short."""
    out: list[int] = []
    position = start_offset
    for _ in range(count * DRAWS_PER_NUMBER):
        if len(out) >= count:
            break
        value = _draw_value(data, position)
        position += 2
        if value not in out:
            out.append(value)
    return out


def pick_unique(data: bytes, count: int, start_offset: int) -> list[int]:
    """Draw ``count`` distinct numbers in ``[1, 45]`` and return them ascending.

    Each draw reads two bytes at the cursor (wrapping around ``data``) as a
    big-endian 16-bit value, reduces it modulo 45, and moves the cursor by two.

    Raises:
        ValueError: If ``count`` is outside ``[1, 45]`` or ``data`` is empty.
        SelectionExhausted: If the draw guard runs out before ``count`` values.
    """
    if not data:
        raise ValueError("Cannot draw numbers from an empty digest")
    if not 1 <= count <= BALL_MAX:
        raise ValueError(f"count must be between 1 and {BALL_MAX}, got {count}")

    out = _draw_unique(data, count, start_offset)
    if len(out) < count:
        raise SelectionExhausted(requested=count, collected=len(out), start_offset=start_offset)
    return sorted(out)


def draw_bonus(data: bytes, group_index: int, taken: list[int]) -> int:
    offset = BONUS_BASE_OFFSET + group_index * BONUS_STRIDE + data[(group_index + BONUS_SALT_INDEX) % len(data)]
    start_offset = offset
    bonus = pick_unique(data, 1, offset)[0]
    retries = 0
    while bonus in taken:
        if retries >= BONUS_RETRIES:
            raise SelectionExhausted(requested=1, collected=0, start_offset=start_offset)
        offset += 1
        bonus = pick_unique(data, 1, offset)[0]
        retries += 1
    return bonus


def draw_groups(data: bytes, changing_count: int) -> list[NumberGroup]:
    groups: list[NumberGroup] = []
    for group_index in range(GROUP_COUNT):
        numbers = pick_unique(data, GROUP_SIZE, group_index * GROUP_STRIDE + changing_count)
        bonus = draw_bonus(data, group_index, numbers)
        groups.append(NumberGroup(index=group_index, numbers=numbers, bonus=bonus))
    return groups


def alternatives_for(data: bytes, base_number: int, max_count: int = 6) -> list[int]:
    """Related numbers for ``base_number``, same-attribute ones first, in draw order.

    Never contains ``base_number`` and never more than ``max_count`` values.
    """
    out: list[int] = []
    if max_count <= 0:
        return out

    base_attribute = attribute_of(base_number)

    offset = ALT_START_OFFSET
    for _ in range(ALT_BATCH_LIMIT):
        if len(out) >= max_count:
            break
        for candidate in sorted(_draw_unique(data, ALT_BATCH_SIZE, offset)):
            if candidate == base_number or candidate in out:
                continue
            if attribute_of(candidate) == base_attribute:
                out.append(candidate)
            if len(out) >= max_count:
                break
        offset += ALT_STRIDE

    offset = ALT_FILL_OFFSET
    for _ in range(ALT_FILL_LIMIT):
        if len(out) >= max_count:
            break
        candidate = pick_unique(data, 1, offset)[0]
        if candidate != base_number and candidate not in out:
            out.append(candidate)
        offset += 1

    return out
