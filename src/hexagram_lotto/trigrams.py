"""Trigram table, number attributes, and the generative/restraining cycle."""

from __future__ import annotations

from collections.abc import Sequence

from hexagram_lotto.errors import MalformedCategoryLookup
from hexagram_lotto.models import Attribute, Category, Trigram

# Bit patterns read bottom line first.
CATEGORIES: dict[tuple[int, int, int], Category] = {
    category.pattern: category
    for category in (
        Category(trigram=Trigram.QIAN, pattern=(1, 1, 1), name="Qian", symbol="☰", nature="Heaven", attribute=Attribute.METAL),
        Category(trigram=Trigram.DUI, pattern=(1, 1, 0), name="Dui", symbol="☱", nature="Lake", attribute=Attribute.METAL),
        Category(trigram=Trigram.LI, pattern=(1, 0, 1), name="Li", symbol="☲", nature="Fire", attribute=Attribute.FIRE),
        Category(trigram=Trigram.ZHEN, pattern=(1, 0, 0), name="Zhen", symbol="☳", nature="Thunder", attribute=Attribute.WOOD),
        Category(trigram=Trigram.XUN, pattern=(0, 1, 1), name="Xun", symbol="☴", nature="Wind", attribute=Attribute.WOOD),
        Category(trigram=Trigram.KAN, pattern=(0, 1, 0), name="Kan", symbol="☵", nature="Water", attribute=Attribute.WATER),
        Category(trigram=Trigram.GEN, pattern=(0, 0, 1), name="Gen", symbol="☶", nature="Mountain", attribute=Attribute.EARTH),
        Category(trigram=Trigram.KUN, pattern=(0, 0, 0), name="Kun", symbol="☷", nature="Earth", attribute=Attribute.EARTH),
    )
}

CATEGORY_BY_TRIGRAM: dict[Trigram, Category] = {category.trigram: category for category in CATEGORIES.values()}

# n % 5 -> attribute
ATTRIBUTE_BY_REMAINDER: dict[int, Attribute] = {
    1: Attribute.WOOD,
    2: Attribute.FIRE,
    3: Attribute.EARTH,
    4: Attribute.METAL,
    0: Attribute.WATER,
}

CYCLE: tuple[Attribute, ...] = (
    Attribute.WOOD,
    Attribute.FIRE,
    Attribute.EARTH,
    Attribute.METAL,
    Attribute.WATER,
)


def attribute_of(number: int) -> Attribute:
    return ATTRIBUTE_BY_REMAINDER[number % 5]


def generates(attribute: Attribute) -> Attribute:
    """Attribute fed by ``attribute`` (one step ahead in the cycle)."""
    return CYCLE[(CYCLE.index(attribute) + 1) % len(CYCLE)]


def restrains(attribute: Attribute) -> Attribute:
    """Attribute held in check by ``attribute`` (two steps ahead in the cycle)."""
    return CYCLE[(CYCLE.index(attribute) + 2) % len(CYCLE)]


def category_of(three_lines: Sequence[int]) -> Category:
    """Look up the trigram for ``[bottom, middle, top]`` line values.

    Raises:
        MalformedCategoryLookup: If the input is not exactly three 0/1 values.
    """
    pattern = tuple(three_lines)
    if len(pattern) != 3 or any(type(value) is not int or value not in (0, 1) for value in pattern):
        raise MalformedCategoryLookup(pattern)
    category = CATEGORIES.get(pattern)
    if category is None:
        raise MalformedCategoryLookup(pattern)
    return category


def dominant_attribute(lower: Category, upper: Category, changing: Sequence[bool]) -> Attribute:
    if lower.attribute == upper.attribute:
        return upper.attribute

    lower_moving = sum(1 for flag in changing[0:3] if flag)
    upper_moving = sum(1 for flag in changing[3:6] if flag)
    # Ties go to the upper trigram.
    return upper.attribute if upper_moving >= lower_moving else lower.attribute
