"""Explanations tying each drawn number back to the figure."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from hexagram_lotto.models import Attribute, Category, ExplanationRecord, Line, Relation
from hexagram_lotto.trigrams import attribute_of, generates, restrains

ORDINALS = ("first", "second", "third", "fourth", "fifth")

RELATION_LABELS: dict[str, str] = {
    "self": "Core energy",
    "generative": "Generative (support)",
    "restraining": "Restraining (check)",
    "neutral": "Independent nature",
}

RELATION_REASONS: dict[str, str] = {
    "self": "Its attribute matches the central attribute, so it resonates most strongly.",
    "generative": "It sits on the generative path from the center and lends it natural momentum.",
    "restraining": "It sits on the restraining path from the center and keeps it in balance.",
    "neutral": "It differs from the center and can complement it or spark a shift.",
}


class NarrativeContext(BaseModel):
    """Figure state an explanation is read against."""

    model_config = ConfigDict(frozen=True)

    lower: Category
    upper: Category
    dominant: Attribute
    changing: list[bool]
    lines: list[Line]


def line_position(number: int) -> int:
    """Map a number onto line 1-6 (bottom to top)."""
    remainder = number % 6
    return 6 if remainder == 0 else remainder


def relation_to(attribute: Attribute, dominant: Attribute) -> Relation:
    if attribute == dominant:
        return "self"
    if attribute == generates(dominant):
        return "generative"
    if attribute == restrains(dominant):
        return "restraining"
    return "neutral"


def _relation_text(relation: Relation, dominant: Attribute) -> str:
    center = dominant.value
    if relation == "self":
        return f"This number shares your central attribute ({center}) and resonates with it directly."
    if relation == "generative":
        return (
            f"{center} -> {generates(dominant).value}: this number is where your central energy "
            "naturally grows and offers support."
        )
    if relation == "restraining":
        return (
            f"{center} -| {restrains(dominant).value}: this number balances or restrains the center, "
            "so excess drive is held back."
        )
    return f"This number has no direct tie to {center}."


def _change_note(position: int, moving: bool) -> str:
    if moving:
        return f"Turning point: line {position} is changing, energy is shifting here."
    return f"Stable ground: line {position} is fixed, this part is settled for now."


def explain(numbers: Sequence[int], ctx: NarrativeContext) -> list[ExplanationRecord]:
    """Build one explanation per number, preserving input order.

    Args:
        numbers: Drawn numbers, usually the main numbers of group 0.
        ctx: Figure state the numbers are read against.

    Returns:
        Records holding the attribute, line, trigram, relation, and rendered text.
    """
    records: list[ExplanationRecord] = []
    for idx, number in enumerate(numbers, start=1):
        attribute = attribute_of(number)
        position = line_position(number)
        moving = bool(ctx.changing[position - 1])
        category = ctx.lower if position <= 3 else ctx.upper
        relation = relation_to(attribute, ctx.dominant)

        ordinal = ORDINALS[(number - 1) % len(ORDINALS)]
        reason = (
            f"Placed in the {ordinal} seat of the cycle, which traditionally carries {attribute.value}. "
            f"{RELATION_REASONS[relation]}"
        )

        records.append(
            ExplanationRecord(
                index=idx,
                number=number,
                attribute=attribute,
                line_position=position,
                line_value=ctx.lines[position - 1],
                changing=moving,
                category=category,
                relation=relation,
                relation_label=RELATION_LABELS[relation],
                relation_text=_relation_text(relation, ctx.dominant),
                change_note=_change_note(position, moving),
                reason=reason,
            )
        )
    return records
