from __future__ import annotations

import pytest

from hexagram_lotto.models import Attribute, Trigram
from hexagram_lotto.narrative import NarrativeContext, explain, line_position, relation_to
from hexagram_lotto.trigrams import CATEGORY_BY_TRIGRAM


@pytest.fixture
def counting_context(counting_figure) -> NarrativeContext:
    return NarrativeContext(
        lower=CATEGORY_BY_TRIGRAM[Trigram.KAN],
        upper=CATEGORY_BY_TRIGRAM[Trigram.LI],
        dominant=Attribute.FIRE,
        changing=counting_figure.changing,
        lines=counting_figure.lines,
    )


def test_line_position_given_numbers_when_mapped_then_multiples_of_six_land_on_top_line() -> None:
    # Given
    numbers = [1, 5, 6, 7, 12, 45]

    # When
    positions = [line_position(number) for number in numbers]

    # Then
    assert positions == [1, 5, 6, 1, 6, 3]
    assert {line_position(number) for number in range(1, 46)} == {1, 2, 3, 4, 5, 6}


def test_relation_to_given_fire_center_when_compared_then_all_four_relations_appear() -> None:
    # Given
    dominant = Attribute.FIRE

    # When
    relations = {attribute: relation_to(attribute, dominant) for attribute in Attribute}

    # Then
    assert relations == {
        Attribute.FIRE: "self",
        Attribute.EARTH: "generative",
        Attribute.METAL: "restraining",
        Attribute.WOOD: "neutral",
        Attribute.WATER: "neutral",
    }


def test_explain_given_first_counting_group_when_explained_then_records_follow_line_and_relation_rules(
    counting_context,
) -> None:
    # Given
    numbers = [7, 14, 21, 33, 40]

    # When
    records = explain(numbers, counting_context)

    # Then
    assert [record.number for record in records] == numbers
    assert [record.index for record in records] == [1, 2, 3, 4, 5]
    assert [record.relation for record in records] == ["self", "restraining", "neutral", "generative", "neutral"]
    assert [record.line_position for record in records] == [1, 2, 3, 3, 4]
    assert [record.line_value for record in records] == [0, 1, 0, 0, 1]
    assert [record.changing for record in records] == [False, False, True, True, True]
    assert [record.category.trigram for record in records] == [
        Trigram.KAN,
        Trigram.KAN,
        Trigram.KAN,
        Trigram.KAN,
        Trigram.LI,
    ]


def test_explain_given_changing_and_stable_lines_when_explained_then_notes_differ(counting_context) -> None:
    # Given
    stable_number = 7
    changing_number = 40

    # When
    stable, moving = explain([stable_number, changing_number], counting_context)

    # Then
    assert stable.change_note.startswith("Stable ground: line 1")
    assert moving.change_note.startswith("Turning point: line 4")
    assert "fire -> earth" not in stable.relation_text
    assert stable.relation_label == "Core energy"
    assert "second seat" in stable.reason
    assert "fifth seat" in moving.reason


def test_explain_given_generative_and_restraining_numbers_when_explained_then_texts_name_the_cycle(
    counting_context,
) -> None:
    # Given
    numbers = [3, 4]

    # When
    generative, restraining = explain(numbers, counting_context)

    # Then
    assert generative.relation_text.startswith("fire -> earth")
    assert restraining.relation_text.startswith("fire -| metal")
    assert generative.relation_label == "Generative (support)"
    assert restraining.relation_label == "Restraining (check)"


def test_explain_given_every_ball_when_explained_then_each_record_is_defined(counting_context) -> None:
    # Given
    numbers = list(range(1, 46))

    # When
    records = explain(numbers, counting_context)

    # Then
    assert len(records) == 45
    assert all(record.relation in {"self", "generative", "restraining", "neutral"} for record in records)
