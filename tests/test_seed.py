from __future__ import annotations

from datetime import date

import pytest

from hexagram_lotto.errors import InputIncomplete
from hexagram_lotto.seed import compose_seed, parse_quick_date


def test_compose_seed_given_date_and_counter_when_composed_then_counter_is_pipe_suffixed() -> None:
    # Given
    birth_date = "2024-01-01"

    # When
    seed = compose_seed(birth_date, None, 1)

    # Then
    assert seed == "2024-01-01|1"


def test_compose_seed_given_loose_date_and_time_when_composed_then_parts_are_zero_padded() -> None:
    # Given
    birth_date = " 1990-5-7 "
    birth_time = "8:5"

    # When
    seed = compose_seed(birth_date, birth_time, 3)

    # Then
    assert seed == "1990-05-07T08:05|3"


def test_compose_seed_given_date_object_and_no_counter_when_composed_then_bare_date_is_returned() -> None:
    # Given
    birth_date = date(1985, 12, 24)

    # When
    seed = compose_seed(birth_date)

    # Then
    assert seed == "1985-12-24"


@pytest.mark.parametrize("birth_date", [None, "", "   ", "2024/01/01", "2024-13-01", "2024-01-32"])
def test_compose_seed_given_missing_or_malformed_date_when_composed_then_input_incomplete_is_raised(
    birth_date,
) -> None:
    # Given
    # A date that cannot seed a draw.

    # When
    with pytest.raises(InputIncomplete):
        compose_seed(birth_date, None, 1)

    # Then
    # The error is the assertion.


@pytest.mark.parametrize("birth_time", ["25:00", "12:60", "noon", "1230"])
def test_compose_seed_given_malformed_time_when_composed_then_input_incomplete_is_raised(birth_time) -> None:
    # Given
    birth_date = "2024-01-01"

    # When
    with pytest.raises(InputIncomplete):
        compose_seed(birth_date, birth_time, 1)

    # Then
    # The error is the assertion.


def test_parse_quick_date_given_digits_with_separators_when_parsed_then_iso_date_is_returned() -> None:
    # Given
    raw_inputs = ["19900131", "1990-01-31", "1990.01.31"]

    # When
    parsed = [parse_quick_date(raw) for raw in raw_inputs]

    # Then
    assert parsed == ["1990-01-31", "1990-01-31", "1990-01-31"]


@pytest.mark.parametrize("raw", ["1990013", "199001311", "18991231", "20510101", "19901301", "19900100", ""])
def test_parse_quick_date_given_out_of_range_input_when_parsed_then_input_incomplete_is_raised(raw) -> None:
    # Given
    # Input that is not a valid yyyymmdd between 1900 and 2050.

    # When
    with pytest.raises(InputIncomplete):
        parse_quick_date(raw)

    # Then
    # The error is the assertion.


@pytest.mark.parametrize(
    ("birth_date", "birth_time"),
    [("٢٠٢٤-٠١-٠١", None), ("2024-01-01", "٠٨:٣٠")],
)
def test_compose_seed_given_non_ascii_digits_when_composed_then_input_incomplete_is_raised(
    birth_date,
    birth_time,
) -> None:
    # Given
    # Arabic-Indic digits are rejected just like in quick date entry.

    # When
    with pytest.raises(InputIncomplete):
        compose_seed(birth_date, birth_time, 1)

    # Then
    # The error is the assertion.
