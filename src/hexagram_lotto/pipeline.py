"""End-to-end draw: seed -> digest -> figure -> trigrams -> groups -> explanations."""

from __future__ import annotations

from collections.abc import Callable

from hexagram_lotto.digest import DigestStrategy, default_strategy, digest
from hexagram_lotto.figure import derive_figure
from hexagram_lotto.models import DrawResult
from hexagram_lotto.narrative import NarrativeContext, explain
from hexagram_lotto.selector import alternatives_for, draw_groups
from hexagram_lotto.trigrams import category_of, dominant_attribute

MAX_ALTERNATIVES = 6


def run_pipeline(
    seed: str,
    strategy: DigestStrategy | None = None,
    include_alternatives: bool = False,
    progress_callback: Callable[[str], None] | None = None,
) -> DrawResult:
    """Run one full, stateless draw for ``seed``.

    Args:
        seed: Composed seed string, usually ``YYYY-MM-DD[THH:MM]|counter``.
        strategy: Digest strategy; defaults to the process-wide selection.
        include_alternatives: Also compute related numbers for every main number.
        progress_callback: Optional sink for step descriptions.

    Returns:
        The complete draw as plain data.

    Raises:
        SelectionExhausted: If a number group cannot be filled.
    """
    active = strategy or default_strategy()

    if progress_callback:
        progress_callback(f"hashing seed with {active.name}")
    data = digest(seed, active)

    if progress_callback:
        progress_callback("casting figure")
    figure = derive_figure(data)
    lower = category_of(figure.lower_lines)
    upper = category_of(figure.upper_lines)
    dominant = dominant_attribute(lower, upper, figure.changing)

    if progress_callback:
        progress_callback("drawing number groups")
    groups = draw_groups(data, figure.changing_count)

    alternatives: dict[int, list[int]] = {}
    if include_alternatives:
        if progress_callback:
            progress_callback("collecting alternatives")
        for group in groups:
            for number in group.numbers:
                if number not in alternatives:
                    alternatives[number] = alternatives_for(data, number, MAX_ALTERNATIVES)

    if progress_callback:
        progress_callback("writing explanations")
    ctx = NarrativeContext(
        lower=lower,
        upper=upper,
        dominant=dominant,
        changing=figure.changing,
        lines=figure.lines,
    )
    explanations = explain(groups[0].numbers, ctx)

    return DrawResult(
        seed=seed,
        digest=data.hex(),
        digest_strategy=active.name,
        figure=figure,
        lower=lower,
        upper=upper,
        dominant=dominant,
        groups=groups,
        explanations=explanations,
        alternatives=alternatives,
    )
