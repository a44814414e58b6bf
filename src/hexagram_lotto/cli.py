"""Typer-based CLI for composing seeds, running draws, and writing reports."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from hexagram_lotto.digest import DIGEST_ENV_VAR, DigestStrategy, default_strategy, digest, sha256_available
from hexagram_lotto.errors import InputIncomplete, SelectionExhausted
from hexagram_lotto.models import DrawResult
from hexagram_lotto.pipeline import MAX_ALTERNATIVES, run_pipeline
from hexagram_lotto.renderer import render_report
from hexagram_lotto.seed import compose_seed, parse_quick_date
from hexagram_lotto.selector import BALL_MAX, alternatives_for

app = typer.Typer(add_completion=False, help="hexagram-lotto: deterministic hexagram number draws from a birth date")

DEFAULT_OUTPUT_ROOT = Path("reports")
DEFAULT_COUNTER = 1


def _echo_step(step: int, total: int, message: str) -> None:
    """Print a normalized progress step line."""
    typer.echo(f"[{step}/{total}] {message}")


def _resolve_date(text: str) -> str:
    """Accept ``YYYY-MM-DD`` as-is and expand ``yyyymmdd`` shorthand."""
    if "-" in text:
        return text
    return parse_quick_date(text)


def _build_seed(birth_date: str, birth_time: str | None, counter: int) -> str:
    try:
        return compose_seed(_resolve_date(birth_date), birth_time, counter)
    except InputIncomplete as exc:
        raise typer.BadParameter(str(exc)) from exc


def _resolve_strategy() -> DigestStrategy:
    """Resolve the configured digest strategy, reporting bad settings as usage errors."""
    try:
        return default_strategy()
    except (ValueError, RuntimeError) as exc:
        raise typer.BadParameter(str(exc), param_hint=DIGEST_ENV_VAR) from exc


def _echo_result(result: DrawResult) -> None:
    """Print groups and explanations in a compact terminal layout."""
    typer.echo(f"Lower: {result.lower.label} ({result.lower.nature}, {result.lower.attribute.value})")
    typer.echo(f"Upper: {result.upper.label} ({result.upper.nature}, {result.upper.attribute.value})")
    typer.echo(f"Central attribute: {result.dominant.value}")
    positions = result.figure.changing_positions
    typer.echo(f"Changing lines: {', '.join(str(pos) for pos in positions) if positions else 'none'}")

    for group in result.groups:
        numbers = " - ".join(str(n) for n in group.numbers)
        typer.echo(f"  {group.index + 1}: {numbers}  + {group.bonus}")

    typer.echo("Why group 1:")
    for record in result.explanations:
        typer.echo(
            f"  {record.number:>2} {record.attribute.value:<5} line {record.line_position} "
            f"{record.category.label} [{record.relation_label}] {record.change_note}"
        )


@app.command("draw")
def draw(
    birth_date: str = typer.Argument(..., help="Birth date as YYYY-MM-DD or yyyymmdd"),
    birth_time: str | None = typer.Option(None, "--time", help="Optional birth time as HH:MM"),
    counter: int = typer.Option(DEFAULT_COUNTER, min=0, help="Call counter appended to the seed"),
    output_root: Path = typer.Option(DEFAULT_OUTPUT_ROOT, help="Report output directory"),
    no_write: bool = typer.Option(False, "--no-write", help="Print only, do not write a report bundle"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    with_alternatives: bool = typer.Option(False, "--alternatives", help="Include related numbers per ball"),
) -> None:
    """Run one deterministic draw for a date, optional time, and counter."""
    total_steps = 3 if no_write else 4
    echo_step = (lambda *_: None) if as_json else _echo_step

    echo_step(1, total_steps, "Composing seed")
    seed = _build_seed(birth_date, birth_time, counter)
    strategy = _resolve_strategy()

    echo_step(2, total_steps, f"Running pipeline for {seed}")
    try:
        result = run_pipeline(
            seed,
            strategy=strategy,
            include_alternatives=with_alternatives,
            progress_callback=None if as_json else (lambda msg: typer.echo(f"    {msg}")),
        )
    except SelectionExhausted as exc:
        typer.echo(f"Draw failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    echo_step(3, total_steps, "Presenting result")
    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        _echo_result(result)

    if not no_write:
        echo_step(4, total_steps, "Rendering report bundle")
        out_dir = render_report(result, output_root=output_root)
        if not as_json:
            typer.echo(f"Draw complete. seed={seed} digest={result.digest[:12]} path={out_dir}")


@app.command("alternatives")
def alternatives(
    birth_date: str = typer.Argument(..., help="Birth date as YYYY-MM-DD or yyyymmdd"),
    number: int = typer.Argument(..., min=1, max=BALL_MAX, help="Base number"),
    birth_time: str | None = typer.Option(None, "--time", help="Optional birth time as HH:MM"),
    counter: int = typer.Option(DEFAULT_COUNTER, min=0, help="Call counter appended to the seed"),
    max_count: int = typer.Option(MAX_ALTERNATIVES, min=1, max=BALL_MAX - 1, help="Maximum related numbers"),
) -> None:
    """List numbers related to NUMBER for the given seed."""
    seed = _build_seed(birth_date, birth_time, counter)
    options = alternatives_for(digest(seed, _resolve_strategy()), number, max_count)
    rendered = ", ".join(str(option) for option in options) or "none"
    typer.echo(f"{number}: {rendered}")


@app.command("doctor")
def doctor() -> None:
    """Print the digest configuration used by the pipeline."""
    configured = os.getenv(DIGEST_ENV_VAR) or "auto"
    typer.echo(f"{DIGEST_ENV_VAR}: {configured}")
    typer.echo(f"sha256 available: {sha256_available()}")
    try:
        active = default_strategy()
    except (ValueError, RuntimeError) as exc:
        typer.echo(f"Digest configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Active digest strategy: {active.name}")


if __name__ == "__main__":
    app()
