"""Render draw results into Markdown and JSON report bundles."""

from __future__ import annotations

import json
from pathlib import Path

from hexagram_lotto.models import DrawResult, Figure

REPORT_ID_LENGTH = 12


def report_id(result: DrawResult) -> str:
    return result.digest[:REPORT_ID_LENGTH]


def render_report(result: DrawResult, output_root: Path) -> Path:
    """Write a draw report to disk and return the output directory.

    Args:
        result: Completed pipeline output.
        output_root: Root directory where report folders are created.

    Returns:
        The report-specific directory containing ``report.md`` and ``report.json``.
    """
    target_dir = output_root / report_id(result)
    target_dir.mkdir(parents=True, exist_ok=True)

    md_path = target_dir / "report.md"
    json_path = target_dir / "report.json"

    md_path.write_text(render_markdown(result), encoding="utf-8")
    json_path.write_text(
        json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )

    return target_dir


def render_markdown(result: DrawResult) -> str:
    """Render a human-readable Markdown summary of a draw."""
    lines = [
        f"# Draw {report_id(result)}",
        "",
        f"- Seed: `{result.seed}`",
        f"- Digest: `{result.digest}` ({result.digest_strategy})",
        f"- Lower trigram: {result.lower.label} · {result.lower.nature} · {result.lower.attribute.value}",
        f"- Upper trigram: {result.upper.label} · {result.upper.nature} · {result.upper.attribute.value}",
        f"- Central attribute: {result.dominant.value}",
        f"- Changing lines: {_changing_summary(result.figure)}",
        "",
        "## Figure",
        "",
        "| Line | Primary | Changing | Complementary |",
        "|------|---------|----------|---------------|",
    ]

    figure = result.figure
    for idx in reversed(range(len(figure.lines))):
        lines.append(
            f"| {idx + 1} | {_line_name(figure.lines[idx])} | "
            f"{'changing' if figure.changing[idx] else 'stable'} | {_line_name(figure.complementary[idx])} |"
        )

    lines.extend(["", "## Number Groups", ""])
    for group in result.groups:
        lines.append(f"{group.index + 1}. {' - '.join(str(n) for n in group.numbers)} (bonus {group.bonus})")

    lines.extend(["", "## Why These Numbers", ""])
    for record in result.explanations:
        lines.extend(
            [
                f"### {record.index}. {record.number}",
                f"- Attribute: {record.attribute.value}",
                f"- Line {record.line_position}: {_line_name(record.line_value)}, "
                f"{'changing' if record.changing else 'stable'}",
                f"- Trigram: {record.category.label}",
                f"- Relation: {record.relation_label}",
                "",
                record.relation_text,
                "",
                record.change_note,
                "",
                record.reason,
                "",
            ]
        )

    if result.alternatives:
        lines.extend(["## Alternatives", ""])
        for number, options in result.alternatives.items():
            rendered = ", ".join(str(option) for option in options) or "none"
            lines.append(f"- {number}: {rendered}")
        lines.append("")

    return "\n".join(lines)


def _changing_summary(figure: Figure) -> str:
    positions = figure.changing_positions
    return ", ".join(str(pos) for pos in positions) if positions else "none"


def _line_name(value: int) -> str:
    return "yang" if value == 1 else "yin"
