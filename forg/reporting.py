"""Rendering helpers for forg reports."""
from __future__ import annotations

import json
from pathlib import Path

from .categories import category_names
from .models import MoveStatus, Report

_COLUMN = 20


def _ordered_counts(report: Report) -> list[tuple[str, int]]:
    order = {name: index for index, name in enumerate(category_names())}
    return sorted(
        report.counts_by_category.items(),
        key=lambda item: (order.get(item[0], len(order)), item[0]),
    )


def render_outcomes(report: Report) -> str:
    """One line per handled candidate, in processing order."""

    lines: list[str] = []
    for outcome in report.outcomes:
        name = outcome.source.name
        folder = outcome.destination.parent.name if outcome.destination else outcome.category
        if outcome.status is MoveStatus.MOVED:
            marker = "→" if report.dry_run else "✓"
            lines.append(f"  {marker} {name} -> {folder}")
        elif outcome.status is MoveStatus.ERRORED:
            lines.append(f"  ✗ {outcome.reason}")
        else:
            lines.append(f"  - {name} skipped ({outcome.reason})")
    return "\n".join(lines)


def render_report(report: Report, fmt: str = "text") -> str:
    """Render *report* according to *fmt*.

    ``fmt`` accepts ``"text"``, ``"markdown"`` or ``"json"``.
    """

    fmt = fmt.lower()
    if fmt == "json":
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)

    counts = _ordered_counts(report)

    if fmt == "markdown":
        lines = [
            "# forg Report",
            "",
            "## Summary",
            f"- Candidates: {report.total_candidates}",
            f"- Moved files: {report.moved_count}",
            f"- Skipped: {report.skipped_count}",
            f"- Errors: {report.errored_count}",
            "",
            "## Categories",
        ]
        if counts:
            lines.append("| Category | Files |")
            lines.append("| --- | --- |")
            for category, count in counts:
                lines.append(f"| {category} | {count} |")
        else:
            lines.append("(no files organized)")
        if report.traversal_errors:
            lines.extend(["", "## Traversal errors"])
            for error in report.traversal_errors:
                lines.append(f"- `{error.path}`: {error.message}")
        return "\n".join(lines)

    if fmt != "text":
        raise ValueError(f"Unsupported report format: {fmt}")

    title = "Dry Run Complete!" if report.dry_run else "Organization Complete!"
    lines = [
        title,
        "",
        f"{'Category':<{_COLUMN}}Files",
        "-" * 30,
    ]
    for category, count in counts:
        lines.append(f"{category:<{_COLUMN}}{count}")
    lines.append("-" * 30)
    lines.append(f"{'Total':<{_COLUMN}}{report.total_candidates}")

    if report.skipped_count:
        lines.extend(["", f"Skipped: {report.skipped_count} files/directories"])
    if report.errored_count:
        lines.extend(["", f"Errors: {report.errored_count}"])
    for error in report.traversal_errors:
        lines.append(f"Error: {error.message}")
    return "\n".join(lines)


def write_report(report: Report, destination: str | Path) -> Path:
    """Write *report* as JSON to *destination* and return the path."""

    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(report, "json"), encoding="utf-8")
    return path


__all__ = ["render_outcomes", "render_report", "write_report"]
