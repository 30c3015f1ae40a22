from __future__ import annotations

import json
from pathlib import Path

import pytest

from forg.models import MoveOutcome, MoveStatus, Report, TraversalError
from forg.reporting import render_outcomes, render_report, write_report


def build_report(dry_run: bool = False) -> Report:
    report = Report(dry_run=dry_run, total_candidates=4, skipped_count=2)
    report.record(MoveOutcome(Path("/src/b.mp4"), "Videos", MoveStatus.MOVED, Path("/src/Videos/b.mp4")))
    report.record(MoveOutcome(Path("/src/a.png"), "Images", MoveStatus.MOVED, Path("/src/Images/a.png")))
    report.record(MoveOutcome(Path("/src/c.png"), "Images", MoveStatus.MOVED, Path("/src/Images/c.png")))
    report.record(
        MoveOutcome(Path("/src/d.txt"), "Documents", MoveStatus.ERRORED, reason="Error moving d.txt: denied")
    )
    return report


def test_report_counters() -> None:
    report = build_report()
    assert report.counts_by_category == {"Videos": 1, "Images": 2}
    assert report.moved_count == 3
    assert report.errored_count == 1
    assert report.skipped_count == 2
    assert report.has_errors is True


def test_text_report_lists_categories_in_declared_order() -> None:
    text = render_report(build_report())
    lines = text.splitlines()
    assert lines[0] == "Organization Complete!"
    images = next(index for index, line in enumerate(lines) if line.startswith("Images"))
    videos = next(index for index, line in enumerate(lines) if line.startswith("Videos"))
    assert images < videos
    assert f"{'Total':<20}4" in lines
    assert "Skipped: 2 files/directories" in lines
    assert "Errors: 1" in lines


def test_markdown_and_json_reports() -> None:
    report = build_report(dry_run=True)
    report.traversal_errors.append(TraversalError(Path("/src/locked"), "Permission denied"))

    markdown = render_report(report, "markdown")
    assert "| Images | 2 |" in markdown
    assert "## Traversal errors" in markdown

    payload = json.loads(render_report(report, "json"))
    assert payload["dry_run"] is True
    assert payload["totals"]["moved"] == 3
    assert payload["totals"]["traversal_errors"] == 1
    assert payload["outcomes"][3]["status"] == "errored"


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        render_report(Report(), "xml")


def test_render_outcomes_marks_dry_run() -> None:
    lines = render_outcomes(build_report(dry_run=True)).splitlines()
    assert lines[0] == "  → b.mp4 -> Videos"
    assert lines[3] == "  ✗ Error moving d.txt: denied"
    assert render_outcomes(build_report()).splitlines()[1] == "  ✓ a.png -> Images"


def test_write_report(tmp_path: Path) -> None:
    path = write_report(build_report(), tmp_path / "out" / "report.json")
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["categories"] == {"Videos": 1, "Images": 2}
