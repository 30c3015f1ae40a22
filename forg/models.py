"""Core dataclasses shared across forg modules."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True, slots=True)
class CandidateEntry:
    """A file selected for relocation, paired with its category."""

    source: Path
    category: str

    @property
    def name(self) -> str:
        return self.source.name


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """An entry the traversal excluded, with the rule that excluded it."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class TraversalError:
    """A directory that could not be listed during traversal."""

    path: Path
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": str(self.path), "message": self.message}


@dataclass(slots=True)
class ScanResult:
    """Materialized traversal output.

    Iterating a scan result yields its :class:`CandidateEntry` objects in
    collection order.
    """

    candidates: tuple[CandidateEntry, ...]
    skipped: list[SkippedEntry] = field(default_factory=list)
    errors: list[TraversalError] = field(default_factory=list)

    def __iter__(self) -> Iterator[CandidateEntry]:
        return iter(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)


class MoveStatus(str, Enum):
    """Final state of a candidate once the organizer has handled it."""

    MOVED = "moved"
    SKIPPED = "skipped"
    ERRORED = "errored"


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of organizing a single candidate."""

    source: Path
    category: str
    status: MoveStatus
    destination: Path | None = None
    reason: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "source": str(self.source),
            "category": self.category,
            "status": self.status.value,
            "destination": str(self.destination) if self.destination else None,
            "reason": self.reason,
        }


@dataclass(slots=True)
class Report:
    """Aggregated statistics for one organize run."""

    counts_by_category: dict[str, int] = field(default_factory=dict)
    skipped_count: int = 0
    errored_count: int = 0
    total_candidates: int = 0
    dry_run: bool = False
    outcomes: list[MoveOutcome] = field(default_factory=list)
    traversal_errors: list[TraversalError] = field(default_factory=list)

    def record(self, outcome: MoveOutcome) -> None:
        """Accumulate *outcome* into the counters."""

        self.outcomes.append(outcome)
        if outcome.status is MoveStatus.MOVED:
            self.counts_by_category[outcome.category] = (
                self.counts_by_category.get(outcome.category, 0) + 1
            )
        elif outcome.status is MoveStatus.SKIPPED:
            self.skipped_count += 1
        else:
            self.errored_count += 1

    @property
    def moved_count(self) -> int:
        return sum(self.counts_by_category.values())

    @property
    def has_errors(self) -> bool:
        return self.errored_count > 0 or bool(self.traversal_errors)

    def to_dict(self) -> dict[str, object]:
        """Serialize the report for JSON output."""

        return {
            "dry_run": self.dry_run,
            "categories": dict(self.counts_by_category),
            "totals": {
                "candidates": self.total_candidates,
                "moved": self.moved_count,
                "skipped": self.skipped_count,
                "errors": self.errored_count,
                "traversal_errors": len(self.traversal_errors),
            },
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
            "traversal_errors": [error.to_dict() for error in self.traversal_errors],
        }
