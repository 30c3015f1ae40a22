"""Move collected files into their category folders."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import OrganizeOptions
from .errors import DestinationCreateError, MoveError, OrganizerError
from .filters import is_program_file
from .logger import get_logger, log_event
from .models import CandidateEntry, MoveOutcome, MoveStatus, Report, ScanResult
from .scanner import FileScanner
from .utils.fs import ensure_directory, unique_path


class FilesystemActions:
    """Mutating operations performed on the real filesystem."""

    def make_dirs(self, path: Path) -> None:
        try:
            ensure_directory(path)
        except OSError as exc:
            raise DestinationCreateError(
                f"Error creating directory {path.name}: {exc.strerror or exc}", path
            ) from exc

    def move(self, source: Path, destination: Path) -> None:
        # Plain rename: both paths live under the start directory.
        try:
            source.rename(destination)
        except OSError as exc:
            raise MoveError(
                f"Error moving {source.name}: {exc.strerror or exc}", source
            ) from exc


class DryRunActions(FilesystemActions):
    """Stand-in used for dry runs; every operation is a no-op."""

    def make_dirs(self, path: Path) -> None:
        return None

    def move(self, source: Path, destination: Path) -> None:
        return None


class Organizer:
    """Apply (or simulate) the moves for a list of candidates.

    Real runs and dry runs follow the same decision path: only the
    :class:`FilesystemActions` object differs.
    """

    def __init__(
        self,
        options: OrganizeOptions,
        logger: Optional[logging.Logger] = None,
        actions: Optional[FilesystemActions] = None,
    ) -> None:
        self.options = options
        self.logger = logger or get_logger("organizer")
        if actions is None:
            actions = DryRunActions() if options.dry_run else FilesystemActions()
        self.actions = actions

    def organize(self, candidates: Iterable[CandidateEntry] | ScanResult) -> Report:
        """Handle every candidate in order and return the run's :class:`Report`."""

        report = Report(dry_run=self.options.dry_run)
        if isinstance(candidates, ScanResult):
            report.skipped_count = len(candidates.skipped)
            report.traversal_errors = list(candidates.errors)
        entries = list(candidates)
        report.total_candidates = len(entries)

        reserved: set[Path] = set()
        for entry in entries:
            report.record(self._process(entry, reserved))
        return report

    def _process(self, entry: CandidateEntry, reserved: set[Path]) -> MoveOutcome:
        target_dir = self.options.destination_for(entry.category)

        if is_program_file(entry.name, self.options.program_names):
            return self._skipped(entry, "program file")
        if entry.source.parent == target_dir:
            return self._skipped(entry, "already in place")

        try:
            self.actions.make_dirs(target_dir)
        except DestinationCreateError as exc:
            log_event(
                self.logger,
                level=logging.ERROR,
                action="organize.mkdir_failed",
                message=str(exc),
                path=target_dir,
                category=entry.category,
            )
            return MoveOutcome(entry.source, entry.category, MoveStatus.ERRORED, reason=str(exc))

        destination = unique_path(target_dir, entry.name, reserved=reserved)

        try:
            self.actions.move(entry.source, destination)
        except OrganizerError as exc:
            reserved.discard(destination)
            log_event(
                self.logger,
                level=logging.ERROR,
                action="organize.move_failed",
                message=str(exc),
                path=entry.source,
                category=entry.category,
                extra={"destination": str(destination)},
            )
            return MoveOutcome(
                entry.source, entry.category, MoveStatus.ERRORED, destination, str(exc)
            )

        verb = "Would move" if self.options.dry_run else "Moved"
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="organize.move",
            message=f"{verb} {entry.source} -> {destination}",
            path=entry.source,
            category=entry.category,
            extra={"destination": str(destination), "dry_run": self.options.dry_run},
        )
        return MoveOutcome(entry.source, entry.category, MoveStatus.MOVED, destination)

    def _skipped(self, entry: CandidateEntry, reason: str) -> MoveOutcome:
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="organize.skip",
            message=f"Skipping {entry.name} ({reason})",
            path=entry.source,
            category=entry.category,
        )
        return MoveOutcome(entry.source, entry.category, MoveStatus.SKIPPED, reason=reason)


def organize(
    candidates: Iterable[CandidateEntry] | ScanResult,
    options: OrganizeOptions,
) -> Report:
    """Organize *candidates* according to *options*."""

    return Organizer(options).organize(candidates)


def run(options: OrganizeOptions, logger: Optional[logging.Logger] = None) -> Report:
    """Collect the files under ``options.start_dir`` and organize them.

    :class:`~forg.errors.DirectoryReadError` propagates when the start
    directory cannot be read.
    """

    scan = FileScanner(options, logger).collect()
    return Organizer(options, logger).organize(scan)


__all__ = ["DryRunActions", "FilesystemActions", "Organizer", "organize", "run"]
