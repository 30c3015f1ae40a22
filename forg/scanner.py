"""Directory traversal producing the files to organize."""
from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

from .categories import classify
from .config import OrganizeOptions
from .errors import DirectoryReadError
from .filters import is_program_file, skip_reason
from .logger import get_logger, log_event
from .models import CandidateEntry, ScanResult, SkippedEntry, TraversalError

REASON_DIRECTORY = "directory"
REASON_DEPTH = "depth"
REASON_PROGRAM = "program"


class FileScanner:
    """Walks the start directory and collects :class:`CandidateEntry` objects.

    The whole listing is materialized before anything is moved. Depth counts
    from 1 at the start directory; a directory at depth ``d`` is descended
    into only while ``d < max_depth``.
    """

    def __init__(
        self,
        options: OrganizeOptions,
        logger: logging.Logger | None = None,
    ) -> None:
        self.options = options
        self.logger = logger or get_logger("scanner")

    def collect(self) -> ScanResult:
        """Scan ``options.start_dir`` and return a :class:`ScanResult`.

        Raises :class:`DirectoryReadError` when the start directory itself
        cannot be listed; unreadable subdirectories are recorded instead.
        """

        result = ScanResult(candidates=())
        candidates: list[CandidateEntry] = []
        self._collect_dir(self.options.start_dir, 1, candidates, result)
        result.candidates = tuple(candidates)
        return result

    def _collect_dir(
        self,
        directory: Path,
        depth: int,
        candidates: list[CandidateEntry],
        result: ScanResult,
    ) -> None:
        for entry in self._list_directory(directory):
            path = Path(entry.path)
            if entry.is_dir():
                self._visit_directory(path, depth, candidates, result)
            else:
                self._visit_file(path, candidates, result)

    def _visit_directory(
        self,
        path: Path,
        depth: int,
        candidates: list[CandidateEntry],
        result: ScanResult,
    ) -> None:
        if not self.options.recursive:
            self._skip(result, path, REASON_DIRECTORY)
            return

        reason = skip_reason(path.name)
        if reason:
            self._skip(result, path, reason)
            return

        if depth >= self.options.max_depth:
            self._skip(result, path, REASON_DEPTH)
            return

        try:
            self._collect_dir(path, depth + 1, candidates, result)
        except DirectoryReadError as exc:
            result.errors.append(TraversalError(path, str(exc)))
            log_event(
                self.logger,
                level=logging.WARNING,
                action="scan.error",
                message=str(exc),
                path=path,
            )

    def _visit_file(
        self,
        path: Path,
        candidates: list[CandidateEntry],
        result: ScanResult,
    ) -> None:
        name = path.name
        if is_program_file(name, self.options.program_names):
            self._skip(result, path, REASON_PROGRAM)
            return

        reason = skip_reason(name)
        if reason:
            self._skip(result, path, reason)
            return

        candidates.append(CandidateEntry(source=path, category=classify(name)))

    def _list_directory(self, directory: Path) -> list[os.DirEntry[str]]:
        try:
            with os.scandir(directory) as entries:
                return list(entries)
        except OSError as exc:
            raise DirectoryReadError(
                f"Error accessing directory {directory}: {exc.strerror or exc}",
                directory,
            ) from exc

    def _skip(self, result: ScanResult, path: Path, reason: str) -> None:
        result.skipped.append(SkippedEntry(path, reason))
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="scan.skip",
            message=f"Skipping {path.name} ({reason})",
            path=path,
            extra={"reason": reason},
        )


def collect(start_dir: Path | str, options: OrganizeOptions | None = None) -> ScanResult:
    """Collect candidates under *start_dir* using *options*."""

    if options is None:
        options = OrganizeOptions(start_dir=Path(start_dir))
    elif Path(start_dir) != options.start_dir:
        options = replace(options, start_dir=Path(start_dir))
    return FileScanner(options).collect()


__all__ = ["FileScanner", "collect"]
