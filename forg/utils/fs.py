"""Filesystem helpers used by forg."""
from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

MAX_ATTEMPTS = 1000


def ensure_directory(path: Path) -> Path:
    """Ensure that *path* exists as a directory and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def split_name(filename: str) -> tuple[str, str]:
    """Split *filename* into base and extension, the extension keeping its dot.

    A leading dot does not start an extension, so ``.bashrc`` has none.
    """

    index = filename.rfind(".")
    if index > 0:
        return filename[:index], filename[index:]
    return filename, ""


def unique_path(
    directory: Path,
    filename: str,
    *,
    reserved: set[Path] | None = None,
    clock: Callable[[], float] = time.time,
) -> Path:
    """Return a collision-free path for *filename* inside *directory*.

    The plain name is used when free. Otherwise ``base_1.ext``,
    ``base_2.ext`` and so on are probed up to :data:`MAX_ATTEMPTS`; past that
    the name falls back to ``base_<epoch-ms>.ext`` without any check. A path
    counts as taken when it exists on disk or is in ``reserved``; the chosen
    path is added to ``reserved`` when supplied.
    """

    reserved_paths: set[Path] = reserved if reserved is not None else set()

    def taken(path: Path) -> bool:
        return path in reserved_paths or path.exists()

    candidate = directory / filename
    if taken(candidate):
        base, extension = split_name(filename)
        for counter in range(1, MAX_ATTEMPTS + 1):
            candidate = directory / f"{base}_{counter}{extension}"
            if not taken(candidate):
                break
        else:
            timestamp = int(clock() * 1000)
            candidate = directory / f"{base}_{timestamp}{extension}"
    reserved_paths.add(candidate)
    return candidate


__all__ = ["MAX_ATTEMPTS", "ensure_directory", "split_name", "unique_path"]
