"""Rules deciding which directory entries are left alone."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional

SKIP_PATTERNS: FrozenSet[str] = frozenset({
    # version control
    ".git", ".svn", ".hg", ".bzr",
    # editors
    ".vscode", ".idea", ".vs",
    # build output
    "build", "dist", "node_modules", ".cache", "__pycache__",
    # OS metadata
    ".DS_Store", "Thumbs.db", ".Spotlight-V100", ".Trashes",
})

REASON_HIDDEN = "hidden"
REASON_PATTERN = "pattern"


def skip_reason(name: str) -> Optional[str]:
    """Return why *name* is skipped, or ``None`` when it is processed."""

    if name.startswith("."):
        return REASON_HIDDEN
    if name in SKIP_PATTERNS:
        return REASON_PATTERN
    return None


def should_skip(name: str, is_directory: bool = False) -> bool:
    """Return True if the file or directory *name* must not be processed.

    Files and directories follow the same rules: hidden names and exact
    matches against :data:`SKIP_PATTERNS`.
    """

    return skip_reason(name) is not None


def is_program_file(name: str, program_names: Iterable[str]) -> bool:
    """Return True if *name* is the running program's own file."""

    return name in set(program_names)
