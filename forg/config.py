"""Run configuration for forg."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet

from .errors import ConfigurationWarning

PROGRAM_NAME = "forg"
DEFAULT_DEPTH = 1


def coerce_depth(raw: object) -> int:
    """Return *raw* as a recursion depth.

    Raises :class:`ConfigurationWarning` when the value is not an integer or
    is smaller than one; callers fall back to :data:`DEFAULT_DEPTH`.
    """

    try:
        depth = int(str(raw).strip())
    except ValueError:
        raise ConfigurationWarning(f"invalid depth value {raw!r}, using default") from None
    if depth < 1:
        raise ConfigurationWarning(f"depth must be >= 1 (got {depth}), using default")
    return depth


@dataclass(frozen=True)
class OrganizeOptions:
    """Options that control a single organize run.

    Built once by the caller and read-only for the rest of the run.
    """

    start_dir: Path = field(default_factory=Path.cwd)
    prefix: str = ""
    verbose: bool = False
    dry_run: bool = False
    recursive: bool = False
    max_depth: int = DEFAULT_DEPTH
    program_name: str = PROGRAM_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_dir", Path(self.start_dir))
        if self.max_depth < 1:
            raise ConfigurationWarning(f"max_depth must be >= 1, got {self.max_depth}")

    @property
    def program_names(self) -> FrozenSet[str]:
        """Names of the running program's own file, never organized."""

        return frozenset({PROGRAM_NAME, self.program_name})

    def folder_name(self, category: str) -> str:
        return f"{self.prefix}{category}"

    def destination_for(self, category: str) -> Path:
        return self.start_dir / self.folder_name(category)
