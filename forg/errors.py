"""Exception types raised while collecting and organizing files."""
from __future__ import annotations

from pathlib import Path


class OrganizerError(Exception):
    """Base class for forg errors that refer to a filesystem path."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DirectoryReadError(OrganizerError):
    """A directory could not be listed."""


class DestinationCreateError(OrganizerError):
    """A category folder could not be created."""


class MoveError(OrganizerError):
    """A file could not be renamed into its category folder."""


class ConfigurationWarning(OrganizerError):
    """Invalid option value that the caller replaces with a safe default."""


__all__ = [
    "ConfigurationWarning",
    "DestinationCreateError",
    "DirectoryReadError",
    "MoveError",
    "OrganizerError",
]
