"""forg package exports."""

__version__ = "1.0.0"

from .categories import classify
from .cli import main as cli_main
from .config import OrganizeOptions
from .filters import should_skip
from .models import CandidateEntry, MoveOutcome, MoveStatus, Report, ScanResult
from .organizer import Organizer, organize, run
from .scanner import FileScanner, collect
from .utils.fs import unique_path

__all__ = [
    "CandidateEntry",
    "FileScanner",
    "MoveOutcome",
    "MoveStatus",
    "OrganizeOptions",
    "Organizer",
    "Report",
    "ScanResult",
    "classify",
    "cli_main",
    "collect",
    "organize",
    "run",
    "should_skip",
    "unique_path",
]
