"""Extension based file classification."""
from __future__ import annotations

from typing import Iterator, Tuple

OTHERS = "Others"

# Lookup scans this tuple in order; the first category listing an extension wins.
CATEGORY_TABLE: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Images", (
        "jpg", "jpeg", "png", "gif", "bmp", "tiff", "svg", "webp", "ico", "psd", "ai", "eps",
    )),
    ("Videos", (
        "mp4", "mkv", "avi", "mov", "wmv", "flv", "webm", "m4v", "mpeg", "mpg", "3gp", "rmvb",
    )),
    ("Audio", (
        "mp3", "wav", "flac", "aac", "ogg", "m4a", "wma", "aiff", "mid", "midi",
    )),
    ("Documents", (
        "pdf", "doc", "docx", "txt", "rtf", "odt", "xls", "xlsx", "ppt", "pptx", "csv", "md",
        "markdown", "log",
    )),
    ("Archives", (
        "zip", "rar", "7z", "tar", "gz", "bz2", "xz", "iso", "dmg", "pkg", "deb", "rpm",
    )),
    ("Code", (
        "cpp", "c", "h", "hpp", "py", "js", "ts", "html", "htm", "css", "scss", "java", "go",
        "rs", "rb", "php", "swift", "kt", "scala", "sh", "bash", "json", "xml", "yaml", "yml",
        "toml", "ini", "cfg", "conf",
    )),
    ("Executables", (
        "exe", "app", "bin", "msi", "run", "elf", "so", "dll", "dylib",
    )),
    ("Database", (
        "sql", "db", "sqlite", "mdb", "accdb", "frm", "ibd",
    )),
    ("Books", (
        "epub", "mobi", "azw", "azw3", "fb2", "djvu", "chm",
    )),
)


def get_file_extension(filename: str) -> str:
    """Return the lower-cased extension of *filename* without the dot.

    Names without a dot, or ending in one, have no extension.
    """

    _, dot, extension = filename.rpartition(".")
    if not dot or not extension:
        return ""
    return extension.lower()


def get_category(extension: str) -> str:
    if not extension:
        return OTHERS
    extension = extension.lower()
    for category, extensions in CATEGORY_TABLE:
        if extension in extensions:
            return category
    return OTHERS


def classify(filename: str) -> str:
    """Map *filename* to its category name, ``"Others"`` when unknown."""

    return get_category(get_file_extension(filename))


def category_names() -> tuple[str, ...]:
    """All category names in declaration order, ``"Others"`` last."""

    return tuple(category for category, _ in CATEGORY_TABLE) + (OTHERS,)


def iter_categories() -> Iterator[tuple[str, tuple[str, ...]]]:
    """Yield ``(category, extensions)`` pairs in declaration order."""

    yield from CATEGORY_TABLE


__all__ = [
    "CATEGORY_TABLE",
    "OTHERS",
    "category_names",
    "classify",
    "get_category",
    "get_file_extension",
    "iter_categories",
]
