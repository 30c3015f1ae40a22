from __future__ import annotations

import pytest

from forg.filters import SKIP_PATTERNS, is_program_file, should_skip, skip_reason


@pytest.mark.parametrize("name", sorted(SKIP_PATTERNS))
def test_skip_patterns_are_skipped(name: str) -> None:
    assert should_skip(name) is True
    assert should_skip(name, is_directory=True) is True


def test_hidden_names_are_skipped() -> None:
    assert should_skip(".hidden") is True
    assert should_skip(".env", is_directory=True) is True
    assert skip_reason(".hidden") == "hidden"
    assert skip_reason("node_modules") == "pattern"


@pytest.mark.parametrize("name", ["report.pdf", "builder", "my_build", "dist.zip", "Thumbs.db.bak", ""])
def test_ordinary_names_are_processed(name: str) -> None:
    assert should_skip(name) is False
    assert skip_reason(name) is None


def test_program_file_is_an_exact_name_match() -> None:
    assert is_program_file("forg", {"forg"})
    assert is_program_file("organize", {"forg", "organize"})
    assert not is_program_file("forg.txt", {"forg"})
