from __future__ import annotations

from pathlib import Path

from forg.config import OrganizeOptions
from forg.models import MoveStatus
from forg.organizer import Organizer, run
from forg.scanner import FileScanner


def create_file(path: Path, content: str = "content") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def build_mixed_directory(root: Path) -> Path:
    create_file(root / "doc.pdf")
    create_file(root / "photo.JPG")
    create_file(root / "run.sh")
    create_file(root / ".hidden")
    create_file(root / "build" / "output.o")
    return root


def test_default_run_sorts_top_level_files(tmp_path: Path) -> None:
    root = build_mixed_directory(tmp_path)

    report = run(OrganizeOptions(start_dir=root))

    assert report.counts_by_category == {"Documents": 1, "Images": 1, "Code": 1}
    assert report.total_candidates == 3
    assert report.skipped_count == 2
    assert report.errored_count == 0
    assert (root / "Documents" / "doc.pdf").exists()
    assert (root / "Images" / "photo.JPG").exists()
    assert (root / "Code" / "run.sh").exists()
    assert (root / ".hidden").exists()
    assert (root / "build" / "output.o").exists()


def test_recursive_collision_gets_counter_suffix(tmp_path: Path) -> None:
    create_file(tmp_path / "img.png", "top")
    create_file(tmp_path / "album" / "img.png", "nested")
    options = OrganizeOptions(start_dir=tmp_path, recursive=True, max_depth=2)

    report = run(options)

    images = tmp_path / "Images"
    assert {path.name for path in images.iterdir()} == {"img.png", "img_1.png"}
    assert {path.read_text(encoding="utf-8") for path in images.iterdir()} == {"top", "nested"}
    assert report.counts_by_category == {"Images": 2}


def test_depth_boundary(tmp_path: Path) -> None:
    create_file(tmp_path / "a" / "one.txt")
    create_file(tmp_path / "a" / "b" / "two.txt")

    shallow = FileScanner(OrganizeOptions(start_dir=tmp_path, recursive=True, max_depth=1)).collect()
    one_level = FileScanner(OrganizeOptions(start_dir=tmp_path, recursive=True, max_depth=2)).collect()

    assert len(shallow) == 0
    assert [entry.name for entry in one_level] == ["one.txt"]


def test_prefix_only_changes_folder_names(tmp_path: Path) -> None:
    root = build_mixed_directory(tmp_path)
    options = OrganizeOptions(start_dir=root, prefix="backup_", dry_run=True)

    plain = run(OrganizeOptions(start_dir=root, dry_run=True))
    prefixed = run(options)

    assert prefixed.counts_by_category == plain.counts_by_category
    assert {outcome.destination.parent.name for outcome in prefixed.outcomes} == {
        "backup_Documents",
        "backup_Images",
        "backup_Code",
    }


def test_dry_run_preview_matches_real_run(tmp_path: Path) -> None:
    root = build_mixed_directory(tmp_path)
    create_file(root / "Images" / "photo.JPG", "already here")
    options = OrganizeOptions(start_dir=root)

    scan = FileScanner(options).collect()
    preview = Organizer(OrganizeOptions(start_dir=root, dry_run=True)).organize(scan)
    actual = Organizer(options).organize(scan)

    assert [(o.source, o.destination) for o in preview.outcomes] == [
        (o.source, o.destination) for o in actual.outcomes
    ]
    assert all(outcome.status is MoveStatus.MOVED for outcome in actual.outcomes)
    assert (root / "Images" / "photo_1.JPG").exists()
