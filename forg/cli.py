"""Command line interface for forg."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .categories import OTHERS, iter_categories
from .config import DEFAULT_DEPTH, PROGRAM_NAME, OrganizeOptions, coerce_depth
from .errors import ConfigurationWarning, DirectoryReadError
from .logger import configure_logging, get_logger, log_event
from .organizer import Organizer
from .reporting import render_outcomes, render_report, write_report
from .scanner import FileScanner

_PREVIEW_EXTENSIONS = 5
_MISSING_VALUE = object()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)
    logger = configure_logging(args.log_file, level=_log_level(args))
    for option in unknown:
        _warn(logger, f"Unknown option: {option}. Use '{PROGRAM_NAME} --help' for usage information.")

    options = build_options(args, logger)
    text_output = args.format == "text"
    if text_output:
        _print_header(options)

    try:
        scan = FileScanner(options, get_logger("scanner")).collect()
    except DirectoryReadError as exc:
        log_event(logger, level=logging.ERROR, action="scan.error", message=str(exc), path=exc.path)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not scan.candidates and text_output:
        print("No files to organize.")
        for error in scan.errors:
            print(f"Error: {error.message}", file=sys.stderr)
        return 1 if scan.errors else 0

    report = Organizer(options, get_logger("organizer")).organize(scan)

    if text_output and report.outcomes:
        print(render_outcomes(report))
        print()
    print(render_report(report, args.format))

    if args.report:
        destination = write_report(report, args.report)
        if text_output:
            print(f"\nReport written to {destination}")

    return 1 if report.has_errors else 0


def build_options(args: argparse.Namespace, logger: logging.Logger) -> OrganizeOptions:
    """Turn parsed arguments into a frozen :class:`OrganizeOptions`."""

    depth = DEFAULT_DEPTH
    prefix = args.prefix
    if prefix is _MISSING_VALUE:
        _warn(logger, "Warning: --prefix expects a value, using no prefix")
        prefix = ""
    if args.depth is _MISSING_VALUE:
        _warn(logger, "Warning: --depth expects a value, using default")
    elif args.depth is not None:
        try:
            depth = coerce_depth(args.depth)
        except ConfigurationWarning as exc:
            _warn(logger, f"Warning: {exc}")

    return OrganizeOptions(
        start_dir=Path(args.directory).expanduser().absolute(),
        prefix=prefix,
        verbose=args.verbose,
        dry_run=args.dry_run,
        recursive=args.recursive,
        max_depth=depth,
        program_name=_program_name(),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Organize files into categorized subfolders based on their extensions.",
        epilog=_categories_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to organize (default: current)")
    parser.add_argument("-r", "--recursive", action="store_true", help="Enable recursive directory traversal")
    parser.add_argument(
        "-d",
        "--depth",
        nargs="?",
        const=_MISSING_VALUE,
        metavar="N",
        help=f"Maximum depth for recursion (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "-p", "--prefix", nargs="?", const=_MISSING_VALUE, default="", help="Add a prefix to category folder names"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed progress information")
    parser.add_argument(
        "-n", "--dry-run", action="store_true", help="Preview what would be done without making changes"
    )
    parser.add_argument("--format", choices=["text", "markdown", "json"], default="text")
    parser.add_argument("--report", type=Path, help="Also write the JSON report to this file")
    parser.add_argument("--log-file", type=Path, help="Write structured logs to this file")
    parser.add_argument("--version", action="version", version=f"{PROGRAM_NAME} v{__version__}")
    return parser


def _categories_epilog() -> str:
    lines = ["Categories:"]
    for category, extensions in iter_categories():
        preview = ", ".join(extensions[:_PREVIEW_EXTENSIONS])
        if len(extensions) > _PREVIEW_EXTENSIONS:
            preview += f" + {len(extensions) - _PREVIEW_EXTENSIONS} more"
        lines.append(f"  {category}: {preview}")
    lines.append(f"  {OTHERS}: Files with unrecognized extensions")
    lines.extend(
        [
            "",
            "Examples:",
            f"  {PROGRAM_NAME}                    # Organize top-level files only",
            f"  {PROGRAM_NAME} -r --depth 2       # Organize files up to 2 levels deep",
            f"  {PROGRAM_NAME} -p backup_ -n      # Preview with 'backup_' prefix",
        ]
    )
    return "\n".join(lines)


def _print_header(options: OrganizeOptions) -> None:
    print(f"Organizing files in: {options.start_dir}")
    if options.recursive:
        print(f"Recursive mode enabled (max depth: {options.max_depth})")
    if options.prefix:
        print(f"Using prefix: {options.prefix}")
    if options.dry_run:
        print("[DRY RUN MODE - No changes will be made]")
    print()


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.log_file:
        return logging.INFO
    # Warnings and per-entry errors already reach the console through the printed report.
    return logging.CRITICAL


def _program_name() -> str:
    name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not name or name.endswith(".py"):
        return PROGRAM_NAME
    return name


def _warn(logger: logging.Logger, message: str) -> None:
    log_event(logger, level=logging.WARNING, action="config.warning", message=message)
    print(message, file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
