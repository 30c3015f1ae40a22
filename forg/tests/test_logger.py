from __future__ import annotations

import json
import logging
from pathlib import Path

from forg.logger import configure_logging, log_event


def read_last(log_file: Path, logger: logging.Logger) -> dict:
    for handler in logger.handlers:
        handler.flush()
    return json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])


def test_log_event_sanitizes_home_directory(tmp_path: Path) -> None:
    log_file = tmp_path / "forg.log"
    logger = configure_logging(log_file, level=logging.INFO)
    sensitive_path = Path.home() / "Documents" / "secret.txt"
    log_event(
        logger,
        level=logging.INFO,
        action="test",
        message="Processing",
        path=sensitive_path,
        category="Documents",
    )
    payload = read_last(log_file, logger)
    assert payload["path"].startswith("~/")
    assert payload["category"] == "Documents"
    assert payload["action"] == "test"


def test_debug_events_respect_level(tmp_path: Path) -> None:
    log_file = tmp_path / "forg.log"
    logger = configure_logging(log_file, level=logging.INFO)
    log_event(logger, level=logging.INFO, action="first", message="kept")
    log_event(logger, level=logging.DEBUG, action="second", message="dropped")
    assert read_last(log_file, logger)["action"] == "first"
