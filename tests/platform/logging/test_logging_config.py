"""Tests for logger bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from trackmeta.platform.logging import LOGGER_NAME, ScanRichHandler, logger, setup_logger


def test_import_installs_console_handler_only() -> None:
    assert logger.name == LOGGER_NAME == "trackmeta"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "trackmeta.log"
    try:
        configured = setup_logger(log_file=log_file, console_level=logging.WARNING)

        console_handlers = [h for h in configured.handlers if isinstance(h, ScanRichHandler)]
        file_handlers = [
            h for h in configured.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.WARNING
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 10 * 1024 * 1024
        assert file_handlers[0].backupCount == 5

        configured.error("written to disk")
        file_handlers[0].flush()
        assert "ERROR - written to disk" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_setup_logger_replaces_previous_handlers(tmp_path: Path) -> None:
    try:
        _ = setup_logger(log_file=tmp_path / "a.log")
        configured = setup_logger()
        assert len(configured.handlers) == 1
        assert isinstance(configured.handlers[0], ScanRichHandler)
    finally:
        _ = setup_logger()
