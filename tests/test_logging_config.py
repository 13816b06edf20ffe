"""Tests for umlgen.logging_config."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from umlgen.logging_config import get_logger, setup_logging


def test_get_logger_places_names_under_package() -> None:
    assert get_logger().name == "umlgen"
    assert get_logger("umlgen.codegen").name == "umlgen.codegen"
    assert get_logger("tests").name == "umlgen.tests"


def test_setup_logging_is_idempotent() -> None:
    setup_logging()
    logger = setup_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.handlers[0].level == logging.DEBUG
    assert logger.propagate is False


def test_quiet_console_still_logs_debug_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = setup_logging(log_file=log_file)

    assert logger.handlers[0].level == logging.WARNING
    get_logger("umlgen.test").debug("walking package %s", "shop")
    logger.handlers[1].flush()

    assert "walking package shop" in log_file.read_text(encoding="utf-8")
