"""Tests for structured logging utilities."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from utils import logging_utils


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_writes_json(tmp_path, monkeypatch, restore_root_logger):
    log_file = tmp_path / "logs" / "structured.log"
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)

    configured = logging_utils.setup_logging(log_file=log_file, console=False)
    assert configured == log_file

    logging.getLogger("tests.logging").info(
        "Border calculation", extra={"event": "layout", "print": "9x6"}
    )

    contents = log_file.read_text().strip().splitlines()
    assert contents
    payload = json.loads(contents[-1])
    assert payload["message"] == "Border calculation"
    assert payload["logger"] == "tests.logging"
    assert payload["level"] == "INFO"
    assert payload["event"] == "layout"
    assert payload["print"] == "9x6"
    assert "args" not in payload


def test_setup_logging_runs_once(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    first = tmp_path / "first.log"
    logging_utils.setup_logging(log_file=first, console=False)
    handler_count = len(logging.getLogger().handlers)

    second = tmp_path / "second.log"
    logging_utils.setup_logging(log_file=second, console=False)

    assert len(logging.getLogger().handlers) == handler_count
    assert not second.exists()


def test_formatter_includes_exception():
    formatter = logging_utils.StructuredFormatter()
    try:
        raise ValueError("bad border")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    payload = json.loads(formatter.format(record))
    assert "bad border" in payload["exc_info"]


def test_default_log_file_name():
    assert logging_utils.DEFAULT_LOG_FILE.name == "easel.log"
