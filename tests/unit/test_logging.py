"""Unit tests for femtologging integration helpers.

Run with:
    pytest tests/unit/test_logging.py
"""

from __future__ import annotations

import pytest

from sponsorhook.logging import (
    configure_logging,
    log_error,
    log_exception,
    log_info,
    log_warning,
    normalize_log_level,
)
from tests.helpers.log_capture import CapturedRecord, RecordingLogger


@pytest.mark.parametrize(
    ("raw", "expected_level", "expected_invalid"),
    [
        ("warning", "WARNING", False),
        (" debug ", "DEBUG", False),
        ("TRACE", "TRACE", False),
        (None, "INFO", True),
        ("", "INFO", True),
        ("verbose", "INFO", True),
    ],
)
def test_normalize_log_level(
    raw: str | None, expected_level: str, *, expected_invalid: bool
) -> None:
    """Known levels are upper-cased; anything else falls back to INFO."""
    assert normalize_log_level(raw) == (expected_level, expected_invalid)


def test_log_info_interpolates() -> None:
    """log_info formats the template before logging."""
    logger = RecordingLogger()
    log_info(logger, "relayed %s (%d)", "alice", 10)
    assert logger.records == [CapturedRecord("INFO", "relayed alice (10)")]


def test_template_without_args_is_literal() -> None:
    """A template without arguments is logged as-is, percent signs included."""
    logger = RecordingLogger()
    log_warning(logger, "100% done")
    assert logger.messages("WARNING") == ["100% done"]


def test_log_error_forwards_exc_info() -> None:
    """log_error attaches exc_info when given."""
    logger = RecordingLogger()
    exc = RuntimeError("boom")
    log_error(logger, "failed: %s", "send", exc_info=exc)
    assert logger.records == [CapturedRecord("ERROR", "failed: send", exc)]


def test_log_exception_attaches_exception() -> None:
    """log_exception logs at ERROR with the exception attached."""
    logger = RecordingLogger()
    exc = ValueError("bad")
    log_exception(logger, "relay crashed", exc)
    assert logger.records == [CapturedRecord("ERROR", "relay crashed", exc)]


@pytest.mark.parametrize(
    ("raw", "expected_level", "expected_invalid"),
    [("debug", "DEBUG", False), ("loud", "INFO", True)],
)
def test_configure_logging(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected_level: str,
    *,
    expected_invalid: bool,
) -> None:
    """configure_logging installs the normalized level."""
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("sponsorhook.logging.basicConfig", fake_basic_config)

    assert configure_logging(raw) == (expected_level, expected_invalid)
    assert captured == {"level": expected_level, "force": False}
