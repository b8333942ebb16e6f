"""Tests for decoder logging."""

from __future__ import annotations

import logging

import pytest

from codec64 import InvalidCharacterError, InvalidLengthError, decode


def test_rejected_decode_is_silent(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a rejected decode writes nothing to stdout or stderr."""
    with pytest.raises(InvalidCharacterError):
        decode("Zm9v!")

    with pytest.raises(InvalidLengthError):
        decode("Zm9vY")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_successful_decode_does_not_log(caplog: pytest.LogCaptureFixture) -> None:
    """Test that successful calls emit no log records."""
    caplog.set_level(logging.DEBUG, logger="codec64")

    decode("Zm9vYmFy")

    assert caplog.records == []


@pytest.mark.parametrize(
    "encoded, error, reason",
    [
        ("Zm9v!", InvalidCharacterError, "invalid_character"),
        ("Zg==Zg", InvalidCharacterError, "data_after_padding"),
        ("Zm9vY", InvalidLengthError, "invalid_length"),
    ],
)
def test_rejected_decode_logs_reason(
    caplog: pytest.LogCaptureFixture,
    encoded: str,
    error: type[Exception],
    reason: str,
) -> None:
    """Test that each rejection emits a debug decode_rejected event with its reason."""
    caplog.set_level(logging.DEBUG, logger="codec64")

    with pytest.raises(error):
        decode(encoded)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.name == "codec64.decoder"
    assert record.levelno == logging.DEBUG
    assert "event='decode_rejected'" in record.getMessage()
    assert f"reason='{reason}'" in record.getMessage()


def test_package_installs_null_handler() -> None:
    """Test that the package logger carries a NullHandler."""
    handlers = logging.getLogger("codec64").handlers

    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
