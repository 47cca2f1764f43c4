"""Tests for error handling utilities."""

import logging
from unittest.mock import patch

import pytest

from utils import error_handling
from utils.error_handling import format_error_message, log_exception, timed


class TestFormatErrorMessage:
    def test_basic_error_message(self):
        assert format_error_message(ValueError("Invalid value")) == "ValueError: Invalid value"

    def test_with_context(self):
        result = format_error_message(ValueError("Invalid value"), context="Loading report")
        assert result == "Loading report - ValueError: Invalid value"

    def test_context_and_no_type(self):
        result = format_error_message(ValueError("Invalid value"), context="Loading report", include_type=False)
        assert result == "Loading report - Invalid value"

    def test_empty_error_message(self):
        assert format_error_message(ValueError("")) == "ValueError"

    def test_none_error_message(self):
        assert format_error_message(Exception("None")) == "Exception"


class TestLogException:
    def test_logs_error_with_context(self):
        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(ValueError("Test error"), "Test context")

            mock_logger.log.assert_called_once()
            args, kwargs = mock_logger.log.call_args
            assert args[0] == logging.ERROR
            assert args[2] == "Test context"
            assert kwargs["exc_info"] is True
            assert kwargs["extra"]["error_type"] == "ValueError"

    def test_custom_level_and_extra(self):
        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(KeyError("k"), "ctx", extra={"file": "Foo.java"}, level=logging.DEBUG)

            args, kwargs = mock_logger.log.call_args
            assert args[0] == logging.DEBUG
            assert kwargs["extra"]["file"] == "Foo.java"
            assert kwargs["extra"]["event"] == "error"


class TestTimed:
    def test_passthrough_when_disabled(self, monkeypatch):
        monkeypatch.setattr(error_handling, "PERF_DEBUG", False)

        @timed
        def add(a, b):
            return a + b

        assert add(1, 2) == 3
        assert add.__name__ == "add"

    def test_logs_when_enabled(self, monkeypatch):
        monkeypatch.setattr(error_handling, "PERF_DEBUG", True)

        @timed
        def boom():
            raise RuntimeError("x")

        with patch("utils.error_handling.logger") as mock_logger:
            with pytest.raises(RuntimeError):
                boom()
            assert "PERF" in mock_logger.debug.call_args[0][0]
