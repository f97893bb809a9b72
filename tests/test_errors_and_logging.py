"""Error hierarchy and logging tests.

Tests cover:
- HandlerError subclasses and to_dict
- Structured log helpers with dict and LogContext fields
- configure_logging level handling
"""

from __future__ import annotations

import io
import logging

import pytest

from handler_dispatch import (
    HandlerError,
    InvalidDescriptorError,
    InvocationError,
    LogContext,
    TargetNotFoundError,
    configure_logging,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from handler_dispatch.logging import LOGGER_NAME, TRACE

# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize(
        "error_class",
        [InvalidDescriptorError, TargetNotFoundError, InvocationError],
    )
    def test_subclasses_handler_error(self, error_class):
        error = error_class("message")

        assert isinstance(error, HandlerError)
        assert str(error) == "message"
        assert error.metadata == {}

    def test_to_dict(self):
        error = TargetNotFoundError(
            'Handler class "Billing" not found.',
            metadata={"type_name": "Billing"},
        )

        assert error.to_dict() == {
            "error_type": "TargetNotFoundError",
            "message": 'Handler class "Billing" not found.',
            "metadata": {"type_name": "Billing"},
        }

    def test_resolution_errors_carry_metadata(self, resolver):
        with pytest.raises(TargetNotFoundError) as exc_info:
            resolver.resolve(["ExampleClass", "nonExistentMethod"])

        assert exc_info.value.metadata == {
            "type_name": "ExampleClass",
            "method_name": "nonExistentMethod",
        }


# =============================================================================
# Logging
# =============================================================================


class TestLogging:
    """Tests for the structured logging helpers."""

    def test_dict_fields_rendered(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_info("Resolved handler", {"descriptor": "Billing@charge"})

        record = caplog.records[-1]
        assert record.getMessage() == "Resolved handler [descriptor=Billing@charge]"
        assert record.fields == {"descriptor": "Billing@charge"}

    def test_log_context_fields(self, caplog):
        context = LogContext(descriptor="f", operation="resolve")

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            log_debug("Resolved handler", context)

        assert caplog.records[-1].fields == {"descriptor": "f", "operation": "resolve"}

    def test_no_fields(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            log_warn("plain")
            log_error("plain error")

        assert [r.getMessage() for r in caplog.records] == ["plain", "plain error"]
        assert caplog.records[0].fields == {}

    def test_trace_level(self, caplog):
        with caplog.at_level(TRACE, logger=LOGGER_NAME):
            log_trace("probe", {"name": "f"})

        assert caplog.records[-1].levelname == "TRACE"

    def test_below_level_is_dropped(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_trace("probe")
            log_debug("detail")

        assert caplog.records == []

    def test_resolver_logs_warning_on_invalid(self, resolver, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            with pytest.raises(InvalidDescriptorError):
                resolver.resolve("InvalidHandler")

        assert any(r.levelno == logging.WARNING for r in caplog.records)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_stream(self, clean_logger):
        stream = io.StringIO()

        configure_logging("debug", stream=stream)
        log_debug("hello", {"k": "v"})

        assert clean_logger.level == logging.DEBUG
        assert "hello [k=v]" in stream.getvalue()

    def test_repeated_calls_replace_handler(self, clean_logger):
        before = len(clean_logger.handlers)

        configure_logging("info")
        configure_logging("warn")

        assert len(clean_logger.handlers) == before + 1
        assert clean_logger.level == logging.WARNING

    def test_unknown_level(self, clean_logger):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("loud")
