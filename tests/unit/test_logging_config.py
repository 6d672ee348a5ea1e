"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

from opentelemetry.trace import INVALID_SPAN, NonRecordingSpan, SpanContext, TraceFlags

from ndc_client.logging_config import get_logger, setup_logging, trace_log_fields


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_transport_loggers_quiet_unless_debugging(self):
        setup_logging(level="INFO")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

        setup_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_setup_logging_json_file(self, temp_dir: Path):
        """Test setup_logging writes JSON lines to a file."""
        log_file = temp_dir / "logs" / "client.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        get_logger("test").info("test_message", key="value")

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["event"] == "test_message"
        assert entry["key"] == "value"
        assert entry["level"] == "info"
        assert entry["logger"] == "ndc_client.test"
        assert "timestamp" in entry

    def test_setup_logging_respects_level(self, temp_dir: Path):
        log_file = temp_dir / "client.log"
        setup_logging(level="WARNING", log_file=log_file)

        logger = get_logger("test")
        logger.info("hidden_message")
        logger.warning("shown_message")

        content = log_file.read_text()
        assert "hidden_message" not in content
        assert "shown_message" in content

    def test_setup_logging_console_format(self, temp_dir: Path):
        log_file = temp_dir / "client.log"
        setup_logging(level="INFO", log_file=log_file, json_format=False)

        get_logger("test").info("console_message", key="value")

        content = log_file.read_text()
        assert "console_message" in content
        assert "key=value" in content


class TestGetLogger:
    def test_prefixes_package_name(self):
        setup_logging()
        logger = get_logger("dispatch")
        assert hasattr(logger, "info") and hasattr(logger, "bind")

    def test_module_name_is_kept(self, temp_dir: Path):
        log_file = temp_dir / "client.log"
        setup_logging(log_file=log_file)

        get_logger("ndc_client.dispatcher").info("named")

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["logger"] == "ndc_client.dispatcher"


class TestTraceLogFields:
    def test_no_span(self):
        assert trace_log_fields(None) == {}

    def test_invalid_span(self):
        assert trace_log_fields(INVALID_SPAN) == {}

    def test_valid_span(self):
        span = NonRecordingSpan(
            SpanContext(
                trace_id=0x0AF7651916CD43DD8448EB211C80319C,
                span_id=0x00F067AA0BA902B7,
                is_remote=False,
                trace_flags=TraceFlags(TraceFlags.SAMPLED),
            )
        )
        assert trace_log_fields(span) == {
            "trace_id": "0af7651916cd43dd8448eb211c80319c",
            "span_id": "00f067aa0ba902b7",
        }
