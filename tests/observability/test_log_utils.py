"""
Test suite for logging helpers and correlation ID propagation.

System role: Verification of observability utilities
"""

import logging

import pytest

from flowchart_mermaid.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from flowchart_mermaid.observability.log_utils import (
    log_with_context,
    mask_secret,
    safe_log_value,
)
from flowchart_mermaid.observability.logger import CorrelationIdFilter, configure_logging


class TestMaskSecret:
    """Test suite for mask_secret."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "<unset>"),
            ("", "<unset>"),
            ("sk-short", "***"),
            ("sk-abcdefghijklmnop", "sk-a***"),
        ],
    )
    def test_should_mask(self, value, expected) -> None:
        assert mask_secret(value) == expected


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_should_summarize_collections(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_should_truncate_long_values(self) -> None:
        result = safe_log_value("x" * 600, max_length=10)
        assert result.startswith("xxxxxxxxxx...")
        assert "600 total" in result


class TestLogWithContext:
    """Test suite for log_with_context."""

    def test_should_mask_credential_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test keys named like credentials never reach the record verbatim."""
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "calling upstream", api_key="sk-abcdefghijklmnop", model="gpt-4.1")

        record = caplog.records[-1]
        assert record.api_key == "sk-a***"
        assert record.model == "gpt-4.1"
        assert "sk-abcdefghijklmnop" not in caplog.text


class TestCorrelation:
    """Test suite for correlation ID context."""

    def test_should_set_and_clear(self) -> None:
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_should_generate_when_missing(self) -> None:
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated
        clear_correlation_id()

    def test_filter_should_attach_id(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-9")
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            clear_correlation_id()
        assert record.correlation_id == "req-9"

    def test_configure_logging_should_quiet_http_client_loggers(self) -> None:
        """Test httpx request lines (which can carry ?key=) are not logged at INFO."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("DEBUG")
            assert logging.getLogger("httpx").level == logging.WARNING
            assert logging.getLogger("httpcore").level == logging.WARNING
            assert root.level == logging.DEBUG
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
