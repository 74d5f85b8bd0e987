"""Unit tests for logging helpers."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from retailops.core.logging import configure_logfire, log_with_context, span


@pytest.mark.unit
class TestConfigureLogfire:
    """Tests for configure_logfire function."""

    def test_configures_service(self):
        """Test Logfire is configured for this service and only sends with a token."""
        with patch("retailops.core.logging.logfire") as mock_logfire:
            configure_logfire()

        mock_logfire.configure.assert_called_once()
        kwargs = mock_logfire.configure.call_args.kwargs
        assert kwargs["service_name"] == "retailops"
        assert kwargs["send_to_logfire"] == "if-token-present"


@pytest.mark.unit
class TestSpan:
    """Tests for span function."""

    def test_creates_named_span(self):
        """Test span delegates to logfire.span with the given name."""
        with patch("retailops.core.logging.logfire") as mock_logfire:
            result = span("product_search_service.search_products")

        mock_logfire.span.assert_called_once_with("product_search_service.search_products")
        assert result is mock_logfire.span.return_value


@pytest.mark.unit
class TestLogWithContext:
    """Tests for log_with_context function."""

    def test_passes_context_as_extra(self):
        """Test context fields are passed as logging extras."""
        logger = MagicMock(spec=logging.Logger)

        log_with_context(logger, "INFO", "Search ranked", query="kiwi", result_count=3)

        logger.info.assert_called_once_with("Search ranked", extra={"query": "kiwi", "result_count": 3})

    def test_record_carries_context(self, caplog):
        """Test extras land on the emitted log record."""
        logger = logging.getLogger("retailops.tests")

        with caplog.at_level(logging.DEBUG, logger="retailops.tests"):
            log_with_context(logger, "debug", "Search ranked", match_count=2)

        assert caplog.records[0].match_count == 2
