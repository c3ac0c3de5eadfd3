"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error)
- Context binding
- Renderer selection (JSON vs console)
- Error details extraction

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

from unittest.mock import MagicMock, patch

import pytest

from validkit.infrastructure.logging.console_adapter import ConsoleAdapter


def _bound_logger(mock_structlog: MagicMock) -> MagicMock:
    return mock_structlog.wrap_logger.return_value.bind.return_value


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, method):
        """Test each level forwards message and structured context."""
        with patch("validkit.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            adapter = ConsoleAdapter()
            getattr(adapter, method)("legacy_5_digit_postal_code", postal_code="10001")

            getattr(_bound_logger(mock_structlog), method).assert_called_once_with(
                "legacy_5_digit_postal_code",
                postal_code="10001",
            )

    def test_error_includes_exception_details(self):
        """Test error() adds error_type and error_message."""
        with patch("validkit.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            adapter = ConsoleAdapter()
            adapter.error("catalog_lookup_failed", error=KeyError("x"), key="common.required")

            _bound_logger(mock_structlog).error.assert_called_once_with(
                "catalog_lookup_failed",
                key="common.required",
                error_type="KeyError",
                error_message="'x'",
            )

    def test_error_without_exception(self):
        """Test error() without an exception passes context unchanged."""
        with patch("validkit.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            adapter = ConsoleAdapter()
            adapter.error("failure", detail="x")

            _bound_logger(mock_structlog).error.assert_called_once_with("failure", detail="x")

    def test_logger_is_bound_to_library_name(self):
        """Test every record carries logger=validkit."""
        with patch("validkit.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            ConsoleAdapter()

            mock_structlog.wrap_logger.return_value.bind.assert_called_once_with(logger="validkit")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test renderer selection."""

    def test_json_renderer_when_requested(self):
        """Test use_json=True appends JSONRenderer."""
        with patch("validkit.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.wrap_logger.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        """Test default adapter uses the console renderer."""
        with patch("validkit.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.wrap_logger.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        """Test bind() returns a new adapter with bound context."""
        with patch("validkit.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            adapter = ConsoleAdapter()
            bound = adapter.bind(validator="postal_code")

            assert bound is not adapter
            assert isinstance(bound, ConsoleAdapter)
            _bound_logger(mock_structlog).bind.assert_called_once_with(validator="postal_code")

            bound.info("checked")
            _bound_logger(mock_structlog).bind.return_value.info.assert_called_once_with("checked")
