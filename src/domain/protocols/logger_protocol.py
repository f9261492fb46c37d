"""LoggerProtocol definition for structured logging.

Handlers and adapters log through this protocol so the backend (structlog)
stays swappable. Logs are structured: a short message plus key-value context.
Never log passwords or tokens.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("product_created", product_id=str(product.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Short event name or message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures needing attention."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            request_logger = logger.bind(trace_id=trace_id)
            request_logger.info("request_started")
        """
        ...
