"""
Error handling service for chart hosts and callbacks.
"""

import functools
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from ..utils.structured_logging import get_structured_logger
from .exceptions import ChartConfigurationError, ChartError, InvalidDataPointError, InvalidSelectionError

logger = get_structured_logger().get_logger(__name__)


class ErrorHandler:
    """Centralized error handling service."""

    def __init__(self):
        self.logger = logger

    def handle_exception(
        self,
        exception: Exception,
        context: Optional[str] = None,
        additional_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Handle exception with logging and user-friendly error message."""
        error_id = self._generate_error_id()

        self.logger.error(
            "Exception occurred",
            error_id=error_id,
            error_type=type(exception).__name__,
            context=context or "unknown context",
            details=additional_data or {},
            operation="handle_exception",
        )
        return {
            "success": False,
            "error_id": error_id,
            "message": self._get_user_friendly_message(exception),
            "type": type(exception).__name__,
            "timestamp": datetime.now().isoformat(),
        }

    def handle_data_point_error(self, exception: InvalidDataPointError, context: Optional[str] = None) -> Dict[str, Any]:
        """Handle a rejected chart data point."""
        error_id = self._generate_error_id()

        self.logger.warning(
            "Chart data rejected",
            error_id=error_id,
            index=exception.index,
            reason=exception.reason,
            context=context or "unknown context",
            operation="handle_data_point_error",
        )
        return {
            "success": False,
            "error_id": error_id,
            "message": f"Item {exception.index + 1} has an invalid amount ({exception.reason}).",
            "index": exception.index,
            "type": type(exception).__name__,
            "timestamp": datetime.now().isoformat(),
        }

    def _generate_error_id(self) -> str:
        """Generate unique error ID for tracking."""
        return str(uuid.uuid4())[:8]

    def _get_user_friendly_message(self, exception: Exception) -> str:
        """Convert exception to user-friendly message."""
        if isinstance(exception, InvalidDataPointError):
            return "Some chart data is invalid. Please check the amounts and try again."
        if isinstance(exception, InvalidSelectionError):
            return "The selected item is no longer available."
        if isinstance(exception, ChartConfigurationError):
            return "The chart cannot be drawn at this size."
        if isinstance(exception, ChartError):
            return "The chart could not be displayed."

        exception_messages = {
            "ValueError": "Invalid input provided. Please check your data and try again.",
            "KeyError": "Required information is missing. Please ensure all fields are filled.",
            "TypeError": "Unexpected data received. Please try again.",
        }
        return exception_messages.get(
            type(exception).__name__,
            "An unexpected error occurred. Please try again or contact support.",
        )


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler


def with_error_handling(context: str):
    """Decorator for automatic error handling."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return get_error_handler().handle_exception(e, context)

        return wrapper

    return decorator
