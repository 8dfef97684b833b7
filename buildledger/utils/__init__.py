"""
Utilities

This module contains utility functions and helpers
used across the application.
"""

from .currency_utils import CurrencyUtils
from .structured_logging import get_structured_logger, setup_logging

__all__ = [
    "CurrencyUtils",
    "get_structured_logger",
    "setup_logging",
]
