"""
Chart engine exceptions.
"""

from typing import Optional


class ChartError(Exception):
    """Base exception for the chart engine."""


class ChartConfigurationError(ChartError):
    """Raised when chart geometry cannot produce a drawable donut."""


class InvalidDataPointError(ChartError):
    """Raised when a data point cannot be accepted."""

    def __init__(self, index: int, reason: str, value: Optional[object] = None):
        self.index = index
        self.reason = reason
        self.value = value
        super().__init__(f"Data point {index} rejected: {reason}")


class NegativeAmountError(InvalidDataPointError):
    """Raised for negative amounts when the reject policy is active."""

    def __init__(self, index: int, value: float):
        super().__init__(index, "negative amount", value)


class InvalidSelectionError(ChartError):
    """Raised when a selection index does not match any segment."""

    def __init__(self, index: int, segment_count: int):
        self.index = index
        self.segment_count = segment_count
        super().__init__(f"Selection index {index} out of range for {segment_count} segments")
