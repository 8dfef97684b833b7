"""
Services

Chart engine services and the transaction chart data service.
"""

from .exceptions import (
    ChartError,
    ChartConfigurationError,
    InvalidDataPointError,
    NegativeAmountError,
    InvalidSelectionError,
)
from .segment_computer import SegmentComputer
from .path_builder import PathBuilder, polar_to_cartesian
from .hit_region import HitRegionCalculator
from .selection import SelectionController, SelectionState
from .donut_chart import DonutChart
from .chart_service import ChartService, chart_service
from .error_handler import ErrorHandler, get_error_handler, with_error_handling

__all__ = [
    "ChartError",
    "ChartConfigurationError",
    "InvalidDataPointError",
    "NegativeAmountError",
    "InvalidSelectionError",
    "SegmentComputer",
    "PathBuilder",
    "polar_to_cartesian",
    "HitRegionCalculator",
    "SelectionController",
    "SelectionState",
    "DonutChart",
    "ChartService",
    "chart_service",
    "ErrorHandler",
    "get_error_handler",
    "with_error_handling",
]
