"""
Segment computation for the donut chart.

Turns caller-supplied amounts into contiguous angular segments that start at
12 o'clock and close the full circle.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from ..config.settings import ChartConfig, NegativeAmountPolicy
from ..models.chart import DataPoint, Segment, palette_color
from ..utils.currency_utils import CurrencyUtils
from ..utils.structured_logging import get_structured_logger
from .exceptions import NegativeAmountError

logger = get_structured_logger().get_logger(__name__)


class SegmentComputer:
    """Computes percentages and angular spans for a list of data points."""

    def __init__(self, config: Optional[ChartConfig] = None):
        self.config = config or ChartConfig()

    def sanitize(self, points: Iterable[Any]) -> List[DataPoint]:
        """
        Normalize raw input into data points with finite, non-negative amounts.

        Accepts DataPoint instances or mappings with ``name``, ``amount`` and
        ``color`` keys. Malformed entries are kept (with a zero amount) so that
        input and segment indices stay aligned.

        Raises:
            NegativeAmountError: if a negative amount is found and the reject
                policy is configured.
        """
        return [self._coerce(raw, index) for index, raw in enumerate(points or [])]

    def _coerce(self, raw: Any, index: int) -> DataPoint:
        if isinstance(raw, DataPoint):
            name, amount, color = raw.name, raw.amount, raw.color
        elif isinstance(raw, Mapping):
            name, amount, color = raw.get("name"), raw.get("amount"), raw.get("color")
        else:
            logger.warning(
                "Malformed data point replaced with empty entry",
                operation="sanitize",
                index=index,
                value_type=type(raw).__name__,
            )
            name, amount, color = None, None, None

        clean_name = str(name).strip() if name is not None else ""
        if not clean_name:
            clean_name = f"Item {index + 1}"

        value = CurrencyUtils.parse_amount(amount)
        if value is None:
            if amount is not None:
                logger.warning(
                    "Non-finite or unparsable amount treated as zero",
                    operation="sanitize",
                    index=index,
                    name=clean_name,
                )
            value = 0.0
        elif value < 0:
            if self.config.negative_amount_policy == NegativeAmountPolicy.REJECT:
                logger.error(
                    "Negative amount rejected",
                    operation="sanitize",
                    index=index,
                    name=clean_name,
                )
                raise NegativeAmountError(index, value)
            logger.warning(
                "Negative amount clamped to zero",
                operation="sanitize",
                index=index,
                name=clean_name,
            )
            value = 0.0

        return DataPoint(name=clean_name, amount=value, color=str(color) if color else palette_color(index))

    def compute(self, points: Iterable[Any], selected_index: Optional[int] = None) -> List[Segment]:
        """
        Compute segments in input order.

        Args:
            points: Data points (or mappings) to chart
            selected_index: Index of the segment to flag as selected, if any

        Returns:
            List of segments, or an empty list when the total is not positive
        """
        data = self.sanitize(points)
        amounts = [point.amount for point in data]
        scale = 1.0
        total = sum(amounts)
        if math.isinf(total):
            # Finite amounts can still overflow the sum; work in units of the largest one.
            scale = max(amounts)
            total = sum(amount / scale for amount in amounts)

        if total <= 0:
            logger.debug("Nothing to chart", operation="compute", point_count=len(data))
            return []

        start_angle = self.config.start_angle
        segments: List[Segment] = []
        running = 0.0
        current = start_angle

        for index, point in enumerate(data):
            share = point.amount / scale
            running += share
            # Angles derive from the cumulative sum so the last segment closes at exactly +360.
            end = start_angle + (running / total) * 360.0
            segments.append(
                Segment(
                    name=point.name,
                    amount=point.amount,
                    color=point.color,
                    percentage=share / total * 100.0,
                    start_angle=current,
                    end_angle=end,
                    is_selected=index == selected_index,
                )
            )
            current = end

        logger.debug(
            "Segments computed",
            operation="compute",
            segment_count=len(segments),
            total=total,
        )
        return segments
