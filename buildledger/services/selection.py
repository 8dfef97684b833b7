"""
Selection handling for the donut chart.

At most one segment is selected. Tapping the selected segment clears the
selection; tapping any other segment moves it there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config.settings import ChartConfig
from ..models.chart import AggregateLabel, CenterLabel, CenterLabelMode, DetailLabel, Segment
from ..utils.currency_utils import CurrencyUtils


class SelectionController:
    """Pure reducer over the selected index plus centre label derivation."""

    def __init__(self, config: Optional[ChartConfig] = None):
        self.config = config or ChartConfig()

    @staticmethod
    def toggle(current: Optional[int], tapped: int) -> Optional[int]:
        if current is not None and tapped == current:
            return None
        return tapped

    def derive_center_label(self, segments: Sequence[Segment], selection: Optional[int]) -> CenterLabel:
        """
        Build the centre label for the current selection.

        A missing or stale selection yields the aggregate caption.
        """
        if selection is None or not 0 <= selection < len(segments):
            return CenterLabel(
                mode=CenterLabelMode.AGGREGATE,
                payload=AggregateLabel(
                    caption=self.config.aggregate_caption,
                    subcaption=self.config.aggregate_subcaption,
                ),
            )

        segment = segments[selection]
        return CenterLabel(
            mode=CenterLabelMode.DETAIL,
            payload=DetailLabel(
                index=selection,
                name=segment.name,
                amount=CurrencyUtils.format_amount(segment.amount, self.config.currency),
                percentage=CurrencyUtils.format_percentage_one_decimal(segment.percentage),
                amount_value=segment.amount,
                percentage_value=segment.percentage,
            ),
        )


@dataclass
class SelectionState:
    """The selected index owned by one chart instance."""

    selected_index: Optional[int] = None

    @property
    def is_idle(self) -> bool:
        return self.selected_index is None

    def tap(self, index: int) -> Optional[int]:
        self.selected_index = SelectionController.toggle(self.selected_index, index)
        return self.selected_index

    def clear(self) -> None:
        self.selected_index = None
