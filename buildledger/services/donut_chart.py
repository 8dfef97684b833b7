"""
Interactive donut chart.

Composes segment computation, path building, hit regions and selection into
one object a host view can render and feed taps into.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

from ..config.settings import ChartConfig, get_settings
from ..models.chart import DataPoint, DonutRender, HitRegion, Segment, SliceRender
from ..utils.structured_logging import get_structured_logger
from .error_handler import with_error_handling
from .exceptions import ChartConfigurationError, InvalidSelectionError
from .hit_region import HitRegionCalculator
from .path_builder import PathBuilder
from .segment_computer import SegmentComputer
from .selection import SelectionController, SelectionState

logger = get_structured_logger().get_logger(__name__)

SlicePressCallback = Callable[[DataPoint, int], Any]


class DonutChart:
    """Donut chart state and geometry for one host component."""

    def __init__(
        self,
        data: Iterable[Any],
        size: Optional[float] = None,
        on_slice_press: Optional[SlicePressCallback] = None,
        config: Optional[ChartConfig] = None,
        selected_index: Optional[int] = None,
    ):
        self.config = config or get_settings().chart
        self.size = float(size) if size is not None else self.config.default_size
        if self.size <= 0:
            raise ChartConfigurationError(f"Chart size must be positive, got {self.size}")

        radii = self.config.radii_for(self.size)
        self.center = radii["center"]
        self.outer_radius = radii["outer_radius"]
        self.inner_radius = radii["inner_radius"]
        if self.outer_radius <= 0:
            raise ChartConfigurationError(
                f"Chart size {self.size} leaves no room for padding {self.config.padding}"
            )

        self.segment_computer = SegmentComputer(self.config)
        self.path_builder = PathBuilder(self.center, self.center, self.config)
        self.hit_region_calculator = HitRegionCalculator(self.center, self.center, self.size, self.config)
        self.selection_controller = SelectionController(self.config)
        self.selection = SelectionState()
        self._callback = with_error_handling("donut_chart.on_slice_press")(on_slice_press) if on_slice_press else None

        self._points: List[DataPoint] = []
        self.set_data(data)
        if selected_index is not None:
            self.select(selected_index)

    @property
    def data(self) -> List[DataPoint]:
        return list(self._points)

    @property
    def selected_index(self) -> Optional[int]:
        return self.selection.selected_index

    @property
    def segments(self) -> List[Segment]:
        return self.segment_computer.compute(self._points, self.selection.selected_index)

    def set_data(self, data: Iterable[Any]) -> None:
        """Replace the charted data; a selection that no longer exists is cleared."""
        self._points = self.segment_computer.sanitize(data)
        selected = self.selection.selected_index
        if selected is not None and selected >= len(self.segments):
            logger.debug("Stale selection cleared", operation="set_data", index=selected)
            self.selection.clear()

    def _check_index(self, index: int) -> None:
        count = len(self.segments)
        if not 0 <= index < count:
            raise InvalidSelectionError(index, count)

    def press(self, index: int) -> Optional[int]:
        """
        Handle a tap on a segment: toggle the selection and notify the host.

        Returns:
            The new selected index, or None when the tap deselected

        Raises:
            InvalidSelectionError: if the index does not match a segment
        """
        self._check_index(index)
        new_selection = self.selection.tap(index)
        logger.debug("Slice pressed", operation="press", index=index, selected=new_selection)

        if self._callback is not None:
            self._callback(self._points[index], index)
        return new_selection

    def select(self, index: Optional[int]) -> None:
        """Set the selection directly, without notifying the host."""
        if index is None:
            self.selection.clear()
            return
        self._check_index(index)
        self.selection.selected_index = index

    def clear_selection(self) -> None:
        self.selection.clear()

    def hit_regions(self) -> List[HitRegion]:
        return self.hit_region_calculator.compute_all(self.segments, self.outer_radius, self.inner_radius)

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """Segment index whose tap target contains the point, if any."""
        return HitRegionCalculator.locate(self.hit_regions(), x, y)

    def tap_at(self, x: float, y: float) -> Optional[int]:
        """Route a tap at surface coordinates; returns the tapped index or None."""
        index = self.hit_test(x, y)
        if index is not None:
            self.press(index)
        return index

    def render(self) -> DonutRender:
        """Compute paths, tap targets and centre label for the current state."""
        segments = self.segments
        selected = self.selection.selected_index
        regions = self.hit_region_calculator.compute_all(segments, self.outer_radius, self.inner_radius)

        slices = []
        for index, (segment, region) in enumerate(zip(segments, regions)):
            path = self.path_builder.build_path(
                segment.start_angle,
                segment.end_angle,
                self.outer_radius,
                self.inner_radius,
                segment.is_selected,
            )
            if selected is None or segment.is_selected:
                opacity = 1.0
            else:
                opacity = self.config.dimmed_opacity
            slices.append(SliceRender(index=index, segment=segment, path=path, hit_region=region, opacity=opacity))

        return DonutRender(
            size=self.size,
            center=self.center,
            outer_radius=self.outer_radius,
            inner_radius=self.inner_radius,
            slices=tuple(slices),
            center_label=self.selection_controller.derive_center_label(segments, selected),
            selected_index=selected,
        )
