"""
Annulus wedge path construction.

Produces renderer-agnostic path descriptions for donut segments. Angles are
in degrees, measured clockwise in screen space (y grows downwards) from the
positive x axis, so -90 is 12 o'clock.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ..config.settings import ChartConfig
from ..models.chart import ArcTo, ClosePath, LineTo, MoveTo, PathCommand, PathDescription, PathKind
from ..utils.structured_logging import get_structured_logger
from .exceptions import ChartConfigurationError

logger = get_structured_logger().get_logger(__name__)


def polar_to_cartesian(center_x: float, center_y: float, radius: float, angle_deg: float) -> Tuple[float, float]:
    """Point at ``radius`` from the centre along ``angle_deg``."""
    angle_rad = math.radians(angle_deg)
    return (
        center_x + radius * math.cos(angle_rad),
        center_y + radius * math.sin(angle_rad),
    )


class PathBuilder:
    """Builds closed outlines for donut segments around a fixed centre."""

    def __init__(self, center_x: float, center_y: float, config: Optional[ChartConfig] = None):
        self.center_x = center_x
        self.center_y = center_y
        self.config = config or ChartConfig()

    def effective_outer_radius(self, outer_radius: float, is_selected: bool) -> float:
        """Outer radius after selection emphasis."""
        return outer_radius + self.config.selected_offset if is_selected else outer_radius

    def build_path(
        self,
        start_angle: float,
        end_angle: float,
        outer_radius: float,
        inner_radius: float,
        is_selected: bool = False,
    ) -> PathDescription:
        """
        Build the outline of one segment.

        Args:
            start_angle: Segment start, degrees
            end_angle: Segment end, degrees
            outer_radius: Outer radius before selection emphasis
            inner_radius: Radius of the donut hole (0 for a plain pie)
            is_selected: Enlarge the outer radius by the configured offset

        Returns:
            PathDescription made of move/arc/line/close primitives

        Raises:
            ChartConfigurationError: if the radii cannot form an annulus
        """
        if outer_radius <= 0 or inner_radius < 0 or inner_radius >= outer_radius:
            raise ChartConfigurationError(
                f"Invalid radii: outer={outer_radius}, inner={inner_radius}"
            )

        radius = self.effective_outer_radius(outer_radius, is_selected)

        if end_angle - start_angle >= self.config.full_circle_threshold:
            return self._ring(radius, inner_radius)
        return self._wedge(start_angle, end_angle, radius, inner_radius)

    def _ring(self, radius: float, inner_radius: float) -> PathDescription:
        # A single arc cannot end where it starts, so each circle is drawn as two half arcs.
        cx, cy = self.center_x, self.center_y
        commands: List[PathCommand] = [
            MoveTo(cx, cy - radius),
            ArcTo(radius, radius, large_arc=True, sweep=True, x=cx, y=cy + radius),
            ArcTo(radius, radius, large_arc=True, sweep=True, x=cx, y=cy - radius),
            ClosePath(),
        ]
        if inner_radius > 0:
            # Opposite winding punches the hole under the nonzero fill rule.
            commands += [
                MoveTo(cx, cy - inner_radius),
                ArcTo(inner_radius, inner_radius, large_arc=True, sweep=False, x=cx, y=cy + inner_radius),
                ArcTo(inner_radius, inner_radius, large_arc=True, sweep=False, x=cx, y=cy - inner_radius),
                ClosePath(),
            ]

        logger.debug("Full ring path built", operation="build_path", outer_radius=radius)
        return PathDescription(
            kind=PathKind.RING,
            commands=tuple(commands),
            outer_radius=radius,
            inner_radius=inner_radius,
        )

    def _wedge(self, start_angle: float, end_angle: float, radius: float, inner_radius: float) -> PathDescription:
        cx, cy = self.center_x, self.center_y
        large_arc = end_angle - start_angle > 180

        outer_start = polar_to_cartesian(cx, cy, radius, start_angle)
        outer_end = polar_to_cartesian(cx, cy, radius, end_angle)

        commands: List[PathCommand] = [
            MoveTo(*outer_start),
            ArcTo(radius, radius, large_arc=large_arc, sweep=True, x=outer_end[0], y=outer_end[1]),
        ]

        if inner_radius > 0:
            inner_end = polar_to_cartesian(cx, cy, inner_radius, end_angle)
            inner_start = polar_to_cartesian(cx, cy, inner_radius, start_angle)
            commands += [
                LineTo(*inner_end),
                ArcTo(inner_radius, inner_radius, large_arc=large_arc, sweep=False, x=inner_start[0], y=inner_start[1]),
            ]
        else:
            commands.append(LineTo(cx, cy))

        commands.append(ClosePath())
        return PathDescription(
            kind=PathKind.WEDGE,
            commands=tuple(commands),
            outer_radius=radius,
            inner_radius=inner_radius,
        )
