"""
Tap target computation for donut segments.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..config.settings import ChartConfig
from ..models.chart import HitRegion, Segment
from .path_builder import polar_to_cartesian


class HitRegionCalculator:
    """Places one circular tap target on each segment's mid-angle."""

    def __init__(self, center_x: float, center_y: float, chart_diameter: float, config: Optional[ChartConfig] = None):
        self.center_x = center_x
        self.center_y = center_y
        self.chart_diameter = chart_diameter
        self.config = config or ChartConfig()

    def compute_hit_region(
        self,
        start_angle: float,
        end_angle: float,
        outer_radius: float,
        inner_radius: float,
        index: int = 0,
    ) -> HitRegion:
        """Tap target at the middle of the band, never smaller than the minimum tap size."""
        mid_angle = (start_angle + end_angle) / 2
        band_radius = (outer_radius + inner_radius) / 2
        x, y = polar_to_cartesian(self.center_x, self.center_y, band_radius, mid_angle)

        span = max(0.0, end_angle - start_angle)
        size = max(self.config.min_tap_size, span / 360.0 * self.chart_diameter)
        return HitRegion(index=index, center_x=x, center_y=y, size=size)

    def compute_all(self, segments: Sequence[Segment], outer_radius: float, inner_radius: float) -> List[HitRegion]:
        # Selection never moves a target; radii are the unemphasised ones.
        return [
            self.compute_hit_region(s.start_angle, s.end_angle, outer_radius, inner_radius, index=i)
            for i, s in enumerate(segments)
        ]

    @staticmethod
    def locate(regions: Iterable[HitRegion], x: float, y: float) -> Optional[int]:
        """Index of the region containing (x, y); the closest centre wins on overlap."""
        hits = [r for r in regions if r.contains(x, y)]
        if not hits:
            return None
        return min(hits, key=lambda r: (r.distance_to(x, y), r.index)).index
