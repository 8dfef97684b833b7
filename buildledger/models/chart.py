"""
Donut chart domain models.

Input data points, derived segments, renderer-agnostic path primitives,
hit regions and centre label payloads.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import Field

from .base import BaseModel


class DataPoint(BaseModel):
    """One named amount supplied by the caller for a single render."""

    name: str = Field(..., description="Label shown in the centre when selected")
    amount: float = Field(default=0.0, description="Non-negative amount, in currency units")
    color: str = Field(default="#C9CBCF", description="Opaque colour value passed through to the renderer")


@dataclass(frozen=True)
class Segment:
    """Angular slice derived from a data point."""

    name: str
    amount: float
    color: str
    percentage: float
    start_angle: float
    end_angle: float
    is_selected: bool = False

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2

    def with_selection(self, selected: bool) -> "Segment":
        if selected == self.is_selected:
            return self
        return replace(self, is_selected=selected)


def _fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    def to_svg(self) -> str:
        return f"M {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    def to_svg(self) -> str:
        return f"L {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc to (x, y); sweep=True means clockwise in screen space."""

    rx: float
    ry: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    rotation: float = 0.0

    def to_svg(self) -> str:
        return (
            f"A {_fmt(self.rx)} {_fmt(self.ry)} {_fmt(self.rotation)} "
            f"{int(self.large_arc)} {int(self.sweep)} {_fmt(self.x)} {_fmt(self.y)}"
        )


@dataclass(frozen=True)
class ClosePath:
    def to_svg(self) -> str:
        return "Z"


PathCommand = Union[MoveTo, LineTo, ArcTo, ClosePath]


class PathKind(str, Enum):
    WEDGE = "wedge"
    RING = "ring"


@dataclass(frozen=True)
class PathDescription:
    """Closed 2D outline made of move/line/arc/close primitives."""

    kind: PathKind
    commands: Tuple[PathCommand, ...] = field(default_factory=tuple)
    outer_radius: float = 0.0
    inner_radius: float = 0.0

    def to_svg(self) -> str:
        return " ".join(command.to_svg() for command in self.commands)

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    @property
    def arcs(self) -> Tuple[ArcTo, ...]:
        return tuple(c for c in self.commands if isinstance(c, ArcTo))

    @property
    def subpath_count(self) -> int:
        return sum(1 for c in self.commands if isinstance(c, MoveTo))


@dataclass(frozen=True)
class HitRegion:
    """Tappable circle centred on a segment's mid-angle."""

    index: int
    center_x: float
    center_y: float
    size: float

    @property
    def left(self) -> float:
        return self.center_x - self.size / 2

    @property
    def top(self) -> float:
        return self.center_y - self.size / 2

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(x - self.center_x, y - self.center_y)

    def contains(self, x: float, y: float) -> bool:
        return self.distance_to(x, y) <= self.size / 2


class CenterLabelMode(str, Enum):
    AGGREGATE = "aggregate"
    DETAIL = "detail"


@dataclass(frozen=True)
class AggregateLabel:
    caption: str
    subcaption: str


@dataclass(frozen=True)
class DetailLabel:
    index: int
    name: str
    amount: str
    percentage: str
    amount_value: float
    percentage_value: float


@dataclass(frozen=True)
class CenterLabel:
    """Text shown in the donut hole."""

    mode: CenterLabelMode
    payload: Union[AggregateLabel, DetailLabel]

    @property
    def is_detail(self) -> bool:
        return self.mode == CenterLabelMode.DETAIL

    @property
    def lines(self) -> Tuple[str, ...]:
        if isinstance(self.payload, DetailLabel):
            return (self.payload.name, self.payload.amount, self.payload.percentage)
        return (self.payload.caption, self.payload.subcaption)


@dataclass(frozen=True)
class SliceRender:
    """Everything a host needs to draw and wire one segment."""

    index: int
    segment: Segment
    path: PathDescription
    hit_region: HitRegion
    opacity: float

    @property
    def name(self) -> str:
        return self.segment.name

    @property
    def color(self) -> str:
        return self.segment.color

    @property
    def is_selected(self) -> bool:
        return self.segment.is_selected


@dataclass(frozen=True)
class DonutRender:
    """Complete output of one chart computation."""

    size: float
    center: float
    outer_radius: float
    inner_radius: float
    slices: Tuple[SliceRender, ...]
    center_label: CenterLabel
    selected_index: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.slices

    @property
    def hit_regions(self) -> Tuple[HitRegion, ...]:
        return tuple(s.hit_region for s in self.slices)

    @property
    def paths(self) -> Tuple[PathDescription, ...]:
        return tuple(s.path for s in self.slices)


CHART_COLORS = (
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#E74C3C",
    "#C9CBCF",
    "#2ECC71",
    "#3498DB",
)


def palette_color(index: int) -> str:
    """Colour for the n-th item, cycling through the chart palette."""
    return CHART_COLORS[index % len(CHART_COLORS)]
