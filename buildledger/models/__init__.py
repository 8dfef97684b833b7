"""
Domain Models

This module contains the core domain entities and value objects
for the construction payment tracker and its chart engine.
"""

from .base import BaseModel
from .chart import (
    CHART_COLORS,
    palette_color,
    DataPoint,
    Segment,
    MoveTo,
    LineTo,
    ArcTo,
    ClosePath,
    PathCommand,
    PathKind,
    PathDescription,
    HitRegion,
    CenterLabelMode,
    AggregateLabel,
    DetailLabel,
    CenterLabel,
    SliceRender,
    DonutRender,
)
from .transaction import Transaction, TransactionType

__all__ = [
    "BaseModel",
    # Chart models
    "CHART_COLORS",
    "palette_color",
    "DataPoint",
    "Segment",
    "MoveTo",
    "LineTo",
    "ArcTo",
    "ClosePath",
    "PathCommand",
    "PathKind",
    "PathDescription",
    "HitRegion",
    "CenterLabelMode",
    "AggregateLabel",
    "DetailLabel",
    "CenterLabel",
    "SliceRender",
    "DonutRender",
    # Transaction models
    "Transaction",
    "TransactionType",
]
