"""
Drawable chart primitives.

Coordinates are in plot space: x grows to the right from 0 to width, y grows
downward from 0 (the adjusted maximum) to height (the adjusted minimum).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PointTone(str, Enum):
    """Point color by sign of the amount."""
    POSITIVE = "positive"
    NEGATIVE = "negative"


class SegmentTrend(str, Enum):
    """Segment color by change versus the previous entry."""
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class PlotSize:
    """Drawing area in points or pixels."""
    width: float
    height: float


@dataclass(frozen=True)
class ChartOptions:
    """Overlays requested by the chart view."""
    show_goal: bool = True
    moving_average_window: Optional[int] = None    # None hides the overlay
    show_trendline: bool = True


@dataclass(frozen=True)
class ChartBounds:
    """Value range used for vertical scaling."""
    data_min: float
    data_max: float
    effective_min: float        # Data range, widened to the goal when shown
    effective_max: float
    adjusted_min: float         # Effective range plus padding
    adjusted_max: float

    @property
    def span(self) -> float:
        return self.adjusted_max - self.adjusted_min

    def contains(self, value: float) -> bool:
        return self.adjusted_min <= value <= self.adjusted_max


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float


@dataclass(frozen=True)
class EntryMarker:
    """Plotted entry."""
    entry_id: str
    position: ChartPoint
    amount: float
    tone: PointTone
    trend: Optional[SegmentTrend]       # None for the first entry


@dataclass(frozen=True)
class Segment:
    start: ChartPoint
    end: ChartPoint
    trend: Optional[SegmentTrend] = None


@dataclass(frozen=True)
class HorizontalLine:
    """Full-width line at a constant value."""
    y: float
    value: float
    label: Optional[str] = None
    date_label: Optional[str] = None


@dataclass(frozen=True)
class AxisLabel:
    y: float
    value: float
    text: str


@dataclass(frozen=True)
class ChartProjection:
    """Everything the chart view draws."""
    size: PlotSize
    bounds: ChartBounds
    markers: list[EntryMarker] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    grid_lines: list[HorizontalLine] = field(default_factory=list)
    axis_labels: list[AxisLabel] = field(default_factory=list)
    goal_line: Optional[HorizontalLine] = None
    zero_line: Optional[HorizontalLine] = None
    moving_average: list[ChartPoint] = field(default_factory=list)
    trendline: Optional[Segment] = None

    @property
    def is_empty(self) -> bool:
        return not self.markers
