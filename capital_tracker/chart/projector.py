"""
Chart coordinate projection.

Maps the entry sequence and its overlays (goal, zero line, moving average,
trendline) into plot coordinates. Entries are spaced evenly by position in
the sequence; elapsed days between entries do not affect x.
"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import ChartParams
from ..data.currency import Currency
from ..data.formatting import format_amount, format_axis_value, format_date
from ..data.models import CapitalEntry, Target
from ..logging.config import get_logger
from ..metrics.moving_average import moving_average_series
from ..metrics.trendline import fit_trendline
from .models import (
    AxisLabel,
    ChartBounds,
    ChartOptions,
    ChartPoint,
    ChartProjection,
    EntryMarker,
    HorizontalLine,
    PlotSize,
    PointTone,
    Segment,
    SegmentTrend,
)

logger = get_logger(__name__)


def compute_bounds(
    amounts: Sequence[float],
    goal_amount: Optional[float] = None,
    padding_ratio: float = 0.05,
    min_padding: float = 100.0,
) -> ChartBounds:
    """
    Compute the vertical value range.

    Args:
        amounts: Entry amounts (may be empty, then the data range is 0..0)
        goal_amount: Target amount to include, or None when the goal is hidden
        padding_ratio: Share of the effective range added above and below
        min_padding: Lower limit for the padding

    Returns:
        Bounds with data, effective and padded ranges
    """
    data_max = max(amounts) if amounts else 0.0
    data_min = min(amounts) if amounts else 0.0

    effective_max = data_max
    effective_min = data_min
    if goal_amount is not None:
        effective_max = max(data_max, goal_amount)
        effective_min = min(data_min, goal_amount)

    padding = max((effective_max - effective_min) * padding_ratio, min_padding)

    return ChartBounds(
        data_min=data_min,
        data_max=data_max,
        effective_min=effective_min,
        effective_max=effective_max,
        adjusted_min=effective_min - padding,
        adjusted_max=effective_max + padding,
    )


def x_position(index: int, count: int, width: float) -> float:
    """Horizontal position of the index-th of count entries."""
    return width * index / max(count - 1, 1)


def y_position(value: float, bounds: ChartBounds, height: float) -> float:
    """Vertical position of a value; the adjusted maximum is at y = 0."""
    span = bounds.span
    if span == 0:
        return height / 2
    return height * (1 - (value - bounds.adjusted_min) / span)


class ChartProjector:
    """Stateless projector from entries and overlays to plot coordinates."""

    def __init__(self, params: Optional[ChartParams] = None):
        self.params = params or ChartParams()

    def project(
        self,
        entries: Sequence[CapitalEntry],
        options: ChartOptions,
        size: PlotSize,
        target: Target,
        currency: Currency,
    ) -> ChartProjection:
        """
        Project entries and overlays into plot coordinates.

        Args:
            entries: Entries sorted ascending by date
            options: Overlay switches
            size: Plot dimensions
            target: Current goal, used when options.show_goal is set
            currency: Currency for labels

        Returns:
            Complete drawable projection
        """
        amounts = [entry.amount for entry in entries]
        bounds = compute_bounds(
            amounts,
            goal_amount=target.amount if options.show_goal else None,
            padding_ratio=self.params.padding_ratio,
            min_padding=self.params.min_padding,
        )
        count = len(entries)

        def point(index: float, value: float) -> ChartPoint:
            return ChartPoint(
                x=x_position(index, count, size.width),
                y=y_position(value, bounds, size.height),
            )

        markers = []
        segments = []
        for index, entry in enumerate(entries):
            trend = None
            if index > 0:
                previous = entries[index - 1]
                trend = SegmentTrend.UP if entry.amount >= previous.amount else SegmentTrend.DOWN
                segments.append(Segment(
                    start=point(index - 1, previous.amount),
                    end=point(index, entry.amount),
                    trend=trend,
                ))

            markers.append(EntryMarker(
                entry_id=entry.id,
                position=point(index, entry.amount),
                amount=entry.amount,
                tone=PointTone.NEGATIVE if entry.is_negative else PointTone.POSITIVE,
                trend=trend,
            ))

        goal_line = None
        if options.show_goal and bounds.contains(target.amount):
            goal_line = HorizontalLine(
                y=y_position(target.amount, bounds, size.height),
                value=target.amount,
                label=format_amount(target.amount, currency),
                date_label=format_date(target.date),
            )

        zero_line = None
        if bounds.contains(0.0):
            zero_line = HorizontalLine(y=y_position(0.0, bounds, size.height), value=0.0)

        moving_average = []
        if options.moving_average_window is not None and entries:
            averages = moving_average_series(amounts, options.moving_average_window)
            moving_average = [point(index, value) for index, value in enumerate(averages)]

        trendline = None
        if options.show_trendline:
            fit = fit_trendline(amounts)
            if fit is not None:
                trendline = Segment(
                    start=point(0, fit.value_at(0)),
                    end=point(count - 1, fit.value_at(count - 1)),
                )

        projection = ChartProjection(
            size=size,
            bounds=bounds,
            markers=markers,
            segments=segments,
            grid_lines=self._grid_lines(bounds, size),
            axis_labels=self._axis_labels(bounds, size, currency),
            goal_line=goal_line,
            zero_line=zero_line,
            moving_average=moving_average,
            trendline=trendline,
        )

        logger.debug(
            "Chart projected",
            entries=count,
            adjusted_min=bounds.adjusted_min,
            adjusted_max=bounds.adjusted_max,
            goal_line=goal_line is not None,
            zero_line=zero_line is not None,
        )
        return projection

    def _steps(self) -> int:
        return self.params.axis_label_count - 1

    def _grid_lines(self, bounds: ChartBounds, size: PlotSize) -> list[HorizontalLine]:
        steps = self._steps()
        return [
            HorizontalLine(
                y=size.height * i / steps,
                value=bounds.adjusted_max - bounds.span * i / steps,
            )
            for i in range(steps + 1)
        ]

    def _axis_labels(self, bounds: ChartBounds, size: PlotSize,
                     currency: Currency) -> list[AxisLabel]:
        steps = self._steps()
        labels = []
        for i in range(steps + 1):
            value = bounds.adjusted_max - bounds.span * i / steps
            labels.append(AxisLabel(
                y=size.height * i / steps,
                value=value,
                text=format_axis_value(value, currency),
            ))
        return labels
