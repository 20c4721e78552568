"""Chart coordinate projection"""

from .models import ChartOptions, ChartProjection, PlotSize
from .projector import ChartProjector, compute_bounds

__all__ = [
    "ChartOptions",
    "ChartProjection",
    "ChartProjector",
    "PlotSize",
    "compute_bounds",
]
