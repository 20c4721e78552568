"""Analytics over the capital entry sequence"""

from .analytics import AnalyticsEngine
from .moving_average import moving_average_at, moving_average_series
from .trendline import Trendline, fit_trendline

__all__ = [
    "AnalyticsEngine",
    "Trendline",
    "fit_trendline",
    "moving_average_at",
    "moving_average_series",
]
