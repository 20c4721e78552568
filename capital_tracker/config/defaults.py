"""Default configuration parameters for the capital tracker."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TargetParams:
    """Default savings goal restored on first run and after a reset."""
    amount: float = 20000.0
    date: date = date(2026, 4, 1)


@dataclass(frozen=True)
class CurrencyParams:
    """Default display currency."""
    code: str = "EUR"


@dataclass(frozen=True)
class ChartParams:
    """Chart scaling parameters."""
    padding_ratio: float = 0.05       # Share of the value range added above and below
    min_padding: float = 100.0        # Padding floor in currency units
    axis_label_count: int = 5         # Vertical tick labels, top to bottom


@dataclass(frozen=True)
class MovingAverageParams:
    """Moving average overlay parameters."""
    periods: tuple[int, ...] = (7, 30)   # Windows offered in the chart picker
    default_window: int = 7


@dataclass(frozen=True)
class PersistenceParams:
    """Snapshot storage parameters."""
    db_path: str = "capital_tracker.db"
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class DisplayParams:
    """Entry list parameters."""
    recent_entries_limit: int = 5


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    target: TargetParams
    currency: CurrencyParams
    chart: ChartParams
    moving_average: MovingAverageParams
    persistence: PersistenceParams
    display: DisplayParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        target=TargetParams(),
        currency=CurrencyParams(),
        chart=ChartParams(),
        moving_average=MovingAverageParams(),
        persistence=PersistenceParams(),
        display=DisplayParams(),
    )
