"""Position-windowed moving averages"""

from collections.abc import Sequence
from typing import Optional

from ..errors import InvalidWindowError


def _check_window(window: int) -> None:
    if isinstance(window, bool) or not isinstance(window, int) or window < 1:
        raise InvalidWindowError(f"Window must be a positive integer, got {window!r}", window=window)


def moving_average_at(amounts: Sequence[float], index: int, window: int) -> Optional[float]:
    """
    Calculate the simple moving average ending at a sequence position

    The window counts positions, not calendar days: with gaps between
    entries a 7 window spans more than 7 days. Near the start the window
    shrinks to the available positions, so the result is defined for every
    index of a non-empty sequence.

    Args:
        amounts: Amounts in chronological order
        index: Zero-based position of the last value in the window
        window: Number of positions to average

    Returns:
        Mean of amounts[max(0, index - window + 1) : index + 1],
        or None for an empty sequence

    Raises:
        InvalidWindowError: If window is smaller than 1
    """
    _check_window(window)

    if not amounts:
        return None

    index = min(max(index, 0), len(amounts) - 1)
    start = max(0, index - window + 1)
    values = amounts[start:index + 1]
    return sum(values) / len(values)


def moving_average_series(amounts: Sequence[float], window: int) -> list[float]:
    """
    Calculate the moving average at every position

    Args:
        amounts: Amounts in chronological order
        window: Number of positions to average

    Returns:
        One average per input amount
    """
    _check_window(window)

    return [moving_average_at(amounts, i, window) for i in range(len(amounts))]
