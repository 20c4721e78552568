"""Amount and date rendering for labels and entry lists."""

from ..utils.time import DateLike, to_calendar_day
from .currency import Currency


def format_amount(amount: float, currency: Currency) -> str:
    """
    Render an amount with the currency symbol and its fraction digits.

    Examples:
        format_amount(1234.5, Currency.EUR) -> "€1,234.50"
        format_amount(-1500, Currency.JPY) -> "-¥1,500"
    """
    digits = currency.fraction_digits
    sign = "-" if amount < 0 and round(abs(amount), digits) != 0 else ""
    return f"{sign}{currency.symbol}{abs(amount):,.{digits}f}"


def format_change(delta: float, currency: Currency) -> str:
    """
    Render a day-over-day change, symbol last, always with two decimals.

    Examples:
        format_change(12.5, Currency.EUR) -> "+12.50€"
        format_change(-3, Currency.USD) -> "-3.00$"
    """
    prefix = "+" if delta >= 0 else ""
    return f"{prefix}{delta:.2f}{currency.symbol}"


def format_axis_value(value: float, currency: Currency) -> str:
    """Render a chart tick: symbol followed by the integer part of the value."""
    return f"{currency.symbol}{int(value)}"


def format_date(day: DateLike) -> str:
    """Render a calendar day in medium style, e.g. "Apr 1, 2026"."""
    day = to_calendar_day(day)
    return f"{day:%b} {day.day}, {day.year}"
