"""
Currency catalog.

Supported display currencies as a single data table: adding a currency means
adding one row here, not touching the formatting sites.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import UnknownCurrencyError


@dataclass(frozen=True)
class CurrencyInfo:
    """Display properties of a currency."""
    symbol: str
    name: str
    fraction_digits: int


class Currency(str, Enum):
    """Supported currency codes."""
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    JPY = "JPY"
    CAD = "CAD"
    AUD = "AUD"
    CHF = "CHF"

    @property
    def info(self) -> CurrencyInfo:
        return CURRENCY_TABLE[self]

    @property
    def symbol(self) -> str:
        return self.info.symbol

    @property
    def display_name(self) -> str:
        return self.info.name

    @property
    def fraction_digits(self) -> int:
        return self.info.fraction_digits

    @classmethod
    def from_code(cls, code: Union[str, "Currency"]) -> "Currency":
        """
        Resolve a currency from its ISO code (case-insensitive).

        Raises:
            UnknownCurrencyError: If the code is not in the catalog
        """
        if isinstance(code, Currency):
            return code
        if not isinstance(code, str):
            raise UnknownCurrencyError(f"Currency code must be a string, got {code!r}", code=None)
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise UnknownCurrencyError(f"Unknown currency code: {code}", code=code) from None


CURRENCY_TABLE: dict[Currency, CurrencyInfo] = {
    Currency.EUR: CurrencyInfo(symbol="€", name="Euro", fraction_digits=2),
    Currency.USD: CurrencyInfo(symbol="$", name="US Dollar", fraction_digits=2),
    Currency.GBP: CurrencyInfo(symbol="£", name="British Pound", fraction_digits=2),
    Currency.JPY: CurrencyInfo(symbol="¥", name="Japanese Yen", fraction_digits=0),
    Currency.CAD: CurrencyInfo(symbol="C$", name="Canadian Dollar", fraction_digits=2),
    Currency.AUD: CurrencyInfo(symbol="A$", name="Australian Dollar", fraction_digits=2),
    Currency.CHF: CurrencyInfo(symbol="CHF", name="Swiss Franc", fraction_digits=2),
}
