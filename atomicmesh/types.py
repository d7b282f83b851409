"""Core market data types: sides, venues, order attributes, symbols and book levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Direction of an order or trade."""

    BUY = "buy"
    SELL = "sell"


class Venue(Enum):
    """Trading venue an order or book belongs to."""

    BINANCE = "binance"
    BYBIT = "bybit"
    SIMULATED = "simulated"


class OrderType(Enum):
    """Kind of order."""

    LIMIT = "limit"
    MARKET = "market"


class TimeInForce(Enum):
    """How long an order stays working."""

    GOOD_TIL_CANCEL = "good_til_cancel"
    IMMEDIATE_OR_CANCEL = "immediate_or_cancel"
    FILL_OR_KILL = "fill_or_kill"


@dataclass(frozen=True)
class Symbol:
    """A tradable instrument on a specific venue."""

    base: str
    quote: str
    venue: Venue

    def pair(self) -> str:
        """Venue-independent pair name, e.g. ``BTCUSDT``."""
        return f"{self.base}{self.quote}"


@dataclass(frozen=True)
class Level:
    """One price level: integer price and non-negative integer quantity."""

    price: int
    qty: int

    def __post_init__(self) -> None:
        if self.qty < 0:
            raise ValueError(f"level quantity must be non-negative, got {self.qty}")


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient