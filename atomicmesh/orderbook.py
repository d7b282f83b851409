"""L2 order book with sorted price levels."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from sortedcontainers import SortedDict

from atomicmesh.types import Level, Side, Symbol, _trunc_div


class OrderBook:
    """Level-2 book. Bids are best-first by descending price, asks by ascending price."""

    def __init__(self, symbol: Symbol) -> None:
        self.symbol = symbol
        self._bids: SortedDict = SortedDict()
        self._asks: SortedDict = SortedDict()
        self.last_update_seq = 0
        self.last_update_ts = 0

    def apply_snapshot(self, bids: Iterable[Level], asks: Iterable[Level], seq: int, ts: int) -> None:
        """Replace all levels with the given ones; zero-quantity levels are dropped."""
        self._bids.clear()
        self._asks.clear()
        self._bids.update((level.price, level.qty) for level in bids if level.qty > 0)
        self._asks.update((level.price, level.qty) for level in asks if level.qty > 0)
        self.last_update_seq = seq
        self.last_update_ts = ts

    def apply_delta(self, bids: Iterable[Level], asks: Iterable[Level], seq: int, ts: int) -> None:
        """Add, update or remove (quantity zero) individual levels."""
        for side_levels, levels in ((self._bids, bids), (self._asks, asks)):
            for level in levels:
                if level.qty == 0:
                    side_levels.pop(level.price, None)
                else:
                    side_levels[level.price] = level.qty
        self.last_update_seq = seq
        self.last_update_ts = ts

    def best_bid(self) -> Level | None:
        """Highest bid, or None if there are no bids."""
        if not self._bids:
            return None
        price, qty = self._bids.peekitem(-1)
        return Level(price, qty)

    def best_ask(self) -> Level | None:
        """Lowest ask, or None if there are no asks."""
        if not self._asks:
            return None
        price, qty = self._asks.peekitem(0)
        return Level(price, qty)

    def mid_price(self) -> int | None:
        """Midpoint of best bid and best ask, or None if either side is empty."""
        bid, ask = self.best_bid(), self.best_ask()
        if bid is None or ask is None:
            return None
        return _trunc_div(bid.price + ask.price, 2)

    def spread(self) -> int | None:
        """Best ask minus best bid, or None if either side is empty."""
        bid, ask = self.best_bid(), self.best_ask()
        if bid is None or ask is None:
            return None
        return ask.price - bid.price

    def top_bids(self, n: int) -> list[Level]:
        """Up to ``n`` bid levels, best (highest) first."""
        return [Level(p, q) for p, q in islice(reversed(self._bids.items()), n)]

    def top_asks(self, n: int) -> list[Level]:
        """Up to ``n`` ask levels, best (lowest) first."""
        return [Level(p, q) for p, q in islice(self._asks.items(), n)]

    def bid_depth(self) -> int:
        """Sum of all bid quantities."""
        return sum(self._bids.values())

    def ask_depth(self) -> int:
        """Sum of all ask quantities."""
        return sum(self._asks.values())

    def bid_depth_to_price(self, price: int) -> int:
        """Bid quantity at prices greater than or equal to ``price``."""
        return sum(self._bids[p] for p in self._bids.irange(minimum=price))

    def ask_depth_to_price(self, price: int) -> int:
        """Ask quantity at prices less than or equal to ``price``."""
        return sum(self._asks[p] for p in self._asks.irange(maximum=price))

    def simulate_fill(self, side: Side, qty: int) -> tuple[int, int] | None:
        """Walk the book for a market order.

        Returns ``(average_price, filled_qty)``, or None when nothing could be filled.
        """
        levels = self.top_asks(len(self._asks)) if side is Side.BUY else self.top_bids(len(self._bids))
        remaining = qty
        total_cost = 0
        total_filled = 0
        for level in levels:
            if remaining <= 0:
                break
            fill_qty = min(remaining, level.qty)
            total_cost += fill_qty * level.price
            total_filled += fill_qty
            remaining -= fill_qty
        if total_filled == 0:
            return None
        return _trunc_div(total_cost, total_filled), total_filled

    def bid_count(self) -> int:
        return len(self._bids)

    def ask_count(self) -> int:
        return len(self._asks)