"""Smart order routing across venues."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from atomicmesh.orderbook import OrderBook
from atomicmesh.types import OrderType, Side, Symbol, TimeInForce, Venue


class RoutingKind(Enum):
    """Algorithm used to split a parent order."""

    BEST_VENUE = "best_venue"
    VWAP = "vwap"
    TWAP = "twap"
    LIQUIDITY_SWEEP = "liquidity_sweep"


@dataclass(frozen=True)
class RoutingAlgo:
    """A routing algorithm; ``slices`` and ``interval_ms`` apply to TWAP only."""

    kind: RoutingKind
    slices: int = 1
    interval_ms: int = 0

    def __post_init__(self) -> None:
        if self.kind is RoutingKind.TWAP and self.slices <= 0:
            raise ValueError(f"TWAP needs a positive slice count, got {self.slices}")


@dataclass(frozen=True)
class OrderSlice:
    """Part of a parent order sent to a specific venue."""

    venue: Venue
    symbol: Symbol
    side: Side
    order_type: OrderType
    price: int
    qty: int
    time_in_force: TimeInForce


def _round_half_away(value: float) -> int:
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


class SmartOrderRouter:
    """Splits orders across venues based on the liquidity in their books."""

    def __init__(self) -> None:
        self._books: dict[tuple[str, Venue], OrderBook] = {}

    def update_book(self, symbol: str, venue: Venue, book: OrderBook) -> None:
        """Store the latest book for a pair name on a venue."""
        self._books[(symbol, venue)] = book

    def route(self, symbol: Symbol, side: Side, qty: int, algo: RoutingAlgo) -> list[OrderSlice]:
        """Split ``qty`` into venue slices using ``algo``."""
        if algo.kind is RoutingKind.BEST_VENUE:
            return self._route_best_venue(symbol, side, qty)
        if algo.kind is RoutingKind.VWAP:
            return self._route_vwap(symbol, side, qty)
        if algo.kind is RoutingKind.TWAP:
            return self._route_twap(symbol, side, qty, algo.slices)
        return self._route_sweep(symbol, side, qty)

    def _books_for(self, symbol: Symbol):
        pair = symbol.pair()
        return ((venue, book) for (name, venue), book in self._books.items() if name == pair)

    @staticmethod
    def _slice(venue: Venue, symbol: Symbol, side: Side, price: int, qty: int) -> OrderSlice:
        return OrderSlice(
            venue=venue,
            symbol=symbol,
            side=side,
            order_type=OrderType.LIMIT,
            price=price,
            qty=qty,
            time_in_force=TimeInForce.IMMEDIATE_OR_CANCEL,
        )

    def _route_best_venue(self, symbol: Symbol, side: Side, qty: int) -> list[OrderSlice]:
        best: tuple[Venue, int] | None = None
        for venue, book in self._books_for(symbol):
            level = book.best_ask() if side is Side.BUY else book.best_bid()
            if level is None:
                continue
            if best is None:
                best = (venue, level.price)
                continue
            better = level.price < best[1] if side is Side.BUY else level.price > best[1]
            if better:
                best = (venue, level.price)
        if best is None:
            return []
        return [self._slice(best[0], symbol, side, best[1], qty)]

    def _route_vwap(self, symbol: Symbol, side: Side, qty: int) -> list[OrderSlice]:
        venue_depths: list[tuple[Venue, int, int]] = []
        for venue, book in self._books_for(symbol):
            if side is Side.BUY:
                depth, level = book.ask_depth(), book.best_ask()
            else:
                depth, level = book.bid_depth(), book.best_bid()
            if level is not None:
                venue_depths.append((venue, depth, level.price))

        total_depth = sum(depth for _, depth, _ in venue_depths)
        if total_depth == 0:
            return []

        slices = []
        for venue, depth, price in venue_depths:
            proportion = depth / total_depth
            slice_qty = _round_half_away(qty * proportion)
            if slice_qty:
                slices.append(self._slice(venue, symbol, side, price, slice_qty))
        return slices

    def _route_twap(self, symbol: Symbol, side: Side, qty: int, slices: int) -> list[OrderSlice]:
        slice_qty = qty // slices
        if slice_qty == 0:
            return []
        return [
            order_slice
            for _ in range(slices)
            for order_slice in self._route_best_venue(symbol, side, slice_qty)
        ]

    def _route_sweep(self, symbol: Symbol, side: Side, qty: int) -> list[OrderSlice]:
        all_levels = [
            (venue, level.price, level.qty)
            for venue, book in self._books_for(symbol)
            for level in (book.top_asks(20) if side is Side.BUY else book.top_bids(20))
        ]
        all_levels.sort(key=lambda item: item[1], reverse=side is Side.SELL)

        remaining = qty
        slices = []
        for venue, price, available in all_levels:
            if remaining <= 0:
                break
            fill = min(remaining, available)
            slices.append(self._slice(venue, symbol, side, price, fill))
            remaining -= fill
        return slices