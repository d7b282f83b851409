"""Microprice and order-book imbalance estimators."""

from __future__ import annotations

from collections.abc import Sequence

from atomicmesh.types import Level, _trunc_div


def compute(best_bid: Level, best_ask: Level) -> int:
    """Top-of-book microprice: prices weighted by the opposite side's volume."""
    bid_vol = best_bid.qty
    ask_vol = best_ask.qty
    total = bid_vol + ask_vol
    if total == 0:
        return _trunc_div(best_bid.price + best_ask.price, 2)
    return _trunc_div(best_ask.price * bid_vol + best_bid.price * ask_vol, total)


def compute_weighted(bids: Sequence[Level], asks: Sequence[Level], depth: int) -> int:
    """Multi-level microprice over the top ``depth`` levels, weight ``d - i`` for level ``i``.

    Returns 0 when either side is empty.
    """
    if not bids or not asks:
        return 0
    d = min(depth, len(bids), len(asks))
    if d == 0:
        return compute(bids[0], asks[0])

    numerator = 0
    denominator = 0
    for i, (bid, ask) in enumerate(zip(bids[:d], asks[:d])):
        weight = d - i
        numerator += (ask.price * bid.qty + bid.price * ask.qty) * weight
        denominator += (bid.qty + ask.qty) * weight

    if denominator == 0:
        return _trunc_div(bids[0].price + asks[0].price, 2)
    return _trunc_div(numerator, denominator)


def imbalance(bids: Sequence[Level], asks: Sequence[Level], depth: int) -> int:
    """Volume imbalance ``(bid - ask) / (bid + ask)`` scaled by 10 000, in [-10000, 10000]."""
    d = min(depth, len(bids), len(asks))
    if d == 0:
        return 0
    bid_vol = sum(level.qty for level in bids[:d])
    ask_vol = sum(level.qty for level in asks[:d])
    total = bid_vol + ask_vol
    if total == 0:
        return 0
    return _trunc_div((bid_vol - ask_vol) * 10000, total)