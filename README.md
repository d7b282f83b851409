# atomicmesh

Building blocks for a deterministic trading engine. Every component works on
integer prices and integer quantities, and integer divisions round toward
zero, so the same input always gives the same state.

## Modules

- `atomicmesh.types`: the enums `Side`, `Venue`, `OrderType` and
  `TimeInForce`; `Symbol(base, quote, venue)` with `pair()` (for example
  `"BTCUSDT"`); and `Level(price, qty)`, which rejects a negative quantity.
- `atomicmesh.orderbook`: `OrderBook`, an L2 book. `apply_snapshot` replaces
  all levels and `apply_delta` adds, updates or removes (quantity 0) levels.
  Queries: `best_bid`, `best_ask`, `mid_price`, `spread`, `top_bids(n)`,
  `top_asks(n)`, `bid_depth`, `ask_depth`, `bid_depth_to_price`,
  `ask_depth_to_price`, `bid_count`, `ask_count`. `simulate_fill(side, qty)`
  walks the book for a market order and returns `(average_price, filled_qty)`,
  or `None` when nothing fills.
- `atomicmesh.microprice`: `compute(best_bid, best_ask)` for the top-of-book
  microprice, `compute_weighted(bids, asks, depth)` for a multi-level microprice
  with linearly decreasing weights (0 when a side is empty), and
  `imbalance(bids, asks, depth)`, scaled by 10 000.
- `atomicmesh.inventory`: `InventoryManager(max_inventory, gamma)`, a spot
  position that never goes below zero, with `on_fill`, `compute_skew`,
  `can_sell`, `sellable_qty`, `at_max`, `set_position` and the `position`
  property.
- `atomicmesh.toxicity`: `ToxicityTracker(max_window, vol_alpha, threshold)`,
  a rolling VPIN over the last `max_window` trades plus an EMA of absolute
  price changes. `spread_multiplier()` returns a value in [10 000, 30 000].
- `atomicmesh.router`: `SmartOrderRouter` holds one book per pair name and
  venue (`update_book`) and splits orders with `route(symbol, side, qty, algo)`.
  `RoutingAlgo(kind, slices=1, interval_ms=0)` takes a `RoutingKind`:
  `BEST_VENUE`, `VWAP` (split in proportion to depth), `TWAP` (equal slices,
  each sent to the best venue; timing is left to the caller) or
  `LIQUIDITY_SWEEP` (walk the top 20 levels of every venue). The result is a
  list of immediate-or-cancel limit `OrderSlice`s.
- `atomicmesh.risk`: `RiskEngine(limits=None)` with `RiskLimits` and
  `Position` (`Position.flat(symbol)`). `check_order(symbol, side, qty, price,
  position, current_ts)` checks, in order: kill switch, circuit breaker,
  spread gate, order size, resulting position and notional (when a position is
  given), open orders, a per-second rate limit (timestamps in nanoseconds) and
  the loss limit, which also activates the kill switch. A rejection raises
  `RiskLimitExceeded` or `KillSwitchError`, both subclasses of `RiskError`.
  `update_pnl`, `record_win` and `record_loss` can trip the circuit breaker,
  which `daily_reset` clears; the kill switch is cleared only by
  `reset_kill_switch`.
- `atomicmesh.replay`: `ReplayPlayer(events)` steps through any sequence of
  objects that have a `seq` attribute: `peek`, `next`, `next_batch(n)`,
  `seek_to_seq`, `reset`, `position`, `total_events`, `progress_pct`,
  `is_done`, and iteration over the remaining events. `ReplaySpeed`
  (`maximum()`, `real_time()`, `multiplier(factor)`) records the chosen pace
  through `set_speed`.

## Installation

```
pip install atomicmesh
```

## Example

```python
from dataclasses import dataclass

from atomicmesh.orderbook import OrderBook
from atomicmesh.replay import ReplayPlayer
from atomicmesh.risk import RiskEngine, RiskError, RiskLimits
from atomicmesh.router import RoutingAlgo, RoutingKind, SmartOrderRouter
from atomicmesh.types import Level, Side, Symbol, Venue

symbol = Symbol("BTC", "USDT", Venue.BINANCE)
book = OrderBook(symbol)
book.apply_snapshot(
    [Level(60000, 100), Level(59900, 200)],
    [Level(60100, 150), Level(60200, 300)],
    seq=1,
    ts=1000,
)
print(book.best_bid(), book.best_ask(), book.spread())  # spread is 100

router = SmartOrderRouter()
router.update_book(symbol.pair(), Venue.BINANCE, book)
print(router.route(symbol, Side.BUY, 200, RoutingAlgo(RoutingKind.LIQUIDITY_SWEEP)))

risk = RiskEngine(RiskLimits(max_order_qty=100))
try:
    risk.check_order(symbol, Side.BUY, 200, 50_000, None, 0)
except RiskError as exc:
    print("rejected:", exc)


@dataclass
class Tick:
    seq: int


player = ReplayPlayer([Tick(1), Tick(2), Tick(3)])
player.seek_to_seq(2)
print([tick.seq for tick in player])  # [2, 3]
```

## What this package does not do

It has no command-line program, no network connections to exchanges or to
other nodes, no order execution or exchange simulator, no strategy engine that
turns signals into orders, and no event log on disk: `ReplayPlayer` replays
events that are already in memory, and `ReplaySpeed` is only recorded, not
used to wait between events.

## Running the tests

```
pip install -e ".[test]"
pytest
```