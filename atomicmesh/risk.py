"""Pre-trade risk checks, kill switch and circuit breaker."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from atomicmesh.types import Side, Symbol

logger = logging.getLogger(__name__)

_ONE_SECOND_NS = 1_000_000_000


class RiskError(Exception):
    """Base class for orders rejected by the risk engine."""


class RiskLimitExceeded(RiskError):
    """A configured risk limit would be breached."""


class KillSwitchError(RiskError):
    """The kill switch is active; no orders are allowed."""


@dataclass
class Position:
    """A position in one symbol: its side and absolute quantity."""

    symbol: Symbol
    side: Side = Side.BUY
    qty: int = 0

    @classmethod
    def flat(cls, symbol: Symbol) -> Position:
        """A position with zero quantity."""
        return cls(symbol=symbol)


@dataclass
class RiskLimits:
    """Risk limit configuration. A value of 0 disables the spread, loss-streak and drawdown limits."""

    max_position_qty: int = 1_000_000_000
    max_notional: int = 500_000_000_000
    max_total_notional: int = 1_000_000_000_000
    max_order_qty: int = 100_000_000
    max_open_orders: int = 100
    max_loss: int = -10_000_000_000
    max_orders_per_second: int = 50
    max_spread: int = 5000
    max_consecutive_losses: int = 5
    max_drawdown_bps: int = 200


class RiskEngine:
    """Validates orders against limits and tracks PnL, loss streaks and drawdown.

    The kill switch is hard (manual reset only); the circuit breaker is soft
    and cleared by :meth:`daily_reset`.
    """

    def __init__(self, limits: RiskLimits | None = None) -> None:
        self.limits = limits if limits is not None else RiskLimits()
        self._killed = False
        self._open_order_count = 0
        self._total_pnl = 0
        self._order_timestamps: list[int] = []
        self._current_spread = 0
        self._consecutive_losses = 0
        self._circuit_breaker = False
        self._peak_pnl = 0

    @property
    def total_pnl(self) -> int:
        return self._total_pnl

    @property
    def open_order_count(self) -> int:
        return self._open_order_count

    @property
    def circuit_breaker(self) -> bool:
        return self._circuit_breaker

    @property
    def consecutive_losses(self) -> int:
        return self._consecutive_losses

    @property
    def peak_pnl(self) -> int:
        return self._peak_pnl

    @property
    def current_spread(self) -> int:
        return self._current_spread

    def is_killed(self) -> bool:
        return self._killed

    def activate_kill_switch(self, reason: str) -> None:
        logger.error("KILL SWITCH ACTIVATED: %s", reason)
        self._killed = True

    def reset_kill_switch(self) -> None:
        """Manual override: clear the kill switch."""
        self._killed = False

    def check_order(
        self,
        symbol: Symbol,
        side: Side,
        qty: int,
        price: int,
        position: Position | None,
        current_ts: int,
    ) -> None:
        """Validate a new order; raise a :class:`RiskError` if it must be rejected.

        An accepted order is recorded for the per-second rate limit.
        """
        limits = self.limits

        if self._killed:
            raise KillSwitchError("kill switch is active")

        if self._circuit_breaker:
            raise RiskLimitExceeded("circuit breaker active (consecutive losses or drawdown)")

        if limits.max_spread > 0 and self._current_spread > limits.max_spread:
            raise RiskLimitExceeded(
                f"spread {self._current_spread} exceeds max {limits.max_spread} — skipping quote"
            )

        if qty > limits.max_order_qty:
            raise RiskLimitExceeded(f"order qty {qty} exceeds max {limits.max_order_qty}")

        if position is not None:
            if position.side is side:
                new_qty = position.qty + qty
            else:
                new_qty = abs(qty - position.qty)

            if new_qty > limits.max_position_qty:
                raise RiskLimitExceeded(
                    f"resulting position {new_qty} exceeds max {limits.max_position_qty}"
                )

            notional = new_qty * price
            if notional > limits.max_notional:
                raise RiskLimitExceeded(f"notional {notional} exceeds max {limits.max_notional}")

            # Conservative: the proposed notional is a floor for the aggregate.
            if notional > limits.max_total_notional:
                raise RiskLimitExceeded(
                    f"total notional {notional} exceeds aggregate max {limits.max_total_notional}"
                )

        if self._open_order_count >= limits.max_open_orders:
            raise RiskLimitExceeded(
                f"open orders {self._open_order_count} exceeds max {limits.max_open_orders}"
            )

        self._order_timestamps = [
            ts for ts in self._order_timestamps if current_ts - ts < _ONE_SECOND_NS
        ]
        if len(self._order_timestamps) >= limits.max_orders_per_second:
            raise RiskLimitExceeded("order rate limit exceeded")

        if self._total_pnl < limits.max_loss:
            self.activate_kill_switch(
                f"total PnL {self._total_pnl} below max loss {limits.max_loss}"
            )
            raise KillSwitchError("max loss exceeded")

        self._order_timestamps.append(current_ts)

    def on_order_opened(self) -> None:
        self._open_order_count += 1

    def on_order_closed(self) -> None:
        self._open_order_count = max(self._open_order_count - 1, 0)

    def update_pnl(self, pnl_delta: int) -> None:
        """Add to total PnL, track the peak and trip the breaker on excess drawdown."""
        self._total_pnl += pnl_delta
        self._peak_pnl = max(self._peak_pnl, self._total_pnl)

        max_bps = self.limits.max_drawdown_bps
        if max_bps > 0 and self._peak_pnl > 0:
            drawdown = self._peak_pnl - self._total_pnl
            if drawdown * 10_000 > self._peak_pnl * max_bps:
                self._circuit_breaker = True
                logger.warning(
                    "CIRCUIT BREAKER: drawdown %dbps from peak (limit: %dbps) — pausing",
                    drawdown * 10_000 // self._peak_pnl,
                    max_bps,
                )

    def record_win(self) -> None:
        """A winning round-trip resets the loss streak."""
        self._consecutive_losses = 0

    def record_loss(self) -> None:
        """A losing round-trip; trips the breaker once the streak reaches the limit."""
        self._consecutive_losses += 1
        limit = self.limits.max_consecutive_losses
        if limit > 0 and self._consecutive_losses >= limit:
            self._circuit_breaker = True
            logger.warning(
                "CIRCUIT BREAKER: %d consecutive losses (limit: %d) — pausing",
                self._consecutive_losses,
                limit,
            )

    def update_spread(self, spread: int) -> None:
        self._current_spread = spread

    def daily_reset(self) -> None:
        """Clear the circuit breaker, loss streak, PnL and its peak."""
        self._circuit_breaker = False
        self._consecutive_losses = 0
        self._peak_pnl = 0
        self._total_pnl = 0
        logger.info("Risk daily reset: circuit breaker cleared, PnL zeroed")