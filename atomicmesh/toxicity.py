"""Trade-flow toxicity (VPIN-lite) and short-term volatility tracking."""

from __future__ import annotations

from collections import deque

from atomicmesh.types import Side, _trunc_div


class ToxicityTracker:
    """Rolling buy/sell volume imbalance plus an EMA of absolute price changes.

    ``vol_alpha`` and ``threshold`` are scaled by 10 000 (500 means 0.05).
    """

    def __init__(self, max_window: int, vol_alpha: int, threshold: int) -> None:
        self.max_window = max_window
        self.vol_alpha = vol_alpha
        self.threshold = threshold
        self._window: deque[tuple[Side, int]] = deque()
        self._buy_volume = 0
        self._sell_volume = 0
        self._volatility_ema = 0
        self._last_price = 0

    def on_trade(self, side: Side, qty: int, price: int) -> None:
        """Record a trade tick, updating volatility and the rolling volume window."""
        if self._last_price > 0:
            delta = abs(price - self._last_price)
            self._volatility_ema = _trunc_div(
                delta * self.vol_alpha + self._volatility_ema * (10000 - self.vol_alpha),
                10000,
            )
        self._last_price = price

        if side is Side.BUY:
            self._buy_volume += qty
        else:
            self._sell_volume += qty
        self._window.append((side, qty))

        while len(self._window) > self.max_window:
            old_side, old_qty = self._window.popleft()
            if old_side is Side.BUY:
                self._buy_volume = max(self._buy_volume - old_qty, 0)
            else:
                self._sell_volume = max(self._sell_volume - old_qty, 0)

    def vpin(self) -> int:
        """``|buy - sell| / total`` over the window, scaled by 10 000."""
        total = self._buy_volume + self._sell_volume
        if total == 0:
            return 0
        return abs(self._buy_volume - self._sell_volume) * 10000 // total

    def is_toxic(self) -> bool:
        """True when VPIN is strictly above the threshold."""
        return self.vpin() > self.threshold

    def spread_multiplier(self) -> int:
        """Spread multiplier in [10 000, 30 000] from toxicity and volatility."""
        vol = min(self._volatility_ema * 50, 10000)
        return min(10000 + self.vpin() + vol, 30000)

    def volatility(self) -> int:
        """Current volatility estimate in price units."""
        return self._volatility_ema