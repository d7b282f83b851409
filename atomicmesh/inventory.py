"""Spot inventory tracking and Avellaneda-Stoikov quote skew."""

from __future__ import annotations

from atomicmesh.types import Side, _trunc_div


class InventoryManager:
    """Tracks a spot position (never negative) and computes quote skew.

    ``gamma`` is the risk aversion scaled by 10 000 (5 000 means 0.5).
    """

    def __init__(self, max_inventory: int, gamma: int) -> None:
        self.max_inventory = max_inventory
        self.gamma = gamma
        self._position = 0

    @property
    def position(self) -> int:
        """Current position in base units."""
        return self._position

    def on_fill(self, side: Side, qty: int) -> None:
        """Apply a fill; sells beyond the held inventory clamp the position at zero."""
        if side is Side.BUY:
            self._position += qty
        else:
            self._position -= qty
        self._position = max(self._position, 0)

    def compute_skew(self, half_spread: int) -> int:
        """Skew ``gamma * (q / q_max) * half_spread``; positive when long."""
        if self.max_inventory == 0:
            return 0
        inv_ratio = _trunc_div(self._position * 10000, self.max_inventory)
        scaled = _trunc_div(inv_ratio * self.gamma, 10000)
        return _trunc_div(scaled * half_spread, 10000)

    def can_sell(self) -> bool:
        return self._position > 0

    def sellable_qty(self, desired: int) -> int:
        """Desired quantity capped by the inventory actually held."""
        if self._position <= 0:
            return 0
        return min(desired, self._position)

    def at_max(self) -> bool:
        """True once the position has reached the inventory limit."""
        return self._position >= self.max_inventory

    def set_position(self, qty: int) -> None:
        """Force the position, clamped at zero."""
        self._position = max(qty, 0)