"""Deterministic trading components: order book, microprice, inventory, toxicity, routing, risk and replay."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "orderbook",
    "microprice",
    "inventory",
    "toxicity",
    "router",
    "risk",
    "replay",
]