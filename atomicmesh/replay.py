"""Deterministic replay of a recorded event sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, TypeVar


class _Sequenced(Protocol):
    seq: int


E = TypeVar("E", bound=_Sequenced)


class SpeedMode(Enum):
    """How fast events are handed out during replay."""

    MAXIMUM = "maximum"
    REAL_TIME = "real_time"
    MULTIPLIER = "multiplier"


@dataclass(frozen=True)
class ReplaySpeed:
    """Replay pacing; ``factor`` is used by :attr:`SpeedMode.MULTIPLIER` only."""

    mode: SpeedMode = SpeedMode.MAXIMUM
    factor: float = 1.0

    def __post_init__(self) -> None:
        if self.mode is SpeedMode.MULTIPLIER and not self.factor > 0:
            raise ValueError(f"speed multiplier must be positive, got {self.factor}")

    @classmethod
    def maximum(cls) -> ReplaySpeed:
        """Replay as fast as possible."""
        return cls(SpeedMode.MAXIMUM)

    @classmethod
    def real_time(cls) -> ReplaySpeed:
        """Replay at the pace of the original timestamps."""
        return cls(SpeedMode.REAL_TIME)

    @classmethod
    def multiplier(cls, factor: float) -> ReplaySpeed:
        """Replay at ``factor`` times real-time speed."""
        return cls(SpeedMode.MULTIPLIER, factor)


class ReplayPlayer(Generic[E]):
    """Steps through a fixed sequence of events that carry a ``seq`` number.

    Replaying the same events always yields them in the same order, so any
    state built from them is identical on every run.
    """

    def __init__(self, events: Iterable[E]) -> None:
        self._events: list[E] = list(events)
        self._index = 0
        self._speed = ReplaySpeed.maximum()

    @property
    def speed(self) -> ReplaySpeed:
        return self._speed

    @property
    def events(self) -> Sequence[E]:
        """All loaded events, in replay order."""
        return tuple(self._events)

    def set_speed(self, speed: ReplaySpeed) -> None:
        self._speed = speed

    def peek(self) -> E | None:
        """The next event without advancing, or None when done."""
        if self._index < len(self._events):
            return self._events[self._index]
        return None

    def next(self) -> E | None:
        """The next event, advancing past it; None when done."""
        event = self.peek()
        if event is not None:
            self._index += 1
        return event

    def __iter__(self) -> Iterator[E]:
        """Consume the remaining events."""
        while (event := self.next()) is not None:
            yield event

    def seek_to_seq(self, seq: int) -> None:
        """Move to the first event whose ``seq`` is at least ``seq`` (or to the end)."""
        self._index = next(
            (i for i, event in enumerate(self._events) if event.seq >= seq),
            len(self._events),
        )

    def reset(self) -> None:
        """Go back to the first event."""
        self._index = 0

    def next_batch(self, n: int) -> list[E]:
        """Up to ``n`` next events, advancing past them."""
        if n < 0:
            raise ValueError(f"batch size must be non-negative, got {n}")
        start = self._index
        end = min(start + n, len(self._events))
        self._index = end
        return self._events[start:end]

    def total_events(self) -> int:
        return len(self._events)

    def position(self) -> int:
        """Index of the next event to be handed out."""
        return self._index

    def progress_pct(self) -> float:
        """Share of events consumed, as a percentage; 100 for an empty replay."""
        if not self._events:
            return 100.0
        return self._index / len(self._events) * 100.0

    def is_done(self) -> bool:
        return self._index >= len(self._events)