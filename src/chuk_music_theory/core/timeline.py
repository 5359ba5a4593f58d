"""
Timeline primitives - Timeline, Marker, AnchoredTimeline.

A Timeline places values at symbolic positions (Durations measured from
the start). It knows nothing about tempo; AnchoredTimeline pairs one with
a Rhythm to read positions back as seconds.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar, overload

from chuk_music_theory.core.rhythm import Duration, Rhythm

V = TypeVar("V")
T = TypeVar("T")


@dataclass(frozen=True)
class Marker:
    """A named cue point. Names need not be unique."""

    name: str
    position: Duration

    def __str__(self) -> str:
        return f"{self.name} @ {self.position.ratio}"


@dataclass(frozen=True)
class Timeline(Generic[V]):
    """
    An immutable, position-ordered mapping from Duration to value.

    Positions are unique by value: inserting at 2/8 replaces whatever is
    at 1/4. Iteration yields (position, value) pairs in ascending order.
    Inserting or removing returns a new Timeline and leaves this one intact.
    """

    entries: tuple[tuple[Duration, V], ...] = ()

    def __post_init__(self) -> None:
        # Later entries win for equal positions
        by_position: dict[Duration, tuple[Duration, V]] = {}
        for position, value in self.entries:
            if not isinstance(position, Duration):
                raise TypeError(f"Timeline positions must be Durations, got {position!r}")
            by_position[position] = (position, value)
        object.__setattr__(
            self, "entries", tuple(sorted(by_position.values(), key=lambda e: e[0]))
        )

    @classmethod
    def from_markers(cls, markers: Iterable[Marker]) -> Timeline[Marker]:
        """Timeline of markers keyed by their positions."""
        return Timeline(tuple((m.position, m) for m in markers))

    def _index(self, position: Duration) -> int | None:
        index = bisect_left(self.entries, position, key=lambda e: e[0])
        if index < len(self.entries) and self.entries[index][0] == position:
            return index
        return None

    def insert(self, position: Duration, value: V) -> Timeline[V]:
        """Return a timeline with value at position, replacing any existing entry."""
        index = bisect_left(self.entries, position, key=lambda e: e[0])
        replace = index < len(self.entries) and self.entries[index][0] == position
        tail = self.entries[index + 1 :] if replace else self.entries[index:]
        return Timeline(self.entries[:index] + ((position, value),) + tail)

    def remove(self, position: Duration) -> Timeline[V]:
        """
        Return a timeline without the entry at position.

        Raises:
            KeyError: If nothing is at position
        """
        index = self._index(position)
        if index is None:
            raise KeyError(position)
        return Timeline(self.entries[:index] + self.entries[index + 1 :])

    @overload
    def get(self, position: Duration) -> V | None: ...

    @overload
    def get(self, position: Duration, default: T) -> V | T: ...

    def get(self, position: Duration, default: object = None) -> object:
        index = self._index(position)
        if index is None:
            return default
        return self.entries[index][1]

    def positions(self) -> tuple[Duration, ...]:
        return tuple(position for position, _ in self.entries)

    def values(self) -> tuple[V, ...]:
        return tuple(value for _, value in self.entries)

    def __getitem__(self, position: Duration) -> V:
        index = self._index(position)
        if index is None:
            raise KeyError(position)
        return self.entries[index][1]

    def __contains__(self, position: object) -> bool:
        return isinstance(position, Duration) and self._index(position) is not None

    def __iter__(self) -> Iterator[tuple[Duration, V]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class AnchoredTimeline(Generic[V]):
    """
    A timeline read through a rhythm, giving each entry a time in seconds.

    Changing tempo means building a new AnchoredTimeline; the underlying
    timeline is not re-anchored.
    """

    timeline: Timeline[V]
    rhythm: Rhythm

    def seconds_at(self, position: Duration) -> float:
        """Seconds from the start of the timeline to position."""
        return self.rhythm.seconds(position)

    def timed_entries(self) -> Iterator[tuple[float, V]]:
        """Yield (seconds, value) in ascending order."""
        for position, value in self.timeline:
            yield self.rhythm.seconds(position), value

    def end_seconds(self) -> float:
        """Seconds to the last entry, 0.0 for an empty timeline."""
        if not self.timeline.entries:
            return 0.0
        return self.rhythm.seconds(self.timeline.entries[-1][0])

    def __len__(self) -> int:
        return len(self.timeline)
