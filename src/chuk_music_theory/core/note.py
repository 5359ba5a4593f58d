"""
Note - a pitch held for a duration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chuk_music_theory.core.pitch import Interval, Pitch, transpose
from chuk_music_theory.core.rhythm import Duration, Rhythm

if TYPE_CHECKING:
    from chuk_music_theory.core.tuning import TuningSystem


@dataclass(frozen=True)
class Note:
    """A pitch with a symbolic duration."""

    pitch: Pitch
    duration: Duration

    def frequency(self, tuning: TuningSystem | None = None) -> float:
        return self.pitch.frequency(tuning)

    def seconds(self, rhythm: Rhythm) -> float:
        return rhythm.seconds(self.duration)

    def transpose(self, interval: Interval | int) -> Note:
        return Note(transpose(self.pitch, interval), self.duration)

    def __str__(self) -> str:
        return f"{self.pitch} {self.duration}"
