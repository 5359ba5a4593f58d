"""
Pitch primitives - PitchClass, Interval and Pitch.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the signed distance between pitches in semitones.
Pitch is a pitch class placed in a specific octave.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from chuk_music_theory.constants import (
    A4_OCTAVE,
    OCTAVE_MAX,
    OCTAVE_MIN,
    SEMITONES_MAX,
    SEMITONES_MIN,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_music_theory.errors import ArithmeticOverflowError, PitchClassOutOfRangeError

if TYPE_CHECKING:
    from chuk_music_theory.core.tuning import TuningSystem

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

_PITCH_PATTERN = re.compile(r"^\s*([A-Ga-g][#b]?|[A-Ga-g]s)\s*(-?\d+)\s*$")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    The integer values are part of the contract: all octave/class
    arithmetic is done on them.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @classmethod
    def from_int(cls, value: int) -> PitchClass:
        """
        Convert an integer in 0-11 to a pitch class.

        Raises:
            PitchClassOutOfRangeError: If value is outside 0-11
        """
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 11:
            raise PitchClassOutOfRangeError(
                ErrorMessages.PITCH_CLASS_OUT_OF_RANGE.format(value=value)
            )
        return cls(value)

    def transpose(self, semitones: int | Interval) -> PitchClass:
        """Transpose by a number of semitones (positive or negative), wrapping."""
        return PitchClass((self.value + _as_semitones(semitones)) % SEMITONES_PER_OCTAVE)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        semitones = (other.value - self.value) % SEMITONES_PER_OCTAVE
        return Interval(semitones)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        # Try sharp names first
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        # Try flat names
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


class Direction(str, Enum):
    """Direction of a non-zero interval."""

    UP = "up"
    DOWN = "down"


def _as_semitones(value: Interval | int) -> int:
    if isinstance(value, Interval):
        return value.semitones
    return Interval(value).semitones


def _check_semitones(semitones: int) -> int:
    if not SEMITONES_MIN <= semitones <= SEMITONES_MAX:
        raise ArithmeticOverflowError(
            ErrorMessages.SEMITONES_OUT_OF_RANGE.format(
                low=SEMITONES_MIN, high=SEMITONES_MAX, semitones=semitones
            )
        )
    return semitones


@total_ordering
class Interval:
    """
    Signed distance between pitches in semitones.

    Positive intervals ascend, negative intervals descend, and the
    unison has no direction. The count is held within a signed 32-bit
    range; anything outside raises ArithmeticOverflowError.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """
        Create an interval with the given signed number of semitones.

        Raises:
            TypeError: If semitones is not an integer
            ArithmeticOverflowError: If semitones is outside the signed 32-bit range
        """
        if isinstance(semitones, bool) or not isinstance(semitones, int):
            raise TypeError(f"Interval semitones must be an integer, got {semitones!r}")
        object.__setattr__(self, "_semitones", _check_semitones(semitones))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    @classmethod
    def from_directed(cls, magnitude: int, direction: Direction | None) -> Interval:
        """
        Build an interval from an unsigned magnitude and a direction.

        A zero magnitude ignores the direction.
        """
        if magnitude < 0:
            raise ValueError(f"Magnitude must be non-negative, got {magnitude}")
        if direction is Direction.DOWN:
            return cls(-magnitude)
        return cls(magnitude)

    @classmethod
    def between(cls, a: Pitch, b: Pitch) -> Interval:
        """Signed chromatic distance from a to b."""
        return interval_between(a, b)

    @property
    def semitones(self) -> int:
        """Signed number of semitones in this interval."""
        return self._semitones

    @property
    def magnitude(self) -> int:
        """Unsigned number of semitones."""
        return abs(self._semitones)

    @property
    def direction(self) -> Direction | None:
        """UP, DOWN, or None for the unison."""
        if self._semitones > 0:
            return Direction.UP
        if self._semitones < 0:
            return Direction.DOWN
        return None

    def __int__(self) -> int:
        return self._semitones

    def __index__(self) -> int:
        return self._semitones

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval(self._semitones * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __reduce__(self) -> tuple[type[Interval], tuple[int]]:
        return (Interval, (self._semitones,))

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Human-readable interval name."""
        names = {
            0: "P1",
            1: "m2",
            2: "M2",
            3: "m3",
            4: "M3",
            5: "P4",
            6: "TT",
            7: "P5",
            8: "m6",
            9: "M6",
            10: "m7",
            11: "M7",
        }
        sign = "-" if self._semitones < 0 else ""
        octaves, mod = divmod(self.magnitude, 12)
        if octaves == 0:
            return f"{sign}{names[mod]}"
        if octaves == 1 and mod == 0:
            return f"{sign}P8"
        return f"{sign}{names[mod]}+{octaves}oct"


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE


def _check_octave(octave: int) -> int:
    if not OCTAVE_MIN <= octave <= OCTAVE_MAX:
        raise ArithmeticOverflowError(
            ErrorMessages.OCTAVE_OUT_OF_RANGE.format(low=OCTAVE_MIN, high=OCTAVE_MAX, octave=octave)
        )
    return octave


@total_ordering
@dataclass(frozen=True, eq=True)
class Pitch:
    """
    An absolute pitch - a pitch class in a specific octave.

    Ordered octave first, then by pitch class value, so B3 < C4.
    There is no MIDI range clamp; octaves span the signed 8-bit range.

    Examples:
        Pitch(PitchClass.A, 4) = A440
        Pitch(PitchClass.C, -1) = MIDI note 0
    """

    pitch_class: PitchClass
    octave: int

    # Reference pitches (defined after class)
    A4: ClassVar[Pitch]
    MIDDLE_C: ClassVar[Pitch]

    def __post_init__(self) -> None:
        if not isinstance(self.pitch_class, PitchClass):
            object.__setattr__(self, "pitch_class", PitchClass.from_int(self.pitch_class))
        if isinstance(self.octave, bool) or not isinstance(self.octave, int):
            raise TypeError(f"Octave must be an integer, got {self.octave!r}")
        _check_octave(self.octave)

    def semitones_from_c0(self) -> int:
        """Absolute chromatic position, C0 = 0."""
        return self.octave * SEMITONES_PER_OCTAVE + self.pitch_class.value

    def interval_to(self, other: Pitch) -> Interval:
        """Signed interval from this pitch to another."""
        return interval_between(self, other)

    def transpose(self, interval: Interval | int) -> Pitch:
        """Transpose by a signed interval."""
        return transpose(self, interval)

    def frequency(self, tuning: TuningSystem | None = None) -> float:
        """Frequency in Hz (equal temperament, A4 = 440 Hz unless a tuning is given)."""
        from chuk_music_theory.core.tuning import EQUAL_TEMPERAMENT, frequency

        return frequency(self, tuning or EQUAL_TEMPERAMENT)

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60. Not clamped to 0-127."""
        return (self.octave + 1) * SEMITONES_PER_OCTAVE + self.pitch_class.value

    @classmethod
    def from_midi(cls, midi_note: int) -> Pitch:
        """Create a pitch from a MIDI note number."""
        octave, pitch_class = divmod(midi_note, SEMITONES_PER_OCTAVE)
        return cls(PitchClass(pitch_class), octave - 1)

    @classmethod
    def parse(cls, notation: str) -> Pitch:
        """
        Parse a pitch from scientific notation like 'C4', 'F#3', 'Bb-1'.

        Args:
            notation: Pitch class name followed by an octave number

        Returns:
            Pitch object
        """
        match = _PITCH_PATTERN.match(notation)
        if not match:
            raise ValueError(f"Invalid pitch notation: {notation}")
        name, octave = match.groups()
        return cls(PitchClass.parse(name[0].upper() + name[1:]), int(octave))

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name, e.g. 'C#4'."""
        return f"{self.pitch_class.spell(prefer_flats)}{self.octave}"

    def __add__(self, other: Interval) -> Pitch:
        if not isinstance(other, Interval):
            return NotImplemented
        return transpose(self, other)

    def __sub__(self, other: Interval | Pitch) -> Pitch | Interval:
        """Pitch - Interval transposes down; Pitch - Pitch is the interval between them."""
        if isinstance(other, Interval):
            return transpose(self, -other)
        if isinstance(other, Pitch):
            return interval_between(other, self)
        return NotImplemented

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        if self.octave != other.octave:
            return self.octave < other.octave
        return self.pitch_class.value < other.pitch_class.value

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"Pitch(PitchClass.{self.pitch_class.name}, {self.octave})"


Pitch.A4 = Pitch(PitchClass.A, A4_OCTAVE)
Pitch.MIDDLE_C = Pitch(PitchClass.C, 4)


def interval_between(a: Pitch, b: Pitch) -> Interval:
    """
    Total chromatic distance from a to b, sign preserved.

    (octave_b - octave_a) * 12 + (class_b - class_a)
    """
    octave_semitones = (b.octave - a.octave) * SEMITONES_PER_OCTAVE
    class_semitones = b.pitch_class.value - a.pitch_class.value
    return Interval(octave_semitones + class_semitones)


def transpose(pitch: Pitch, interval: Interval | int) -> Pitch:
    """
    Apply a signed semitone offset to a pitch.

    Uses floor division and floor modulo so that descending offsets
    borrow from the octave correctly (C4 - 1 = B3).

    Raises:
        ArithmeticOverflowError: If the resulting octave is out of range
    """
    if not isinstance(interval, Interval):
        interval = Interval(interval)
    semitones = interval.semitones
    raw = pitch.pitch_class.value + semitones
    octave_shift, pitch_class = divmod(raw, SEMITONES_PER_OCTAVE)
    return Pitch(PitchClass(pitch_class), _check_octave(pitch.octave + octave_shift))
