"""
Rhythm primitives - Ratio, Duration, TimeSignature, Tempo, BeatAssignment,
Rhythm and Metre.

Symbolic time is exact: durations are ratios of positive integers and are
compared by cross multiplication, so 1/4 and 2/8 are the same length.
Real time (seconds) only appears once a tempo is attached, and is computed
from exact fractions before the final conversion to float.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import ClassVar

from chuk_music_theory.constants import SECONDS_PER_MINUTE, ErrorMessages
from chuk_music_theory.errors import (
    ArithmeticOverflowError,
    InvalidRatioError,
    InvalidTempoError,
)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _to_float(value: Fraction, quantity: str) -> float:
    """Convert an exact result to float, raising instead of overflowing."""
    try:
        return float(value)
    except OverflowError as e:
        message = ErrorMessages.FLOAT_OVERFLOW.format(quantity=quantity)
        raise ArithmeticOverflowError(message) from e



@total_ordering
class Ratio:
    """
    A ratio of two strictly positive integers.

    Not reduced to lowest terms - Ratio(2, 8) keeps its parts - but
    equality, ordering and hashing treat it as the number it denotes.

    Immutable and hashable.
    """

    __slots__ = ("_numerator", "_denominator")
    _numerator: int
    _denominator: int

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """
        Create a ratio.

        Raises:
            InvalidRatioError: If either part is not a positive integer
        """
        if not (_is_positive_int(numerator) and _is_positive_int(denominator)):
            raise InvalidRatioError(
                ErrorMessages.INVALID_RATIO.format(numerator=numerator, denominator=denominator)
            )
        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Ratio is immutable")

    @classmethod
    def from_fraction(cls, value: Fraction | int) -> Ratio:
        """Create a ratio from a positive Fraction (in lowest terms)."""
        value = Fraction(value)
        return cls(value.numerator, value.denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_fraction(self) -> Fraction:
        """Exact value as a Fraction."""
        return Fraction(self._numerator, self._denominator)

    def to_float(self) -> float:
        """Approximate value as a float."""
        return self._numerator / self._denominator

    def reduced(self) -> Ratio:
        """Equivalent ratio in lowest terms."""
        divisor = math.gcd(self._numerator, self._denominator)
        return Ratio(self._numerator // divisor, self._denominator // divisor)

    def __add__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio.from_fraction(self.as_fraction() + other.as_fraction())

    def __mul__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio.from_fraction(self.as_fraction() * other.as_fraction())

    def __truediv__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self._numerator * other._denominator, self._denominator * other._numerator
        ).reduced()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._numerator * other._denominator == other._numerator * self._denominator

    def __lt__(self, other: Ratio) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __hash__(self) -> int:
        return hash(self.as_fraction())

    def __reduce__(self) -> tuple[type[Ratio], tuple[int, int]]:
        return (Ratio, (self._numerator, self._denominator))

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Ratio({self._numerator}, {self._denominator})"


@total_ordering
class Duration:
    """
    A symbolic note length as a fraction of a whole note.

    Duration(1, 4) is a quarter note and equals Duration(2, 8).
    Durations are strictly positive; there is no zero-length duration.

    Immutable and hashable.
    """

    __slots__ = ("_ratio",)
    _ratio: Ratio

    # Common durations (defined after class)
    WHOLE: ClassVar[Duration]
    HALF: ClassVar[Duration]
    QUARTER: ClassVar[Duration]
    EIGHTH: ClassVar[Duration]
    SIXTEENTH: ClassVar[Duration]
    THIRTY_SECOND: ClassVar[Duration]

    # Dotted versions
    DOTTED_HALF: ClassVar[Duration]
    DOTTED_QUARTER: ClassVar[Duration]
    DOTTED_EIGHTH: ClassVar[Duration]

    # Triplets
    QUARTER_TRIPLET: ClassVar[Duration]
    EIGHTH_TRIPLET: ClassVar[Duration]
    SIXTEENTH_TRIPLET: ClassVar[Duration]

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """
        Create a duration of numerator/denominator whole notes.

        Raises:
            InvalidRatioError: If either part is not a positive integer
        """
        object.__setattr__(self, "_ratio", Ratio(numerator, denominator))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Duration is immutable")

    @classmethod
    def from_ratio(cls, ratio: Ratio) -> Duration:
        """Create a duration from an existing ratio, keeping its parts."""
        return cls(ratio.numerator, ratio.denominator)

    @classmethod
    def from_fraction(cls, value: Fraction | int) -> Duration:
        """Create a duration from a positive Fraction."""
        return cls.from_ratio(Ratio.from_fraction(value))

    @property
    def ratio(self) -> Ratio:
        return self._ratio

    @property
    def numerator(self) -> int:
        return self._ratio.numerator

    @property
    def denominator(self) -> int:
        return self._ratio.denominator

    def as_fraction(self) -> Fraction:
        """Exact length in whole notes."""
        return self._ratio.as_fraction()

    def dotted(self) -> Duration:
        """Return a dotted version (1.5x length)."""
        return Duration.from_fraction(self.as_fraction() * Fraction(3, 2))

    def triplet(self) -> Duration:
        """Return a triplet version (2/3 length)."""
        return Duration.from_fraction(self.as_fraction() * Fraction(2, 3))

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_ratio(self._ratio + other._ratio)

    def __sub__(self, other: Duration) -> Duration:
        """
        Subtract a shorter duration.

        Raises:
            InvalidRatioError: If the result would not be positive
        """
        if not isinstance(other, Duration):
            return NotImplemented
        result = self.as_fraction() - other.as_fraction()
        if result <= 0:
            raise InvalidRatioError(
                ErrorMessages.INVALID_RATIO.format(
                    numerator=result.numerator, denominator=result.denominator
                )
            )
        return Duration.from_fraction(result)

    def __mul__(self, n: int | Fraction) -> Duration:
        if isinstance(n, (int, Fraction)) and not isinstance(n, bool):
            return Duration.from_fraction(self.as_fraction() * n)
        return NotImplemented

    def __rmul__(self, n: int | Fraction) -> Duration:
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ratio == other._ratio

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ratio < other._ratio

    def __hash__(self) -> int:
        return hash(self._ratio)

    def __reduce__(self) -> tuple[type[Duration], tuple[int, int]]:
        return (Duration, (self.numerator, self.denominator))

    def __str__(self) -> str:
        name_map = {
            Fraction(1): "whole",
            Fraction(1, 2): "half",
            Fraction(1, 4): "quarter",
            Fraction(1, 8): "eighth",
            Fraction(1, 16): "sixteenth",
            Fraction(1, 32): "32nd",
            Fraction(3, 4): "dotted half",
            Fraction(3, 8): "dotted quarter",
            Fraction(3, 16): "dotted eighth",
            Fraction(1, 6): "quarter triplet",
            Fraction(1, 12): "eighth triplet",
            Fraction(1, 24): "sixteenth triplet",
        }
        value = self.as_fraction()
        if value in name_map:
            return name_map[value]
        return str(self._ratio)

    def __repr__(self) -> str:
        return f"Duration({self.numerator}, {self.denominator})"


# Define common durations
Duration.WHOLE = Duration(1)
Duration.HALF = Duration(1, 2)
Duration.QUARTER = Duration(1, 4)
Duration.EIGHTH = Duration(1, 8)
Duration.SIXTEENTH = Duration(1, 16)
Duration.THIRTY_SECOND = Duration(1, 32)

# Dotted versions
Duration.DOTTED_HALF = Duration(3, 4)
Duration.DOTTED_QUARTER = Duration(3, 8)
Duration.DOTTED_EIGHTH = Duration(3, 16)

# Triplets
Duration.QUARTER_TRIPLET = Duration(1, 6)
Duration.EIGHTH_TRIPLET = Duration(1, 12)
Duration.SIXTEENTH_TRIPLET = Duration(1, 24)


@dataclass(frozen=True, eq=False)
class TimeSignature:
    """
    A time signature - beats per bar over the beat unit.

    Like Duration, equality and hashing are by value: 2/4 == 4/8. The
    written numerator and denominator are kept for display and encoding.

    Examples:
        TimeSignature(4, 4) = common time
        TimeSignature(6, 8) = compound duple
    """

    numerator: int
    denominator: int

    # Common time signatures (defined after class)
    COMMON_TIME: ClassVar[TimeSignature]  # 4/4
    CUT_TIME: ClassVar[TimeSignature]  # 2/2
    WALTZ: ClassVar[TimeSignature]  # 3/4
    SIX_EIGHT: ClassVar[TimeSignature]  # 6/8

    def __post_init__(self) -> None:
        # Raises InvalidRatioError for zero or negative parts
        Ratio(self.numerator, self.denominator)

    @classmethod
    def from_ratio(cls, ratio: Ratio) -> TimeSignature:
        return cls(ratio.numerator, ratio.denominator)

    @property
    def ratio(self) -> Ratio:
        return Ratio(self.numerator, self.denominator)

    @property
    def bar_duration(self) -> Duration:
        """Total duration of one bar in whole notes."""
        return Duration.from_ratio(self.ratio)

    @property
    def beat_unit(self) -> Duration:
        """The note value named by the denominator."""
        return Duration(1, self.denominator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSignature):
            return NotImplemented
        return self.ratio == other.ratio

    def __hash__(self) -> int:
        return hash(self.ratio)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"TimeSignature({self.numerator}, {self.denominator})"

    @classmethod
    def parse(cls, notation: str) -> TimeSignature:
        """
        Parse a time signature from notation like '4/4', '3/4', '6/8'.

        Args:
            notation: Time signature string

        Returns:
            TimeSignature object
        """
        parts = notation.split("/")
        if len(parts) != 2:
            raise ValueError(f"Invalid time signature format: {notation}")

        try:
            numerator = int(parts[0])
            denominator = int(parts[1])
        except ValueError as e:
            raise ValueError(f"Invalid time signature format: {notation}") from e

        return cls(numerator, denominator)


# Define common time signatures
TimeSignature.COMMON_TIME = TimeSignature(4, 4)
TimeSignature.CUT_TIME = TimeSignature(2, 2)
TimeSignature.WALTZ = TimeSignature(3, 4)
TimeSignature.SIX_EIGHT = TimeSignature(6, 8)


@dataclass(frozen=True, order=True)
class Tempo:
    """
    Beats per minute.

    Must be finite and strictly positive - a tempo of zero would make
    every duration infinitely long.
    """

    bpm: float

    def __post_init__(self) -> None:
        bpm = self.bpm
        if (
            isinstance(bpm, bool)
            or not isinstance(bpm, (int, float))
            or not math.isfinite(bpm)
            or bpm <= 0
        ):
            raise InvalidTempoError(ErrorMessages.INVALID_TEMPO.format(bpm=bpm))

    @property
    def bps(self) -> float:
        """Beats per second."""
        return self.bpm / SECONDS_PER_MINUTE

    @property
    def seconds_per_beat(self) -> float:
        """
        Length of one beat in seconds.

        Raises:
            ArithmeticOverflowError: If the result is too large for a float
        """
        return _to_float(self.exact_seconds_per_beat(), "Seconds per beat")

    def exact_seconds_per_beat(self) -> Fraction:
        """Length of one beat in seconds, exactly (from the binary value of bpm)."""
        return Fraction(SECONDS_PER_MINUTE) / Fraction(self.bpm)

    def __str__(self) -> str:
        return f"{self.bpm:g} BPM"


@dataclass(frozen=True, order=True)
class BeatAssignment:
    """
    The duration that counts as one beat.

    BeatAssignment(Duration.QUARTER) is the usual choice for x/4 metres;
    BeatAssignment(Duration.DOTTED_QUARTER) for compound 6/8.
    """

    duration: Duration

    def beats_in(self, duration: Duration) -> Fraction:
        """Number of beats in a duration, exactly."""
        return duration.as_fraction() / self.duration.as_fraction()


@dataclass(frozen=True)
class Rhythm:
    """A tempo together with the duration that carries the beat."""

    tempo: Tempo
    beat_assignment: BeatAssignment

    def exact_seconds(self, duration: Duration) -> Fraction:
        """Elapsed seconds for a duration, as an exact fraction."""
        return self.beat_assignment.beats_in(duration) * self.tempo.exact_seconds_per_beat()

    def seconds(self, duration: Duration) -> float:
        """
        Elapsed seconds for a duration.

        seconds = (duration / beat duration) * seconds per beat
        """
        return _to_float(self.exact_seconds(duration), "Seconds")


@dataclass(frozen=True)
class Metre:
    """A rhythm together with a time signature; measures durations in bars."""

    rhythm: Rhythm
    time_signature: TimeSignature

    def bar_seconds(self) -> float:
        """Length of one bar in seconds."""
        return self.rhythm.seconds(self.time_signature.bar_duration)

    def exact_bars(self, duration: Duration) -> Fraction:
        """Number of bars in a duration, as an exact fraction."""
        bar_seconds = self.rhythm.exact_seconds(self.time_signature.bar_duration)
        return self.rhythm.exact_seconds(duration) / bar_seconds

    def bars(self, duration: Duration) -> float:
        """Number of bars in a duration."""
        return _to_float(self.exact_bars(duration), "Bar count")
