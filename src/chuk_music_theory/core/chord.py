"""
Chord primitives - ChordClass, RootedChordClass, Chord, RootedChord, ChordPattern.

Chords are unordered sets: of pitch classes (ChordClass) or of absolute
pitches (Chord). Rooted variants add a root that must be one of the
members. ChordPattern is the shape of a chord as signed intervals from an
implicit root, used to build concrete chords on any root.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.pitch import Interval, Pitch, PitchClass, interval_between, transpose
from chuk_music_theory.errors import RootNotInChordError

if TYPE_CHECKING:
    from chuk_music_theory.core.tuning import TuningSystem


def _as_pitch_class(value: PitchClass | int) -> PitchClass:
    if isinstance(value, PitchClass):
        return value
    return PitchClass.from_int(value)


@dataclass(frozen=True)
class ChordClass:
    """
    An unordered set of pitch classes.

    Construction order and duplicates do not matter:
    ChordClass([C, E, G]) == ChordClass([G, C, E, C]).
    The empty chord class is allowed.
    """

    pitch_classes: frozenset[PitchClass]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "pitch_classes", frozenset(_as_pitch_class(pc) for pc in self.pitch_classes)
        )

    @classmethod
    def of(cls, *pitch_classes: PitchClass | int) -> ChordClass:
        """ChordClass.of(PitchClass.C, PitchClass.E, PitchClass.G)"""
        return cls(frozenset(pitch_classes))

    def ordered(self) -> tuple[PitchClass, ...]:
        """Members ordered by their integer value."""
        return tuple(sorted(self.pitch_classes, key=int))

    def transpose(self, interval: Interval | int) -> ChordClass:
        """Transpose every member, wrapping within the octave."""
        return ChordClass(frozenset(pc.transpose(interval) for pc in self.pitch_classes))

    def with_root(self, root: PitchClass) -> RootedChordClass:
        """Designate a root; raises RootNotInChordError if it is not a member."""
        return RootedChordClass(self, root)

    def __contains__(self, item: object) -> bool:
        return item in self.pitch_classes

    def __iter__(self) -> Iterator[PitchClass]:
        return iter(self.ordered())

    def __len__(self) -> int:
        return len(self.pitch_classes)

    def __str__(self) -> str:
        return "{" + ", ".join(pc.spell() for pc in self.ordered()) + "}"


@dataclass(frozen=True)
class RootedChordClass:
    """A chord class with a designated root pitch class."""

    chord_class: ChordClass
    root: PitchClass

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", _as_pitch_class(self.root))
        if self.root not in self.chord_class:
            raise RootNotInChordError(
                ErrorMessages.ROOT_NOT_IN_CHORD.format(
                    root=self.root.spell(), chord=self.chord_class
                )
            )

    @property
    def pitch_classes(self) -> frozenset[PitchClass]:
        return self.chord_class.pitch_classes

    def transpose(self, interval: Interval | int) -> RootedChordClass:
        return RootedChordClass(self.chord_class.transpose(interval), self.root.transpose(interval))

    def pattern(self) -> ChordPattern:
        """Shape of this chord as ascending intervals (0-11) from the root."""
        return ChordPattern(self.root.interval_to(pc) for pc in self.chord_class.pitch_classes)

    def __str__(self) -> str:
        return f"{self.chord_class} root {self.root.spell()}"


@dataclass(frozen=True)
class Chord:
    """
    An unordered set of absolute pitches.

    Duplicates collapse: C4 twice is still one C4. C4 and C5 are distinct.
    """

    pitches: frozenset[Pitch]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pitches", frozenset(self.pitches))

    @classmethod
    def of(cls, *pitches: Pitch) -> Chord:
        return cls(frozenset(pitches))

    def ordered(self) -> tuple[Pitch, ...]:
        """Members from lowest to highest."""
        return tuple(sorted(self.pitches))

    @property
    def lowest(self) -> Pitch | None:
        return min(self.pitches) if self.pitches else None

    @property
    def highest(self) -> Pitch | None:
        return max(self.pitches) if self.pitches else None

    def chord_class(self) -> ChordClass:
        """Project onto pitch classes, dropping octaves."""
        return ChordClass(frozenset(p.pitch_class for p in self.pitches))

    def transpose(self, interval: Interval | int) -> Chord:
        return Chord(frozenset(transpose(p, interval) for p in self.pitches))

    def with_root(self, root: Pitch) -> RootedChord:
        return RootedChord(self, root)

    def frequencies(self, tuning: TuningSystem | None = None) -> tuple[float, ...]:
        """Frequencies of the members, lowest first."""
        return tuple(p.frequency(tuning) for p in self.ordered())

    def __contains__(self, item: object) -> bool:
        return item in self.pitches

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.ordered())

    def __len__(self) -> int:
        return len(self.pitches)

    def __str__(self) -> str:
        return "{" + ", ".join(p.spell() for p in self.ordered()) + "}"


@dataclass(frozen=True)
class RootedChord:
    """A chord with a designated root pitch, which must be one of its members."""

    chord: Chord
    root: Pitch

    def __post_init__(self) -> None:
        if self.root not in self.chord:
            raise RootNotInChordError(
                ErrorMessages.ROOT_NOT_IN_CHORD.format(root=self.root.spell(), chord=self.chord)
            )

    @property
    def pitches(self) -> frozenset[Pitch]:
        return self.chord.pitches

    def chord_class(self) -> RootedChordClass:
        """Drop octaves, keeping the root's pitch class as root."""
        return RootedChordClass(self.chord.chord_class(), self.root.pitch_class)

    def transpose(self, interval: Interval | int) -> RootedChord:
        return RootedChord(self.chord.transpose(interval), transpose(self.root, interval))

    def pattern(self) -> ChordPattern:
        """Shape of this voicing as signed intervals from the root."""
        return ChordPattern.from_chord(self)

    def __str__(self) -> str:
        return f"{self.chord} root {self.root.spell()}"


@dataclass(frozen=True, init=False)
class ChordPattern:
    """
    A chord shape - signed intervals from an implicit root at 0.

    Intervals are kept sorted by signed value with duplicates removed,
    so ChordPattern([7, 0, 4, 4]) == ChordPattern([0, 4, 7]).

    The pattern does not validate against any chord; it generates chords.
    """

    intervals: tuple[Interval, ...]

    # Common chord shapes (defined after class)
    MAJOR_TRIAD: ClassVar[ChordPattern]
    MINOR_TRIAD: ClassVar[ChordPattern]
    DIMINISHED_TRIAD: ClassVar[ChordPattern]
    AUGMENTED_TRIAD: ClassVar[ChordPattern]
    SUS2: ClassVar[ChordPattern]
    SUS4: ClassVar[ChordPattern]
    MAJOR_7: ClassVar[ChordPattern]
    MINOR_7: ClassVar[ChordPattern]
    DOMINANT_7: ClassVar[ChordPattern]
    DIMINISHED_7: ClassVar[ChordPattern]
    HALF_DIMINISHED_7: ClassVar[ChordPattern]

    def __init__(self, intervals: Iterable[Interval | int]) -> None:
        unique = {i if isinstance(i, Interval) else Interval(i) for i in intervals}
        object.__setattr__(self, "intervals", tuple(sorted(unique)))

    @classmethod
    def from_chord(cls, chord: RootedChord) -> ChordPattern:
        """Derive the shape of a rooted chord."""
        return cls(interval_between(chord.root, p) for p in chord.pitches)

    def voice(self, root: Pitch) -> Chord:
        """Build the chord on a concrete root pitch."""
        return Chord(frozenset(transpose(root, i) for i in self.intervals))

    def rooted(self, root: Pitch) -> RootedChord:
        """
        Build the rooted chord on a concrete root pitch.

        Raises:
            RootNotInChordError: If the pattern has no unison
        """
        return RootedChord(self.voice(root), root)

    def rooted_class(self, root: PitchClass) -> RootedChordClass:
        """Build the rooted chord class on a root pitch class."""
        chord_class = ChordClass(frozenset(root.transpose(i) for i in self.intervals))
        return RootedChordClass(chord_class, root)

    @property
    def semitones(self) -> tuple[int, ...]:
        return tuple(i.semitones for i in self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self) -> str:
        return "[" + ", ".join(str(s) for s in self.semitones) + "]"

    def __repr__(self) -> str:
        return f"ChordPattern({list(self.semitones)!r})"


# Define chord shapes
ChordPattern.MAJOR_TRIAD = ChordPattern([0, 4, 7])
ChordPattern.MINOR_TRIAD = ChordPattern([0, 3, 7])
ChordPattern.DIMINISHED_TRIAD = ChordPattern([0, 3, 6])
ChordPattern.AUGMENTED_TRIAD = ChordPattern([0, 4, 8])
ChordPattern.SUS2 = ChordPattern([0, 2, 7])
ChordPattern.SUS4 = ChordPattern([0, 5, 7])
ChordPattern.MAJOR_7 = ChordPattern([0, 4, 7, 11])
ChordPattern.MINOR_7 = ChordPattern([0, 3, 7, 10])
ChordPattern.DOMINANT_7 = ChordPattern([0, 4, 7, 10])
ChordPattern.DIMINISHED_7 = ChordPattern([0, 3, 6, 9])
ChordPattern.HALF_DIMINISHED_7 = ChordPattern([0, 3, 6, 10])
