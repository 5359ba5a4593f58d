"""
Tests for harmony aggregates.

Tests cover:
- ChordClass / RootedChordClass set semantics and root membership
- Chord / RootedChord over absolute pitches
- ChordPattern ordering and chord generation
"""

import copy
import pickle

import pytest

from chuk_music_theory.core import (
    Chord,
    ChordClass,
    ChordPattern,
    Interval,
    Pitch,
    PitchClass,
    RootedChord,
    RootedChordClass,
)
from chuk_music_theory.errors import PitchClassOutOfRangeError, RootNotInChordError

C, D, E, G, A = PitchClass.C, PitchClass.D, PitchClass.E, PitchClass.G, PitchClass.A
C4 = Pitch(C, 4)
E4 = Pitch(E, 4)
G4 = Pitch(G, 4)
C5 = Pitch(C, 5)


class TestChordClass:
    """Tests for ChordClass."""

    def test_order_and_duplicates_ignored(self) -> None:
        """Equality is set equality."""
        assert ChordClass.of(C, E, G) == ChordClass.of(G, C, E, C)
        assert len(ChordClass.of(G, C, E, C)) == 3

    def test_from_ints(self) -> None:
        """Integer members are converted and validated."""
        assert ChordClass.of(0, 4, 7) == ChordClass.of(C, E, G)
        with pytest.raises(PitchClassOutOfRangeError):
            ChordClass.of(0, 12)

    def test_ordered(self) -> None:
        """Iteration is by integer value."""
        assert list(ChordClass.of(G, C, E)) == [C, E, G]
        assert str(ChordClass.of(G, C, E)) == "{C, E, G}"

    def test_empty_allowed(self) -> None:
        """An empty chord class is valid but cannot be rooted."""
        empty = ChordClass(frozenset())
        assert len(empty) == 0
        with pytest.raises(RootNotInChordError):
            empty.with_root(C)

    def test_transpose(self) -> None:
        """Transposition wraps pitch classes."""
        assert ChordClass.of(G, PitchClass.B, D).transpose(5) == ChordClass.of(C, E, G)


class TestRootedChordClass:
    """Tests for RootedChordClass."""

    def test_root_member(self) -> None:
        """A member root is accepted."""
        rooted = RootedChordClass(ChordClass.of(C, E, G), E)
        assert rooted.root == E
        assert rooted.pitch_classes == frozenset({C, E, G})

    def test_root_not_member(self) -> None:
        """A non-member root is rejected."""
        with pytest.raises(RootNotInChordError, match="not a member"):
            RootedChordClass(ChordClass.of(C, E, G), D)

    def test_pattern(self) -> None:
        """Shape is measured upward from the root."""
        assert RootedChordClass(ChordClass.of(C, E, G), C).pattern() == ChordPattern.MAJOR_TRIAD
        assert RootedChordClass(ChordClass.of(C, E, G), E).pattern() == ChordPattern([0, 3, 8])

    def test_int_root_converted(self) -> None:
        """Integer roots become pitch classes and stay usable."""
        rooted = RootedChordClass(ChordClass.of(0, 4, 7), 4)
        assert rooted.root is E
        assert rooted.transpose(1).root is PitchClass.F

    def test_int_root_not_member(self) -> None:
        """A non-member integer root is still a chord error."""
        with pytest.raises(RootNotInChordError, match="Root D"):
            RootedChordClass(ChordClass.of(0, 4, 7), 2)  # type: ignore[arg-type]
        with pytest.raises(PitchClassOutOfRangeError):
            RootedChordClass(ChordClass.of(0, 4, 7), 12)  # type: ignore[arg-type]

    def test_transpose_moves_root(self) -> None:
        """Root moves with the chord."""
        moved = RootedChordClass(ChordClass.of(C, E, G), C).transpose(Interval.MAJOR_SECOND)
        assert moved.root == D
        assert moved.chord_class == ChordClass.of(D, PitchClass.Fs, A)


class TestChord:
    """Tests for Chord."""

    def test_duplicates_collapse(self) -> None:
        """Same pitch twice is one member; octaves are distinct."""
        chord = Chord.of(C4, E4, C4, C5)
        assert len(chord) == 3
        assert chord == Chord.of(C5, E4, C4)

    def test_ordered(self) -> None:
        """Members iterate lowest first."""
        assert Chord.of(G4, C5, C4, E4).ordered() == (C4, E4, G4, C5)
        assert Chord.of(G4, C4).lowest == C4
        assert Chord.of(G4, C4).highest == G4
        assert Chord(frozenset()).lowest is None

    def test_chord_class(self) -> None:
        """Dropping octaves merges C4 and C5."""
        assert Chord.of(C4, E4, C5).chord_class() == ChordClass.of(C, E)

    def test_frequencies(self) -> None:
        """Frequencies lowest first."""
        freqs = Chord.of(Pitch(A, 4), Pitch(A, 3)).frequencies()
        assert freqs == pytest.approx((220.0, 440.0))


class TestRootedChord:
    """Tests for RootedChord."""

    def test_root_member(self) -> None:
        """Root must be one of the pitches, octave included."""
        chord = Chord.of(C4, E4, G4)
        assert RootedChord(chord, C4).root == C4
        with pytest.raises(RootNotInChordError):
            RootedChord(chord, C5)

    def test_transpose(self) -> None:
        """Transposing down crosses the octave correctly."""
        rooted = RootedChord(Chord.of(C4, E4, G4), C4).transpose(-1)
        assert rooted.root == Pitch(PitchClass.B, 3)
        assert rooted.chord == Chord.of(
            Pitch(PitchClass.B, 3), Pitch(PitchClass.Ds, 4), Pitch(PitchClass.Fs, 4)
        )

    def test_chord_class(self) -> None:
        """Projects to a rooted chord class."""
        rooted = RootedChord(Chord.of(C4, E4, G4), E4)
        assert rooted.chord_class() == RootedChordClass(ChordClass.of(C, E, G), E)


class TestChordPattern:
    """Tests for ChordPattern."""

    def test_sorted_unique(self) -> None:
        """Intervals are sorted by signed value, duplicates removed."""
        assert ChordPattern([7, 0, 4, 4]) == ChordPattern.MAJOR_TRIAD
        assert ChordPattern([0, -12, 7]).semitones == (-12, 0, 7)
        assert str(ChordPattern.MINOR_7) == "[0, 3, 7, 10]"

    def test_rooted(self) -> None:
        """Builds a rooted chord on a concrete root."""
        chord = ChordPattern.MAJOR_TRIAD.rooted(C4)
        assert chord.root == C4
        assert chord.chord == Chord.of(C4, E4, G4)

    def test_rooted_crosses_octave(self) -> None:
        """A minor on A4 reaches into octave 5."""
        chord = ChordPattern.MINOR_TRIAD.rooted(Pitch(A, 4))
        assert chord.chord.ordered() == (Pitch(A, 4), C5, Pitch(E, 5))

    def test_rooted_needs_unison(self) -> None:
        """Without the unison the root is not in the chord."""
        shell = ChordPattern([4, 7])
        assert shell.voice(C4) == Chord.of(E4, G4)
        with pytest.raises(RootNotInChordError):
            shell.rooted(C4)

    def test_rooted_class(self) -> None:
        """Builds a rooted chord class on a pitch class."""
        rooted = ChordPattern.MINOR_TRIAD.rooted_class(A)
        assert rooted.root == A
        assert rooted.chord_class == ChordClass.of(A, C, E)

    def test_from_chord(self) -> None:
        """The shape of a generated chord is the pattern it came from."""
        voicing = ChordPattern.MAJOR_7.rooted(Pitch(PitchClass.F, 3))
        assert voicing.pattern() == ChordPattern.MAJOR_7

    def test_from_chord_signed(self) -> None:
        """Pitches below the root give negative intervals."""
        rooted = RootedChord(Chord.of(Pitch(G, 3), C4, E4), C4)
        assert ChordPattern.from_chord(rooted).semitones == (-5, 0, 4)

    def test_copy_and_pickle(self) -> None:
        """Patterns and the chords they build survive copy and pickle."""
        pattern = ChordPattern.DOMINANT_7
        assert copy.deepcopy(pattern) == pattern
        assert pickle.loads(pickle.dumps(pattern)) == pattern
        rooted = pattern.rooted(Pitch(G, 3))
        assert pickle.loads(pickle.dumps(rooted)) == rooted
