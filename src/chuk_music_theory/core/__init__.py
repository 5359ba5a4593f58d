"""
Core music primitives - the value algebra.

These are the mathematical invariants that everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Signed distance between pitches in semitones
- Pitch: Pitch class + octave
- TuningSystem: Pitch to frequency (equal temperament, just intonation)
- Ratio / Duration: Exact fractions of a whole note
- TimeSignature, Tempo, BeatAssignment, Rhythm, Metre: Symbolic to real time
- ChordClass / Chord (+ rooted variants), ChordPattern: Harmony
- Timeline, Marker, AnchoredTimeline: Values placed in time
- Note: Pitch + Duration
"""

from chuk_music_theory.core.chord import (
    Chord,
    ChordClass,
    ChordPattern,
    RootedChord,
    RootedChordClass,
)
from chuk_music_theory.core.note import Note
from chuk_music_theory.core.pitch import (
    Direction,
    Interval,
    Pitch,
    PitchClass,
    interval_between,
    transpose,
)
from chuk_music_theory.core.rhythm import (
    BeatAssignment,
    Duration,
    Metre,
    Ratio,
    Rhythm,
    Tempo,
    TimeSignature,
)
from chuk_music_theory.core.timeline import AnchoredTimeline, Marker, Timeline
from chuk_music_theory.core.tuning import (
    EQUAL_TEMPERAMENT,
    JUST_INTONATION,
    EqualTemperament,
    JustIntonation,
    TuningSystem,
    frequency,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Pitch",
    "Interval",
    "Direction",
    "interval_between",
    "transpose",
    # Tuning
    "TuningSystem",
    "EqualTemperament",
    "JustIntonation",
    "EQUAL_TEMPERAMENT",
    "JUST_INTONATION",
    "frequency",
    # Rhythm
    "Ratio",
    "Duration",
    "TimeSignature",
    "Tempo",
    "BeatAssignment",
    "Rhythm",
    "Metre",
    # Chord
    "ChordClass",
    "RootedChordClass",
    "Chord",
    "RootedChord",
    "ChordPattern",
    # Timeline
    "Timeline",
    "Marker",
    "AnchoredTimeline",
    # Note
    "Note",
]
