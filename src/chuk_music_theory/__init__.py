"""
chuk-music-theory - an exact value algebra for Western music theory.

Pitches, intervals, chords, durations, tempo and metre as immutable,
invariant-checked values. Serialization lives in the optional
chuk_music_theory.serialization adapter.
"""

import logging

from chuk_music_theory.core import (
    EQUAL_TEMPERAMENT,
    JUST_INTONATION,
    AnchoredTimeline,
    BeatAssignment,
    Chord,
    ChordClass,
    ChordPattern,
    Direction,
    Duration,
    EqualTemperament,
    Interval,
    JustIntonation,
    Marker,
    Metre,
    Note,
    Pitch,
    PitchClass,
    Ratio,
    Rhythm,
    RootedChord,
    RootedChordClass,
    Tempo,
    Timeline,
    TimeSignature,
    TuningSystem,
    frequency,
    interval_between,
    transpose,
)
from chuk_music_theory.errors import (
    ArithmeticOverflowError,
    DecodeError,
    IntervalOverflowError,
    InvalidFrequencyError,
    InvalidRatioError,
    InvalidTempoError,
    MusicTheoryError,
    PitchClassOutOfRangeError,
    RootNotInChordError,
)

__version__ = "0.1.0"

# Library logging: applications configure handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    # Harmony
    "ChordClass",
    "RootedChordClass",
    "Chord",
    "RootedChord",
    "ChordPattern",
    # Timeline
    "Timeline",
    "Marker",
    "AnchoredTimeline",
    "Note",
    # Errors
    "MusicTheoryError",
    "InvalidFrequencyError",
    "InvalidRatioError",
    "InvalidTempoError",
    "RootNotInChordError",
    "ArithmeticOverflowError",
    "IntervalOverflowError",
    "PitchClassOutOfRangeError",
    "DecodeError",
]
