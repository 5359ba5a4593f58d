"""
Error taxonomy for the music theory core.

Every constructor either returns a valid value or raises one of these.
They all derive from ValueError so callers that only care about
"bad input" can catch that.
"""

from __future__ import annotations


class MusicTheoryError(ValueError):
    """Base class for all invariant violations."""


class InvalidRatioError(MusicTheoryError):
    """Zero, negative or non-integer part supplied to a ratio."""


class InvalidTempoError(MusicTheoryError):
    """Tempo that is negative, zero or not finite."""


class RootNotInChordError(MusicTheoryError):
    """Rooted chord whose root is not one of its members."""


class ArithmeticOverflowError(MusicTheoryError):
    """Semitone or octave arithmetic left the canonical integer width."""


IntervalOverflowError = ArithmeticOverflowError


class PitchClassOutOfRangeError(MusicTheoryError):
    """Integer outside 0-11 converted to a pitch class."""


class DecodeError(MusicTheoryError):
    """Encoded document could not be turned back into a value."""


class InvalidFrequencyError(MusicTheoryError):
    """Reference frequency that is negative, zero or not finite."""
