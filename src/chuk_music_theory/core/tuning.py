"""
Tuning systems - turning pitches into frequencies.

A tuning system answers one question: given a reference pitch sounding at
a known frequency, how high is a pitch a number of semitones away?
New tunings subclass TuningSystem; callers pass the instance to frequency().
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from fractions import Fraction

from chuk_music_theory.constants import A4_REFERENCE_HZ, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_music_theory.core.pitch import Pitch, interval_between
from chuk_music_theory.errors import InvalidFrequencyError


class TuningSystem(ABC):
    """A rule for deriving frequencies from semitone offsets."""

    name: str = ""

    @abstractmethod
    def frequency(self, reference: Pitch, reference_hz: float, semitones: int) -> float:
        """
        Frequency of the pitch `semitones` away from the reference.

        Args:
            reference: The reference pitch (e.g. A4)
            reference_hz: Frequency of the reference pitch
            semitones: Signed offset from the reference

        Returns:
            Frequency in Hz
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EqualTemperament(TuningSystem):
    """Twelve equal semitones per octave, each a factor of 2^(1/12)."""

    name = "equal_temperament"

    def frequency(self, reference: Pitch, reference_hz: float, semitones: int) -> float:
        return reference_hz * 2.0 ** (semitones / SEMITONES_PER_OCTAVE)


# 5-limit just ratios for each chromatic step above the reference
_JUST_RATIOS: tuple[Fraction, ...] = (
    Fraction(1),
    Fraction(16, 15),
    Fraction(9, 8),
    Fraction(6, 5),
    Fraction(5, 4),
    Fraction(4, 3),
    Fraction(45, 32),
    Fraction(3, 2),
    Fraction(8, 5),
    Fraction(5, 3),
    Fraction(9, 5),
    Fraction(15, 8),
)


class JustIntonation(TuningSystem):
    """
    5-limit just intonation relative to the reference pitch.

    The reference acts as the tonic: a perfect fifth above it is exactly
    3/2, a major third exactly 5/4. Octaves are exact powers of two.
    """

    name = "just_intonation"

    def ratio(self, semitones: int) -> Fraction:
        """Exact frequency ratio for a signed offset from the tonic."""
        octaves, step = divmod(semitones, SEMITONES_PER_OCTAVE)
        return _JUST_RATIOS[step] * Fraction(2) ** octaves

    def frequency(self, reference: Pitch, reference_hz: float, semitones: int) -> float:
        return reference_hz * float(self.ratio(semitones))


EQUAL_TEMPERAMENT = EqualTemperament()
JUST_INTONATION = JustIntonation()


def frequency(
    pitch: Pitch,
    tuning: TuningSystem = EQUAL_TEMPERAMENT,
    reference: Pitch = Pitch.A4,
    reference_hz: float = A4_REFERENCE_HZ,
) -> float:
    """
    Frequency of a pitch in Hz.

    Args:
        pitch: The pitch to tune
        tuning: Tuning system (default equal temperament)
        reference: Reference pitch (default A4)
        reference_hz: Frequency of the reference pitch (default 440.0)

    Returns:
        A finite, positive frequency

    Raises:
        InvalidFrequencyError: If reference_hz is not finite and positive
        ArithmeticOverflowError: If the semitone distance overflows
    """
    if (
        isinstance(reference_hz, bool)
        or not isinstance(reference_hz, (int, float))
        or not math.isfinite(reference_hz)
        or reference_hz <= 0
    ):
        raise InvalidFrequencyError(ErrorMessages.INVALID_REFERENCE_HZ.format(hz=reference_hz))
    semitones = interval_between(reference, pitch).semitones
    return tuning.frequency(reference, reference_hz, semitones)
