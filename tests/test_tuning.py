"""
Tests for tuning systems and frequency derivation.
"""

from fractions import Fraction

import pytest

from chuk_music_theory.core import (
    EQUAL_TEMPERAMENT,
    JUST_INTONATION,
    Pitch,
    PitchClass,
    TuningSystem,
    frequency,
)
from chuk_music_theory.errors import InvalidFrequencyError


class TestEqualTemperament:
    """Tests for the default tuning."""

    @pytest.mark.parametrize(
        ("pitch", "hz"),
        [
            (Pitch(PitchClass.A, 4), 440.0),
            (Pitch(PitchClass.A, 3), 220.0),
            (Pitch(PitchClass.A, 5), 880.0),
            (Pitch(PitchClass.C, 4), 261.63),
            (Pitch(PitchClass.C, 3), 130.81),
            (Pitch(PitchClass.Gs, 8), 6644.88),
        ],
    )
    def test_known_frequencies(self, pitch: Pitch, hz: float) -> None:
        """Matches the standard A440 table within 0.05 Hz."""
        assert frequency(pitch, EQUAL_TEMPERAMENT) == pytest.approx(hz, abs=0.05)

    def test_default_tuning(self) -> None:
        """Equal temperament is the default."""
        c4 = Pitch(PitchClass.C, 4)
        assert frequency(c4) == frequency(c4, EQUAL_TEMPERAMENT)
        assert c4.frequency() == frequency(c4)

    def test_reference_frequency(self) -> None:
        """The reference frequency can be changed."""
        assert frequency(Pitch(PitchClass.A, 4), reference_hz=432.0) == pytest.approx(432.0)
        assert frequency(Pitch(PitchClass.A, 5), reference_hz=432.0) == pytest.approx(864.0)

    def test_extreme_octaves_finite(self) -> None:
        """The whole octave range stays finite and positive."""
        low = frequency(Pitch(PitchClass.C, -128))
        high = frequency(Pitch(PitchClass.B, 127))
        assert 0.0 < low < high < float("inf")


class TestJustIntonation:
    """Tests for 5-limit just intonation."""

    def test_pure_intervals(self) -> None:
        """Fifths are 3/2 and major thirds 5/4 above the reference."""
        assert frequency(Pitch(PitchClass.E, 5), JUST_INTONATION) == pytest.approx(660.0)
        assert frequency(Pitch(PitchClass.Cs, 5), JUST_INTONATION) == pytest.approx(550.0)

    def test_octaves_exact(self) -> None:
        """Octaves are powers of two."""
        assert frequency(Pitch(PitchClass.A, 3), JUST_INTONATION) == pytest.approx(220.0)
        assert frequency(Pitch(PitchClass.A, 6), JUST_INTONATION) == pytest.approx(1760.0)

    def test_below_reference(self) -> None:
        """A semitone below the reference is a major seventh an octave down."""
        assert JUST_INTONATION.ratio(-1) == Fraction(15, 16)
        assert frequency(Pitch(PitchClass.Gs, 4), JUST_INTONATION) == pytest.approx(412.5)


class TestCustomTuning:
    """Tuning systems are pluggable."""

    def test_subclass(self) -> None:
        """A new tuning only needs frequency()."""

        class HertzPerSemitone(TuningSystem):
            def frequency(self, reference: Pitch, reference_hz: float, semitones: int) -> float:
                return reference_hz + semitones

        tuning = HertzPerSemitone()
        assert frequency(Pitch(PitchClass.B, 4), tuning) == 442.0
        assert Pitch(PitchClass.G, 4).frequency(tuning) == 438.0

    def test_abstract(self) -> None:
        """The base class cannot be instantiated."""
        with pytest.raises(TypeError):
            TuningSystem()  # type: ignore[abstract]


class TestReferenceFrequency:
    """Tests for reference frequency validation."""

    @pytest.mark.parametrize("hz", [0, 0.0, -440.0, float("inf"), float("nan"), True, "440"])
    def test_invalid(self, hz: object) -> None:
        """Only finite, positive reference frequencies are accepted."""
        with pytest.raises(InvalidFrequencyError):
            frequency(Pitch(PitchClass.A, 4), reference_hz=hz)  # type: ignore[arg-type]
        with pytest.raises(InvalidFrequencyError):
            frequency(
                Pitch(PitchClass.E, 5), JUST_INTONATION, reference_hz=hz  # type: ignore[arg-type]
            )

    def test_integer_accepted(self) -> None:
        """An integer frequency is a valid reference."""
        assert frequency(Pitch(PitchClass.A, 3), reference_hz=440) == pytest.approx(220.0)
