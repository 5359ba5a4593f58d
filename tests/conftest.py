"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_music_theory.core import BeatAssignment, Duration, Metre, Rhythm, Tempo, TimeSignature


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def quarter_rhythm() -> Rhythm:
    """120 BPM with the quarter note as the beat."""
    return Rhythm(Tempo(120), BeatAssignment(Duration(1, 4)))


@pytest.fixture
def common_metre(quarter_rhythm: Rhythm) -> Metre:
    """4/4 at 120 BPM."""
    return Metre(quarter_rhythm, TimeSignature.COMMON_TIME)
