"""
Constants for the music theory core.

No magic numbers - reference pitches, integer widths and messages live here.
"""

from typing import Literal

# Reference frequency for A4 (ISO 16)
A4_REFERENCE_HZ: float = 440.0
A4_OCTAVE: int = 4

# Canonical integer widths
OCTAVE_MIN: int = -128  # signed 8-bit
OCTAVE_MAX: int = 127
SEMITONES_MIN: int = -(2**31)  # signed 32-bit
SEMITONES_MAX: int = 2**31 - 1

SEMITONES_PER_OCTAVE: int = 12
SECONDS_PER_MINUTE: int = 60

# Schema version for encoded documents - frozen for v1
SchemaVersion = Literal["music-theory/v1"]
SCHEMA_VERSION: SchemaVersion = "music-theory/v1"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_RATIO = "Invalid ratio {numerator}/{denominator}: both parts must be positive integers."
    INVALID_TEMPO = "Invalid tempo: {bpm}. Must be a finite number of BPM greater than 0."
    ROOT_NOT_IN_CHORD = "Root {root} is not a member of chord {chord}."
    PITCH_CLASS_OUT_OF_RANGE = "Pitch class must be 0-11, got {value}."
    OCTAVE_OUT_OF_RANGE = "Octave must be between {low} and {high}, got {octave}."
    SEMITONES_OUT_OF_RANGE = "Interval must be between {low} and {high} semitones, got {semitones}."
    UNKNOWN_DOCUMENT_TYPE = "Unknown document type: '{type}'."
    UNSUPPORTED_VALUE = "Cannot encode value of type {type}."
    UNSUPPORTED_FORMAT = "Unsupported file format: '{suffix}'. Expected .json, .yaml or .yml."
    FLOAT_OVERFLOW = "{quantity} is too large to represent as a float."
    INVALID_REFERENCE_HZ = "Reference frequency must be finite and greater than 0, got {hz}."
