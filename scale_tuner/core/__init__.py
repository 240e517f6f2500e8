"""Core types and constants for Scale Tuner."""

from .note import (
    Distance,
    Frequency,
    InvalidFrequencyError,
    Match,
    ScaleNote,
    as_frequency,
)
from .constants import (
    CENTS_PER_OCTAVE,
    NOTE_NAMES,
    REFERENCE_FREQUENCIES,
    TOLERANCE_CENTS,
)

__all__ = [
    "Distance",
    "Frequency",
    "InvalidFrequencyError",
    "Match",
    "ScaleNote",
    "as_frequency",
    "CENTS_PER_OCTAVE",
    "NOTE_NAMES",
    "REFERENCE_FREQUENCIES",
    "TOLERANCE_CENTS",
]
