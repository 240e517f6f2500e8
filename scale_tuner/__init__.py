"""Scale Tuner - Frequency to equal-temperament note matching.

Architecture Layers:
    1. core/     - Scale model (notes, frequencies, cents distances)
    2. analysis/ - Nearest-note matching
    3. cli       - Command-line host
"""

__version__ = "0.1.0"

# Core types
from .core import (
    Distance,
    Frequency,
    InvalidFrequencyError,
    Match,
    ScaleNote,
)

# Analysis layer
from .analysis import NoteMatcher, closest_note

__all__ = [
    # Core
    "Distance",
    "Frequency",
    "InvalidFrequencyError",
    "Match",
    "ScaleNote",
    # Analysis
    "NoteMatcher",
    "closest_note",
]
