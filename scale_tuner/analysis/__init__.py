"""Analysis layer - Frequency to note resolution.

This layer maps an already-detected frequency onto the scale model:
- Octave normalization into the octave-0 window
- Nearest-note selection by cents distance
- Octave reconstruction
"""

from .pitch import NoteMatcher, closest_note

__all__ = [
    "NoteMatcher",
    "closest_note",
]
