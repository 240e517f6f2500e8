"""Scale model - frequencies, cents distances and the twelve equal-temperament notes.

See https://en.wikipedia.org/wiki/Equal_temperament and
https://en.wikipedia.org/wiki/Cent_(music).
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Dict, Sequence, Tuple, Union
import numpy as np

from .constants import (
    CENTS_PER_OCTAVE,
    NOTE_NAMES,
    REFERENCE_FREQUENCIES,
    TOLERANCE_CENTS,
)


class InvalidFrequencyError(ValueError):
    """Raised when a frequency is not a positive, finite number of Hertz."""


@dataclass(frozen=True, order=True)
class Frequency:
    """A positive, finite frequency in Hertz."""

    hz: float

    def __post_init__(self):
        value = self.hz
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidFrequencyError(f"Frequency must be a number of Hertz, got {value!r}")
        try:
            hz = float(value)
        except OverflowError:
            raise InvalidFrequencyError(f"Frequency must be finite, got {value!r}") from None
        if not np.isfinite(hz) or hz <= 0:
            raise InvalidFrequencyError(f"Frequency must be positive and finite, got {value!r}")
        object.__setattr__(self, "hz", hz)

    def __float__(self) -> float:
        return self.hz

    def shifted_by_octaves(self, octaves: int) -> "Frequency":
        """Return this frequency moved up (or down, if negative) by whole octaves."""
        return Frequency(self.hz * 2.0 ** octaves)

    def distance_in_octaves(self, other: "Frequency") -> int:
        """Number of whole octave doublings from this frequency up to ``other``.

        Compares binary exponents directly, so the ratio never underflows.
        """
        own_mantissa, own_exponent = np.frexp(self.hz)
        other_mantissa, other_exponent = np.frexp(other.hz)
        octaves = int(other_exponent) - int(own_exponent)
        if other_mantissa < own_mantissa:
            octaves -= 1
        return octaves


FrequencyLike = Union[Frequency, float, int]


def as_frequency(value: FrequencyLike) -> Frequency:
    """Coerce a bare number of Hertz into a validated Frequency."""
    if isinstance(value, Frequency):
        return value
    return Frequency(value)


@dataclass(frozen=True)
class Distance:
    """Signed pitch distance in cents (1/100 of a semitone).

    Matching against the closest note keeps this within about +/-50 cents,
    but the type itself does not enforce a range.
    """

    cents: float

    @classmethod
    def between(cls, frequency: Frequency, reference: Frequency) -> "Distance":
        """Distance from ``reference`` up to ``frequency``."""
        return cls(float(CENTS_PER_OCTAVE * np.log2(frequency.hz / reference.hz)))

    @property
    def is_within_tolerance(self) -> bool:
        """Whether the distance is below the ~5 cent limit of human pitch discrimination."""
        return abs(self.cents) < TOLERANCE_CENTS

    def __float__(self) -> float:
        return self.cents


class ScaleNote(Enum):
    """A note of the twelve-tone equal-temperament scale, in pitch order."""

    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    @classmethod
    def lowest(cls) -> "ScaleNote":
        return cls.C

    @classmethod
    def highest(cls) -> "ScaleNote":
        return cls.B

    @property
    def names(self) -> Tuple[str, ...]:
        """Display spellings, sharp first and flat second for enharmonic notes."""
        return NOTE_NAMES[self.value]

    @property
    def display_name(self) -> str:
        return self.names[0]

    @property
    def frequency(self) -> Frequency:
        """Frequency of this note at octave 0 in standard pitch."""
        return Frequency(REFERENCE_FREQUENCIES[self.value])

    @property
    def next_note(self) -> "ScaleNote":
        """The next note up; B wraps to C."""
        return ScaleNote((self.value + 1) % len(NOTE_NAMES))

    @property
    def previous_note(self) -> "ScaleNote":
        """The next note down; C wraps to B."""
        return ScaleNote((self.value - 1) % len(NOTE_NAMES))

    def distance(self, frequency: Frequency) -> Distance:
        """Cents from this note's octave-0 frequency to ``frequency``."""
        return Distance.between(frequency, self.frequency)


@dataclass(frozen=True)
class Match:
    """A note match for an input frequency."""

    note: ScaleNote
    octave: int
    distance: Distance

    @property
    def frequency(self) -> Frequency:
        """The matched note's frequency, adjusted by octave."""
        return self.note.frequency.shifted_by_octaves(self.octave)

    @property
    def distance_cents(self) -> float:
        return self.distance.cents

    @property
    def is_within_tolerance(self) -> bool:
        return self.distance.is_within_tolerance

    @property
    def name(self) -> str:
        """Note name with octave (e.g., 'A4', 'C♯3')."""
        return f"{self.note.display_name}{self.octave}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "note": self.note.display_name,
            "names": list(self.note.names),
            "octave": self.octave,
            "distance_cents": self.distance.cents,
            "is_within_tolerance": self.is_within_tolerance,
            "frequency": self.frequency.hz,
        }


def check_reference_table(
    frequencies: Sequence[float] = REFERENCE_FREQUENCIES,
    names: Sequence[Tuple[str, ...]] = NOTE_NAMES,
) -> None:
    """
    Validate an octave-0 reference table.

    Raises:
        RuntimeError: If the table does not have one strictly increasing
            frequency per name spanning less than one octave
    """
    if len(frequencies) != len(names):
        raise RuntimeError("Scale model must define a name for every note")
    for lower, upper in zip(frequencies, frequencies[1:]):
        if not lower < upper:
            raise RuntimeError(f"Reference frequencies must increase: {lower} >= {upper}")
    if not frequencies[-1] / frequencies[0] < 2:
        raise RuntimeError("Reference frequencies must span less than one octave")


check_reference_table()
