"""Pitch matching - resolve a frequency to the closest equal-temperament note."""

from typing import List, Tuple

from ..core import Distance, Frequency, Match, ScaleNote, as_frequency
from ..core.note import FrequencyLike


class NoteMatcher:
    """Stateless nearest-note matcher over the twelve-note scale model."""

    def __init__(self):
        self.notes: Tuple[ScaleNote, ...] = tuple(ScaleNote)
        self.lowest = ScaleNote.lowest().frequency
        self.highest = ScaleNote.highest().frequency

    def normalize(self, frequency: Frequency) -> Frequency:
        """
        Shift a frequency by whole octaves into the octave-0 window.

        Halves while above B0, then doubles while below C0, so the result
        lies in [C0, 2 * C0).

        Args:
            frequency: Input frequency

        Returns:
            Octave-shifted frequency
        """
        shifted = frequency
        while shifted > self.highest:
            shifted = shifted.shifted_by_octaves(-1)
        while shifted < self.lowest:
            shifted = shifted.shifted_by_octaves(1)
        return shifted

    def candidates(self) -> List[Tuple[ScaleNote, Frequency, int]]:
        """Reference points scanned in pitch order, as (note, frequency, octave offset).

        The lowest note one octave up closes the cycle so values between B0
        and C1 can resolve upward.
        """
        points = [(note, note.frequency, 0) for note in self.notes]
        wrap = self.notes[0]
        points.append((wrap, wrap.frequency.shifted_by_octaves(1), 1))
        return points

    def closest_note(self, frequency: FrequencyLike) -> Match:
        """
        Find the closest scale note to a frequency.

        Args:
            frequency: Frequency, or a bare number of Hertz

        Returns:
            Match with note, octave (never negative) and cents distance

        Raises:
            InvalidFrequencyError: If frequency is not positive and finite
        """
        frequency = as_frequency(frequency)
        normalized = self.normalize(frequency)

        # First minimum wins, so ties go to the lower note
        best = None
        for note, reference, offset in self.candidates():
            distance = Distance.between(normalized, reference)
            if best is None or abs(distance.cents) < abs(best[1].cents):
                best = (note, distance, offset)

        note, distance, offset = best
        octave = normalized.distance_in_octaves(frequency) + offset
        # Sub-C0 octaves are not modelled
        return Match(note=note, octave=max(octave, 0), distance=distance)


_default_matcher = NoteMatcher()


def closest_note(frequency: FrequencyLike) -> Match:
    """Find the closest scale note to a frequency (see NoteMatcher.closest_note)."""
    return _default_matcher.closest_note(frequency)
