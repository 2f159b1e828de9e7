"""Intervals: semitone distances from a chord root, with their musical names.

Only the residue modulo 12 is kept, so compound intervals (9th, 11th) and
enharmonic intervals (diminished 7th) are aliases of the simple interval
sharing their residue. Which name is meant in a given chord is decided by
the quality catalog, not here.
"""

from __future__ import annotations

from enum import IntEnum


class Interval(IntEnum):
    """Semitone distance in [0, 12) from an implicit root.

    Examples
    --------
    >>> Interval.MAJOR_NINTH is Interval.MAJOR_SECOND
    True
    >>> classify(16).label
    'Major 3rd'
    """

    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    DIMINISHED_FIFTH = 6
    PERFECT_FIFTH = 7
    AUGMENTED_FIFTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11

    # Contextual names, aliases of the member with the same residue
    MINOR_NINTH = 1
    MAJOR_NINTH = 2
    PERFECT_ELEVENTH = 5
    DIMINISHED_SEVENTH = 9

    @property
    def label(self) -> str:
        """Name of the simple interval, e.g. ``"Minor 3rd"``."""
        return _LABELS[self]


_LABELS: dict[Interval, str] = {
    Interval.UNISON: "Unison",
    Interval.MINOR_SECOND: "Minor 2nd",
    Interval.MAJOR_SECOND: "Major 2nd",
    Interval.MINOR_THIRD: "Minor 3rd",
    Interval.MAJOR_THIRD: "Major 3rd",
    Interval.PERFECT_FOURTH: "Perfect 4th",
    Interval.DIMINISHED_FIFTH: "Diminished 5th",
    Interval.PERFECT_FIFTH: "Perfect 5th",
    Interval.AUGMENTED_FIFTH: "Augmented 5th",
    Interval.MAJOR_SIXTH: "Major 6th",
    Interval.MINOR_SEVENTH: "Minor 7th",
    Interval.MAJOR_SEVENTH: "Major 7th",
}


def classify(semitones: int) -> Interval:
    """Return the canonical interval for a semitone count.

    Total: any integer is reduced modulo 12 first.

    Parameters
    ----------
    semitones : int
        Distance in semitones.

    Returns
    -------
    Interval
        The canonical (non-alias) interval for the residue.
    """
    return Interval(semitones % 12)
