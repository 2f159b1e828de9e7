"""Note-set matcher: unordered notes to every consistent chord.

Each distinct note is tried as the root. The intervals from that root to
the other notes form the observed interval set, and every catalog template
contained in it is a match. A note set is often ambiguous (a dominant 7th
also contains its major triad, an augmented triad is symmetric), so all
matches are reported rather than a single guess.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chord_finder.builder import build
from chord_finder.errors import EmptyNoteSet
from chord_finder.models import Chord
from chord_finder.pitch_class import PitchClass
from chord_finder.quality import CATALOG, qualities_matching

logger = logging.getLogger(__name__)

# Fewest distinct pitch classes that define an interval
MIN_NOTES = 2


def observed_intervals(root: PitchClass, notes: Iterable[PitchClass]) -> frozenset[int]:
    """Semitone distances from ``root`` to each note, duplicates collapsed.

    Examples
    --------
    >>> sorted(observed_intervals(PitchClass.D, [PitchClass.D, PitchClass.F, PitchClass.A]))
    [0, 3, 7]
    """
    return frozenset(root.difference(note) for note in notes)


def match_chords(notes: Iterable[PitchClass]) -> list[Chord]:
    """Find every chord whose notes are all in ``notes``.

    Parameters
    ----------
    notes : Iterable[PitchClass]
        Unordered notes; repeats are ignored.

    Returns
    -------
    list[Chord]
        Matches, largest template first, then by root counted from A,
        then in catalog order. Empty when nothing matches.

    Raises
    ------
    EmptyNoteSet
        If fewer than two distinct pitch classes are given.

    Examples
    --------
    >>> [str(c) for c in match_chords({PitchClass.C, PitchClass.E, PitchClass.G, PitchClass.As})]
    ['C7', 'C', 'Edim']
    """
    pitch_classes = frozenset(notes)
    if len(pitch_classes) < MIN_NOTES:
        raise EmptyNoteSet(len(pitch_classes))

    found: list[Chord] = []
    for root in sorted(pitch_classes, key=lambda pc: pc.ordinal):
        intervals = observed_intervals(root, pitch_classes)
        for entry in qualities_matching(intervals):
            chord = build(root, entry.quality, entry.extension)
            # Built notes must stay within the input
            if not chord.pitch_classes <= pitch_classes or chord in found:
                continue
            found.append(chord)
        logger.debug("Root %s: intervals %s", root, sorted(intervals))

    found.sort(key=lambda c: (-c.template.size, c.root.ordinal, CATALOG.index(c.template)))
    logger.debug("Matched %d chord(s) from %d note(s)", len(found), len(pitch_classes))
    return found
