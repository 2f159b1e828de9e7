"""Chord builder: (root, quality) to notes and canonical name."""

from __future__ import annotations

from chord_finder.models import Chord
from chord_finder.pitch_class import PitchClass
from chord_finder.quality import ChordQuality, Extension, entry_for


def build(root: PitchClass, quality: ChordQuality, extension: Extension | None = None) -> Chord:
    """Build a chord from its root and quality.

    Parameters
    ----------
    root : PitchClass
        The root note.
    quality : ChordQuality
        The chord quality.
    extension : Extension | None
        Optional extension on a non-major quality.

    Returns
    -------
    Chord
        The chord; its notes are the root offset by each template interval.

    Raises
    ------
    UnknownQuality
        If (quality, extension) is not a catalog entry.

    Examples
    --------
    >>> chord = build(PitchClass.G, ChordQuality.AUGMENTED)
    >>> [str(n) for n in chord.notes]
    ['G', 'B', 'D#']
    """
    entry_for(quality, extension)
    return Chord(root=root, quality=quality, extension=extension)


def name(chord: Chord, *, prefer_flats: bool = False) -> str:
    """Format the canonical name of a chord.

    Examples
    --------
    >>> name(build(PitchClass.As, ChordQuality.MINOR, Extension.SEVENTH))
    'A#min7'
    >>> name(build(PitchClass.As, ChordQuality.MINOR), prefer_flats=True)
    'Bbmin'
    """
    return f"{chord.root.spell(prefer_flats)}{chord.template.suffix}"


def transpose(chord: Chord, semitones: int) -> Chord:
    """Transpose a chord by a number of semitones (positive = up).

    Examples
    --------
    >>> str(transpose(build(PitchClass.C, ChordQuality.MAJOR), -1))
    'B'
    """
    return Chord(root=chord.root.offset(semitones), quality=chord.quality, extension=chord.extension)
