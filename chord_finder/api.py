"""Boundary calls used by front ends: name a chord, identify notes."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chord_finder.errors import InvalidNoteName
from chord_finder.matcher import match_chords
from chord_finder.models import ChordDescription
from chord_finder.parser import parse
from chord_finder.pitch_class import PitchClass

logger = logging.getLogger(__name__)


def parse_notes(notes: Iterable[str]) -> list[PitchClass]:
    """Parse note names, reporting every invalid one at once.

    Raises
    ------
    InvalidNoteName
        Naming all notes that failed to parse, in input order.
    """
    parsed: list[PitchClass] = []
    invalid: list[str] = []
    for note in notes:
        try:
            parsed.append(PitchClass.parse(note))
        except InvalidNoteName:
            invalid.append(note)
    if invalid:
        raise InvalidNoteName(invalid)
    return parsed


def name_chord(text: str, *, prefer_flats: bool = False) -> ChordDescription:
    """Describe the chord with the given name.

    Parameters
    ----------
    text : str
        Chord name (e.g. ``"Amin"``).
    prefer_flats : bool
        Spell notes with flats instead of sharps.

    Returns
    -------
    ChordDescription
        Root, quality and notes of the chord.

    Examples
    --------
    >>> name_chord("Gaug").notes
    ('G', 'B', 'D#')
    """
    chord = parse(text)
    return ChordDescription.from_chord(chord, prefer_flats=prefer_flats)


def identify_chord(notes: Iterable[str], *, prefer_flats: bool = False) -> list[ChordDescription]:
    """Describe every chord consistent with the given notes.

    Parameters
    ----------
    notes : Iterable[str]
        Note names (e.g. ``{"D", "F", "A"}``).
    prefer_flats : bool
        Spell notes with flats instead of sharps.

    Returns
    -------
    list[ChordDescription]
        Matches, most specific first. Empty when no chord fits.

    Raises
    ------
    InvalidNoteName
        If any note name is invalid.
    EmptyNoteSet
        If fewer than two distinct pitch classes are given.

    Examples
    --------
    >>> [d.name for d in identify_chord({"D", "F", "A"})]
    ['Dmin']
    """
    pitch_classes = parse_notes(notes)
    chords = match_chords(pitch_classes)
    if not chords:
        logger.debug("No chord matches notes %s", [str(pc) for pc in pitch_classes])
    return [ChordDescription.from_chord(chord, prefer_flats=prefer_flats) for chord in chords]
