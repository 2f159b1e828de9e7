"""Chord finder library for translating between chord names and notes.

This library names the notes of a chord given its name ("Amin" -> A C E)
and identifies every chord a set of notes can spell ({C, E, G, A#} -> C7,
C, Edim).

Examples
--------
>>> from chord_finder import name_chord, identify_chord

>>> # Notes of a named chord
>>> name_chord("Amin").notes
('A', 'C', 'E')

>>> # Every chord a set of notes can spell, most specific first
>>> [d.name for d in identify_chord(["C", "E", "G", "A#"])]
['C7', 'C', 'Edim']

>>> # Working with Chord values directly
>>> from chord_finder import parse, transpose
>>> str(transpose(parse("Gdim11"), 2))
'Adim11'
>>> parse("Gmin7").to_harte()
'G:min7'
"""

from chord_finder.api import identify_chord, name_chord, parse_notes
from chord_finder.builder import build, name, transpose
from chord_finder.converter import from_pychord, to_harte, to_pychord
from chord_finder.errors import (
    ChordError,
    EmptyNoteSet,
    InvalidNoteName,
    TrailingGarbage,
    UnknownQuality,
    UnknownRoot,
)
from chord_finder.interval import Interval, classify
from chord_finder.matcher import match_chords
from chord_finder.models import Chord, ChordDescription
from chord_finder.parser import parse
from chord_finder.pitch_class import PitchClass
from chord_finder.quality import (
    ChordQuality,
    Extension,
    QualityTemplate,
    qualities_matching,
    register,
    template_for,
)

__all__ = [
    "Chord",
    "ChordDescription",
    "ChordError",
    "ChordQuality",
    "EmptyNoteSet",
    "Extension",
    "Interval",
    "InvalidNoteName",
    "PitchClass",
    "QualityTemplate",
    "TrailingGarbage",
    "UnknownQuality",
    "UnknownRoot",
    "build",
    "classify",
    "from_pychord",
    "identify_chord",
    "match_chords",
    "name",
    "name_chord",
    "parse",
    "parse_notes",
    "qualities_matching",
    "register",
    "template_for",
    "to_harte",
    "to_pychord",
]
