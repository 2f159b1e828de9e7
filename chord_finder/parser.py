"""Chord name parser: canonical name string to :class:`Chord`.

Grammar (case-sensitive)::

    name      := root suffix
    root      := letter accidental?
    letter    := "A" | "B" | "C" | "D" | "E" | "F" | "G"
    accidental:= "#" | "b"
    suffix    := one of the catalog suffixes, "" for major

The root is consumed greedily, then the longest catalog suffix that
prefixes the rest is taken, so ``"dim9"`` wins over ``"dim"``.
"""

from __future__ import annotations

import logging
import re

from chord_finder.builder import build
from chord_finder.errors import TrailingGarbage, UnknownQuality, UnknownRoot
from chord_finder.models import Chord
from chord_finder.pitch_class import PitchClass
from chord_finder.quality import QualityTemplate, entry_for_suffix, suffixes

logger = logging.getLogger(__name__)

ROOT_RE = re.compile(r"^([A-G])([#b]?)")


def split_root(text: str) -> tuple[PitchClass, str]:
    """Split a chord name into its root and the remaining suffix.

    Raises
    ------
    UnknownRoot
        If the name does not start with a note letter.

    Examples
    --------
    >>> split_root("Bbmin7")
    (<PitchClass.As: 10>, 'min7')
    """
    match = ROOT_RE.match(text)
    if match is None:
        raise UnknownRoot(text)
    root = PitchClass.from_letter(match.group(1), match.group(2))
    return root, text[match.end() :]


def match_suffix(text: str, remainder: str) -> QualityTemplate:
    """Find the catalog entry for the suffix part of a chord name.

    Parameters
    ----------
    text : str
        The full chord name, used in error messages.
    remainder : str
        What is left after the root.

    Raises
    ------
    UnknownQuality
        If no suffix in the catalog prefixes ``remainder``.
    TrailingGarbage
        If characters remain after the longest matching suffix.
    """
    for suffix in suffixes():
        if suffix and remainder.startswith(suffix):
            rest = remainder[len(suffix) :]
            if rest:
                raise TrailingGarbage(text, rest)
            break
    else:
        if remainder:
            raise UnknownQuality(remainder)
        suffix = ""

    entry = entry_for_suffix(suffix)
    if entry is None:
        raise UnknownQuality(suffix)
    return entry


def parse(text: str) -> Chord:
    """Parse a canonical chord name.

    Parameters
    ----------
    text : str
        Chord name (e.g. ``"Amin"``, ``"G7"``, ``"F#dim11"``). Surrounding
        whitespace is ignored.

    Returns
    -------
    Chord
        The parsed chord.

    Raises
    ------
    UnknownRoot
        If the leading letter/accidental is not a note.
    UnknownQuality
        If the suffix is not in the catalog.
    TrailingGarbage
        If characters follow a valid suffix.

    Examples
    --------
    >>> chord = parse("Amin")
    >>> chord.root, chord.quality
    (<PitchClass.A: 9>, <ChordQuality.MINOR: 'Minor'>)
    """
    name = text.strip()
    root, remainder = split_root(name)
    entry = match_suffix(name, remainder)
    logger.debug("Parsed %r as root=%s suffix=%r", name, root, entry.suffix)
    return build(root, entry.quality, entry.extension)
