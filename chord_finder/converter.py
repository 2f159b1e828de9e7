"""Chord notation interop with pychord and Harte formats.

This module converts between chord-finder's :class:`Chord` and pychord's
simplified notation (e.g., "Gm7") or Harte notation (e.g., "G:min7").
Chords without an equivalent in the target notation raise ``ValueError``.
"""

from __future__ import annotations

from chord_finder.builder import build
from chord_finder.errors import TrailingGarbage, UnknownQuality
from chord_finder.models import Chord
from chord_finder.pitch_class import PitchClass
from chord_finder.quality import CATALOG, ChordQuality, Extension

# pychord quality names to (quality, extension), including the
# alternative spellings pychord reports for altered fifths
PYCHORD_TO_QUALITY: dict[str, tuple[ChordQuality, Extension | None]] = {
    entry.pychord: entry.key for entry in CATALOG if entry.pychord is not None
}
PYCHORD_TO_QUALITY.update(
    {
        "7#5": (ChordQuality.AUGMENTED, Extension.SEVENTH),
        "9#5": (ChordQuality.AUGMENTED, Extension.NINTH),
        "m7-5": (ChordQuality.HALF_DIMINISHED, None),
    }
)


def to_harte(chord: Chord, *, prefer_flats: bool = False) -> str:
    """Convert to Harte notation string.

    Examples
    --------
    >>> to_harte(build(PitchClass.G, ChordQuality.MINOR, Extension.SEVENTH))
    'G:min7'
    >>> to_harte(build(PitchClass.G, ChordQuality.DIMINISHED, Extension.ELEVENTH))
    'G:dim7(b9,11)'
    """
    return f"{chord.root.spell(prefer_flats)}:{chord.template.harte}"


def to_pychord(chord: Chord, *, prefer_flats: bool = False) -> str:
    """Convert to pychord notation string.

    Raises
    ------
    ValueError
        If pychord has no quality for this chord (e.g. ``"Gdim9"``).

    Examples
    --------
    >>> to_pychord(build(PitchClass.G, ChordQuality.MINOR, Extension.SEVENTH))
    'Gm7'
    >>> to_pychord(build(PitchClass.C, ChordQuality.MAJOR))
    'C'
    """
    quality = chord.template.pychord
    if quality is None:
        msg = f"No pychord quality for chord: {chord}"
        raise ValueError(msg)
    return f"{chord.root.spell(prefer_flats)}{quality}"


def from_pychord(chord_str: str) -> Chord:
    """Parse a pychord notation string into a Chord.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "Bbm").

    Returns
    -------
    Chord
        The equivalent chord.

    Raises
    ------
    ValueError
        If pychord cannot parse the string.
    UnknownQuality
        If the pychord quality has no catalog entry.
    TrailingGarbage
        For slash chords, which are not supported.

    Examples
    --------
    >>> chord = from_pychord("Bbm7")
    >>> chord.root, chord.extension
    (<PitchClass.As: 10>, <Extension.SEVENTH: '7th'>)
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    if pc.on:
        raise TrailingGarbage(chord_str, f"/{pc.on}")

    quality_name = str(pc.quality)
    if quality_name not in PYCHORD_TO_QUALITY:
        raise UnknownQuality(quality_name)

    quality, extension = PYCHORD_TO_QUALITY[quality_name]
    return build(PitchClass.parse(pc.root), quality, extension)
