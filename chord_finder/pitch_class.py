"""Pitch classes: the 12-valued cyclic space notes live in.

A pitch class is a note identity without octave. Enharmonic spellings
("C#" and "Db") parse to the same value; spelling is only a display
concern handled by :meth:`PitchClass.spell`.
"""

from __future__ import annotations

from enum import IntEnum

from chord_finder.errors import InvalidNoteName

# Natural letter to pitch class (0-11, where C=0)
NATURALS: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Accidental suffix to semitone shift
ACCIDENTALS: dict[str, int] = {
    "": 0,
    "#": 1,
    "b": -1,
}

# Every accepted spelling, including E#, Fb, B# and Cb
NOTE_TO_PC: dict[str, int] = {
    letter + accidental: (pc + shift) % 12
    for letter, pc in NATURALS.items()
    for accidental, shift in ACCIDENTALS.items()
}

_SHARP_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


class PitchClass(IntEnum):
    """The 12 chromatic pitch classes.

    Examples
    --------
    >>> PitchClass.parse("Bb") is PitchClass.As
    True
    >>> PitchClass.A.offset(3)
    <PitchClass.C: 0>
    >>> PitchClass.A.difference(PitchClass.E)
    7
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    @classmethod
    def from_letter(cls, letter: str, accidental: str = "") -> PitchClass:
        """Build a pitch class from a letter and an accidental.

        Parameters
        ----------
        letter : str
            Uppercase note letter, ``A`` to ``G``.
        accidental : str
            ``""``, ``"#"`` or ``"b"``.

        Raises
        ------
        InvalidNoteName
            If the letter or the accidental is not recognized.
        """
        spelling = f"{letter}{accidental}"
        if letter not in NATURALS or spelling not in NOTE_TO_PC:
            raise InvalidNoteName([spelling])
        return cls(NOTE_TO_PC[spelling])

    @classmethod
    def parse(cls, text: str) -> PitchClass:
        """Parse a note name such as ``"C"``, ``"F#"`` or ``"Bb"``."""
        name = text.strip()
        if not name:
            raise InvalidNoteName([text])
        return cls.from_letter(name[0], name[1:])

    def offset(self, semitones: int) -> PitchClass:
        """Move by a number of semitones (negative moves down)."""
        return PitchClass((self.value + semitones) % 12)

    def difference(self, other: PitchClass) -> int:
        """Semitones counted upward from this pitch class to ``other``."""
        return (other.value - self.value) % 12

    @property
    def ordinal(self) -> int:
        """Position counted from A, used to order results (A=0 ... G#=11)."""
        return (self.value - PitchClass.A.value) % 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Note name, sharp spelling unless ``prefer_flats`` is set."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    def __str__(self) -> str:
        return self.spell()
