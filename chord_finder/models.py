"""Chord data models for chord-finder.

:class:`Chord` is the value object shared by the builder, the parser and the
matcher. :class:`ChordDescription` is its plain-string rendering handed to
callers such as a CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_finder.pitch_class import PitchClass
from chord_finder.quality import ChordQuality, Extension, QualityTemplate, entry_for


@dataclass(frozen=True)
class Chord:
    """A root plus a quality plus an optional extension.

    The notes are derived from those fields, so two chords with equal
    fields always hold the same notes.

    Parameters
    ----------
    root : PitchClass
        The root note.
    quality : ChordQuality
        The chord quality.
    extension : Extension | None
        Extension layered on the quality, None for a plain quality.

    Examples
    --------
    >>> chord = Chord(PitchClass.A, ChordQuality.MINOR)
    >>> [str(n) for n in chord.notes]
    ['A', 'C', 'E']
    >>> str(chord)
    'Amin'
    """

    root: PitchClass
    quality: ChordQuality
    extension: Extension | None = None

    @property
    def template(self) -> QualityTemplate:
        return entry_for(self.quality, self.extension)

    @property
    def notes(self) -> tuple[PitchClass, ...]:
        """Notes in template order, root first."""
        return tuple(self.root.offset(interval) for interval in self.template.intervals)

    @property
    def pitch_classes(self) -> frozenset[PitchClass]:
        return frozenset(self.notes)

    def to_harte(self) -> str:
        from chord_finder.converter import to_harte

        return to_harte(self)

    def to_pychord(self) -> str:
        from chord_finder.converter import to_pychord

        return to_pychord(self)

    def __str__(self) -> str:
        """Return the canonical name as default string representation."""
        from chord_finder.builder import name

        return name(self)


@dataclass(frozen=True)
class ChordDescription:
    """Display-ready description of a chord.

    Parameters
    ----------
    name : str
        Canonical chord name (e.g. ``"Gdim11"``).
    root : str
        Spelled root note.
    quality : str
        Quality label (e.g. ``"Diminished"``).
    extension : str | None
        Extension label (e.g. ``"11th"``), None for a plain quality.
    substitutions : tuple[str, ...]
        Labels of substituted extension degrees (e.g. ``"Minor 9th"``).
    notes : tuple[str, ...]
        Spelled notes, root first.
    intervals : tuple[str, ...]
        Interval labels matching ``notes``.
    """

    name: str
    root: str
    quality: str
    extension: str | None
    substitutions: tuple[str, ...]
    notes: tuple[str, ...]
    intervals: tuple[str, ...]

    @classmethod
    def from_chord(cls, chord: Chord, *, prefer_flats: bool = False) -> ChordDescription:
        from chord_finder.builder import name

        template = chord.template
        return cls(
            name=name(chord, prefer_flats=prefer_flats),
            root=chord.root.spell(prefer_flats),
            quality=chord.quality.label,
            extension=chord.extension.label if chord.extension else None,
            substitutions=template.substitution_labels(),
            notes=tuple(note.spell(prefer_flats) for note in chord.notes),
            intervals=template.interval_labels(),
        )

    def __str__(self) -> str:
        return f"{self.name}: {' '.join(self.notes)}"
