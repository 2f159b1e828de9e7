"""Chord qualities and the quality catalog.

The catalog is an ordered table of :class:`QualityTemplate` entries. Each
entry ties a (quality, extension) pair to its interval template, its name
suffix and its spelling in Harte and pychord notation. Builder, parser and
matcher all read from this one table, so appending an entry with
:func:`register` is enough to teach every direction a new chord.

Chord quality is fixed by the intervals up to the 7th. Intervals above that
(9th, 11th) never change the reported quality: on a major base they only
pick which dominant variant applies, on any other base they only set the
extension.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from chord_finder.errors import UnknownQuality
from chord_finder.interval import Interval

logger = logging.getLogger(__name__)


class ChordQuality(Enum):
    """Closed set of chord qualities; the value is the display label."""

    MINOR = "Minor"
    MAJOR = "Major"
    DIMINISHED = "Diminished"
    AUGMENTED = "Augmented"
    SUSPENDED_2 = "Suspended 2nd"
    SUSPENDED_4 = "Suspended 4th"
    DOMINANT_SEVENTH = "Dominant 7th"
    DOMINANT_NINTH = "Dominant 9th"
    DOMINANT_ELEVENTH = "Dominant 11th"
    HALF_DIMINISHED = "Half Diminished 7th"

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Suspended 2nd"``."""
        return self.value


class Extension(Enum):
    """Stacked degree layered on a non-major base quality."""

    SEVENTH = "7th"
    NINTH = "9th"
    ELEVENTH = "11th"

    @property
    def label(self) -> str:
        """Display label, e.g. ``"9th"``."""
        return self.value


# Default extension stack, in stacking order
EXTENSION_STACK: tuple[tuple[Extension, Interval], ...] = (
    (Extension.SEVENTH, Interval.MINOR_SEVENTH),
    (Extension.NINTH, Interval.MAJOR_NINTH),
    (Extension.ELEVENTH, Interval.PERFECT_ELEVENTH),
)

# Names of a degree when it is filled by a given interval
DEGREE_NAMES: dict[tuple[Extension, Interval], str] = {
    (Extension.SEVENTH, Interval.DIMINISHED_SEVENTH): "Diminished 7th",
    (Extension.SEVENTH, Interval.MINOR_SEVENTH): "Minor 7th",
    (Extension.SEVENTH, Interval.MAJOR_SEVENTH): "Major 7th",
    (Extension.NINTH, Interval.MINOR_NINTH): "Minor 9th",
    (Extension.NINTH, Interval.MAJOR_NINTH): "Major 9th",
    (Extension.ELEVENTH, Interval.PERFECT_ELEVENTH): "Perfect 11th",
}

FIFTHS = frozenset({Interval.DIMINISHED_FIFTH, Interval.PERFECT_FIFTH, Interval.AUGMENTED_FIFTH})

MAJOR_TRIAD = (Interval.UNISON, Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH)
MINOR_TRIAD = (Interval.UNISON, Interval.MINOR_THIRD, Interval.PERFECT_FIFTH)


@dataclass(frozen=True)
class QualityTemplate:
    """One catalog entry.

    Parameters
    ----------
    quality : ChordQuality
        The reported quality.
    extension : Extension | None
        Extension layered on ``quality``, None for a plain quality.
    suffix : str
        Canonical name suffix (e.g. ``"min7"``, ``""`` for major).
    intervals : tuple[Interval, ...]
        Ordered template, starting with the unison.
    harte : str
        Harte shorthand (e.g. ``"min7"``, ``"dim7(b9,11)"``).
    pychord : str | None
        pychord quality string, None when pychord has no equivalent.
    substitutions : tuple[tuple[Extension, Interval], ...]
        Degrees of the extension stack filled by a non-default interval.
    """

    quality: ChordQuality
    extension: Extension | None
    suffix: str
    intervals: tuple[Interval, ...]
    harte: str
    pychord: str | None = None
    substitutions: tuple[tuple[Extension, Interval], ...] = ()

    @property
    def key(self) -> tuple[ChordQuality, Extension | None]:
        return (self.quality, self.extension)

    @property
    def residues(self) -> frozenset[int]:
        return frozenset(int(i) for i in self.intervals)

    @property
    def size(self) -> int:
        return len(self.intervals)

    def substitution_labels(self) -> tuple[str, ...]:
        return tuple(DEGREE_NAMES[degree, interval] for degree, interval in self.substitutions)

    def interval_labels(self) -> tuple[str, ...]:
        """Interval names in context: intervals past the triad are named by degree."""
        labels = [interval.label for interval in self.intervals[:3]]
        for position, interval in enumerate(self.intervals[3:]):
            degree = EXTENSION_STACK[position][0] if position < len(EXTENSION_STACK) else None
            labels.append(DEGREE_NAMES.get((degree, interval), interval.label))
        return tuple(labels)


def alter_fifth(template: tuple[Interval, ...], fifth: Interval) -> tuple[Interval, ...]:
    """Replace the fifth of a triad template.

    With the third fixed, minor becomes diminished and major becomes
    augmented by altering only the fifth.

    Examples
    --------
    >>> alter_fifth(MINOR_TRIAD, Interval.DIMINISHED_FIFTH)[-1].name
    'DIMINISHED_FIFTH'
    """
    return tuple(fifth if i in FIFTHS else i for i in template)


def extend(
    template: tuple[Interval, ...],
    extension: Extension,
    substitutions: tuple[tuple[Extension, Interval], ...] = (),
) -> tuple[Interval, ...]:
    """Stack the 7th, 9th and 11th onto ``template`` up to ``extension``."""
    replaced = dict(substitutions)
    degrees: list[Interval] = []
    for degree, interval in EXTENSION_STACK:
        degrees.append(replaced.get(degree, interval))
        if degree is extension:
            break
    return template + tuple(degrees)


DIMINISHED_TRIAD = alter_fifth(MINOR_TRIAD, Interval.DIMINISHED_FIFTH)
AUGMENTED_TRIAD = alter_fifth(MAJOR_TRIAD, Interval.AUGMENTED_FIFTH)
SUS2_TRIAD = (Interval.UNISON, Interval.MAJOR_SECOND, Interval.PERFECT_FIFTH)
SUS4_TRIAD = (Interval.UNISON, Interval.PERFECT_FOURTH, Interval.PERFECT_FIFTH)

_DIM7 = ((Extension.SEVENTH, Interval.DIMINISHED_SEVENTH),)
_DIM7_B9 = _DIM7 + ((Extension.NINTH, Interval.MINOR_NINTH),)

CATALOG: list[QualityTemplate] = []
_BY_KEY: dict[tuple[ChordQuality, Extension | None], QualityTemplate] = {}
_BY_SUFFIX: dict[str, QualityTemplate] = {}


def register(template: QualityTemplate) -> QualityTemplate:
    """Append an entry to the catalog.

    Raises
    ------
    ValueError
        If the template does not start with the unison, repeats a residue,
        or reuses an existing (quality, extension) key or suffix.
    """
    if not template.intervals or template.intervals[0] is not Interval.UNISON:
        msg = f"Template for {template.suffix!r} must start with the unison"
        raise ValueError(msg)
    if len(template.residues) != template.size:
        msg = f"Template for {template.suffix!r} repeats a pitch class"
        raise ValueError(msg)
    if template.key in _BY_KEY:
        msg = f"Duplicate catalog entry: {template.key}"
        raise ValueError(msg)
    if template.suffix in _BY_SUFFIX:
        msg = f"Duplicate catalog suffix: {template.suffix!r}"
        raise ValueError(msg)

    CATALOG.append(template)
    _BY_KEY[template.key] = template
    _BY_SUFFIX[template.suffix] = template
    logger.debug("Registered chord quality %r -> %s", template.suffix, template.key)
    return template


for _entry in (
    # Triads and suspensions
    QualityTemplate(ChordQuality.MAJOR, None, "", MAJOR_TRIAD, "maj", ""),
    QualityTemplate(ChordQuality.MINOR, None, "min", MINOR_TRIAD, "min", "m"),
    QualityTemplate(ChordQuality.DIMINISHED, None, "dim", DIMINISHED_TRIAD, "dim", "dim"),
    QualityTemplate(ChordQuality.AUGMENTED, None, "aug", AUGMENTED_TRIAD, "aug", "aug"),
    QualityTemplate(ChordQuality.SUSPENDED_2, None, "sus2", SUS2_TRIAD, "sus2", "sus2"),
    QualityTemplate(ChordQuality.SUSPENDED_4, None, "sus4", SUS4_TRIAD, "sus4", "sus4"),
    # Dominant variants: major triad plus the extension stack
    QualityTemplate(
        ChordQuality.DOMINANT_SEVENTH, None, "7", extend(MAJOR_TRIAD, Extension.SEVENTH), "7", "7"
    ),
    QualityTemplate(ChordQuality.DOMINANT_NINTH, None, "9", extend(MAJOR_TRIAD, Extension.NINTH), "9", "9"),
    # pychord's 11 leaves out the 3rd
    QualityTemplate(ChordQuality.DOMINANT_ELEVENTH, None, "11", extend(MAJOR_TRIAD, Extension.ELEVENTH), "11"),
    # Minor
    QualityTemplate(
        ChordQuality.MINOR, Extension.SEVENTH, "min7", extend(MINOR_TRIAD, Extension.SEVENTH), "min7", "m7"
    ),
    QualityTemplate(
        ChordQuality.MINOR, Extension.NINTH, "min9", extend(MINOR_TRIAD, Extension.NINTH), "min9", "m9"
    ),
    QualityTemplate(
        ChordQuality.MINOR, Extension.ELEVENTH, "min11", extend(MINOR_TRIAD, Extension.ELEVENTH), "min11"
    ),
    # Half diminished: diminished triad with a minor 7th
    QualityTemplate(
        ChordQuality.HALF_DIMINISHED,
        None,
        "min7b5",
        extend(DIMINISHED_TRIAD, Extension.SEVENTH),
        "hdim7",
        "m7b5",
    ),
    # Diminished: the 7th is diminished, and the 9th too once the 11th is stacked
    QualityTemplate(
        ChordQuality.DIMINISHED,
        Extension.SEVENTH,
        "dim7",
        extend(DIMINISHED_TRIAD, Extension.SEVENTH, _DIM7),
        "dim7",
        "dim7",
        _DIM7,
    ),
    QualityTemplate(
        ChordQuality.DIMINISHED,
        Extension.NINTH,
        "dim9",
        extend(DIMINISHED_TRIAD, Extension.NINTH, _DIM7),
        "dim7(9)",
        None,
        _DIM7,
    ),
    QualityTemplate(
        ChordQuality.DIMINISHED,
        Extension.ELEVENTH,
        "dim11",
        extend(DIMINISHED_TRIAD, Extension.ELEVENTH, _DIM7_B9),
        "dim7(b9,11)",
        None,
        _DIM7_B9,
    ),
    # Augmented
    QualityTemplate(
        ChordQuality.AUGMENTED,
        Extension.SEVENTH,
        "aug7",
        extend(AUGMENTED_TRIAD, Extension.SEVENTH),
        "aug7",
        "7+5",
    ),
    QualityTemplate(
        ChordQuality.AUGMENTED, Extension.NINTH, "aug9", extend(AUGMENTED_TRIAD, Extension.NINTH), "aug7(9)", "9+5"
    ),
    QualityTemplate(
        ChordQuality.AUGMENTED,
        Extension.ELEVENTH,
        "aug11",
        extend(AUGMENTED_TRIAD, Extension.ELEVENTH),
        "aug7(9,11)",
    ),
    # Suspended sevenths; a 9th or 11th would double the suspended tone
    QualityTemplate(
        ChordQuality.SUSPENDED_2,
        Extension.SEVENTH,
        "sus27",
        extend(SUS2_TRIAD, Extension.SEVENTH),
        "sus2(b7)",
    ),
    QualityTemplate(
        ChordQuality.SUSPENDED_4,
        Extension.SEVENTH,
        "sus47",
        extend(SUS4_TRIAD, Extension.SEVENTH),
        "sus4(b7)",
        "7sus4",
    ),
):
    register(_entry)


def entry_for(quality: ChordQuality, extension: Extension | None = None) -> QualityTemplate:
    """Look up the catalog entry for a (quality, extension) pair.

    Raises
    ------
    UnknownQuality
        If the combination is not in the catalog (e.g. a major chord with
        an extension, which is spelled as a dominant quality instead).
    """
    try:
        return _BY_KEY[quality, extension]
    except KeyError:
        label = quality.label if extension is None else f"{quality.label} {extension.label}"
        raise UnknownQuality(label) from None


def template_for(quality: ChordQuality, extension: Extension | None = None) -> tuple[Interval, ...]:
    """Ordered interval template of a quality.

    Examples
    --------
    >>> [i.name for i in template_for(ChordQuality.MINOR)]
    ['UNISON', 'MINOR_THIRD', 'PERFECT_FIFTH']
    """
    return entry_for(quality, extension).intervals


def entry_for_suffix(suffix: str) -> QualityTemplate | None:
    return _BY_SUFFIX.get(suffix)


def suffixes() -> list[str]:
    """Suffix vocabulary, longest first so prefix scans find the longest match."""
    return sorted(_BY_SUFFIX, key=len, reverse=True)


def qualities_matching(intervals: Iterable[int]) -> list[QualityTemplate]:
    """Catalog entries whose template is a subset of ``intervals``.

    Parameters
    ----------
    intervals : Iterable[int]
        Observed intervals (or plain semitone counts) above a candidate
        root. Values are reduced modulo 12; the unison is implied.

    Returns
    -------
    list[QualityTemplate]
        Matching entries, largest template first, catalog order on ties.
    """
    observed = {int(i) % 12 for i in intervals} | {Interval.UNISON.value}
    matches = [entry for entry in CATALOG if entry.residues <= observed]
    return sorted(matches, key=lambda entry: -entry.size)
