"""Error types raised by chord-finder.

Every error subclasses ``ValueError`` so callers that only care about
"bad notation" can catch that, while callers that want to react to the
specific failure can catch the subclass.
"""

from __future__ import annotations

from collections.abc import Iterable


class ChordError(ValueError):
    """Base class for all chord-finder errors."""


class InvalidNoteName(ChordError):
    """One or more note names could not be parsed.

    Parameters
    ----------
    names : Iterable[str]
        The offending note names, in input order.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        quoted = ", ".join(repr(n) for n in self.names)
        noun = "note name" if len(self.names) == 1 else "note names"
        super().__init__(f"Invalid {noun}: {quoted}")


class UnknownRoot(InvalidNoteName):
    """The leading letter/accidental of a chord name is not a note."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.names = (text,)
        ChordError.__init__(self, f"Unknown root in chord name: {text!r}")


class UnknownQuality(ChordError):
    """A quality suffix is not in the catalog."""

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix
        super().__init__(f"Unknown chord quality: {suffix!r}")


class TrailingGarbage(ChordError):
    """Characters remain after the longest valid quality suffix."""

    def __init__(self, text: str, remainder: str) -> None:
        self.text = text
        self.remainder = remainder
        super().__init__(f"Unexpected trailing characters {remainder!r} in chord name {text!r}")


class EmptyNoteSet(ChordError):
    """Recognition needs at least two distinct pitch classes."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Need at least 2 distinct notes to identify a chord, got {count}")
