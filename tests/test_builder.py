"""Tests for building chords from root and quality."""

import pytest

from chord_finder import (
    Chord,
    ChordDescription,
    ChordQuality,
    Extension,
    PitchClass,
    UnknownQuality,
    build,
    name,
    parse,
    transpose,
)
from chord_finder.quality import CATALOG


def spelled(chord: Chord) -> list[str]:
    return [str(n) for n in chord.notes]


class TestBuild:
    def test_minor(self):
        assert spelled(build(PitchClass.A, ChordQuality.MINOR)) == ["A", "C", "E"]

    def test_augmented(self):
        assert spelled(build(PitchClass.G, ChordQuality.AUGMENTED)) == ["G", "B", "D#"]

    def test_suspended(self):
        assert spelled(build(PitchClass.G, ChordQuality.SUSPENDED_2)) == ["G", "A", "D"]
        assert spelled(build(PitchClass.G, ChordQuality.SUSPENDED_4)) == ["G", "C", "D"]

    def test_dominant_seventh_wraps_octave(self):
        assert spelled(build(PitchClass.G, ChordQuality.DOMINANT_SEVENTH)) == ["G", "B", "D", "F"]

    def test_dominant_eleventh(self):
        chord = build(PitchClass.C, ChordQuality.DOMINANT_ELEVENTH)
        assert spelled(chord) == ["C", "E", "G", "A#", "D", "F"]

    def test_diminished_eleventh(self):
        chord = build(PitchClass.G, ChordQuality.DIMINISHED, Extension.ELEVENTH)
        assert spelled(chord) == ["G", "A#", "C#", "E", "G#", "C"]

    def test_augmented_eleventh(self):
        chord = build(PitchClass.G, ChordQuality.AUGMENTED, Extension.ELEVENTH)
        assert spelled(chord) == ["G", "B", "D#", "F", "A", "C"]

    def test_root_always_first(self):
        for entry in CATALOG:
            for root in PitchClass:
                chord = build(root, entry.quality, entry.extension)
                assert chord.notes[0] is root
                assert len(chord.pitch_classes) == entry.size

    def test_deterministic(self):
        first = build(PitchClass.Ds, ChordQuality.MINOR, Extension.NINTH)
        second = build(PitchClass.Ds, ChordQuality.MINOR, Extension.NINTH)
        assert first == second
        assert first.notes == second.notes
        assert hash(first) == hash(second)

    def test_unknown_combination_raises(self):
        with pytest.raises(UnknownQuality):
            build(PitchClass.C, ChordQuality.DOMINANT_SEVENTH, Extension.NINTH)

    def test_chord_is_immutable(self):
        chord = build(PitchClass.C, ChordQuality.MAJOR)
        with pytest.raises(AttributeError):
            chord.root = PitchClass.D  # type: ignore[misc]


class TestName:
    @pytest.mark.parametrize(
        ("root", "quality", "extension", "expected"),
        [
            (PitchClass.A, ChordQuality.MINOR, None, "Amin"),
            (PitchClass.C, ChordQuality.MAJOR, None, "C"),
            (PitchClass.D, ChordQuality.DIMINISHED, None, "Ddim"),
            (PitchClass.G, ChordQuality.DOMINANT_SEVENTH, None, "G7"),
            (PitchClass.Fs, ChordQuality.DOMINANT_NINTH, None, "F#9"),
            (PitchClass.E, ChordQuality.DOMINANT_ELEVENTH, None, "E11"),
            (PitchClass.G, ChordQuality.DIMINISHED, Extension.ELEVENTH, "Gdim11"),
            (PitchClass.B, ChordQuality.SUSPENDED_4, Extension.SEVENTH, "Bsus47"),
        ],
    )
    def test_canonical_name(self, root, quality, extension, expected):
        assert name(build(root, quality, extension)) == expected

    def test_prefer_flats(self):
        assert name(build(PitchClass.As, ChordQuality.MINOR), prefer_flats=True) == "Bbmin"

    def test_str_is_name(self):
        assert str(build(PitchClass.Cs, ChordQuality.AUGMENTED, Extension.SEVENTH)) == "C#aug7"


class TestRoundTrip:
    @pytest.mark.parametrize("entry", CATALOG, ids=lambda e: e.suffix or "maj")
    def test_parse_name_build(self, entry):
        for root in PitchClass:
            chord = build(root, entry.quality, entry.extension)
            assert parse(name(chord)) == chord

    @pytest.mark.parametrize("entry", CATALOG, ids=lambda e: e.suffix or "maj")
    def test_flat_spelling_round_trips(self, entry):
        for root in PitchClass:
            chord = build(root, entry.quality, entry.extension)
            assert parse(name(chord, prefer_flats=True)) == chord


class TestTranspose:
    def test_up(self):
        assert transpose(build(PitchClass.C, ChordQuality.MAJOR), 2) == build(PitchClass.D, ChordQuality.MAJOR)

    def test_down_wraps(self):
        assert transpose(build(PitchClass.C, ChordQuality.MINOR), -1).root is PitchClass.B

    def test_keeps_quality_and_extension(self):
        chord = transpose(build(PitchClass.G, ChordQuality.DIMINISHED, Extension.NINTH), 5)
        assert chord.quality is ChordQuality.DIMINISHED
        assert chord.extension is Extension.NINTH


class TestDescription:
    def test_from_chord(self):
        description = ChordDescription.from_chord(build(PitchClass.G, ChordQuality.DIMINISHED, Extension.ELEVENTH))
        assert description.name == "Gdim11"
        assert description.root == "G"
        assert description.quality == "Diminished"
        assert description.extension == "11th"
        assert description.substitutions == ("Diminished 7th", "Minor 9th")
        assert description.notes == ("G", "A#", "C#", "E", "G#", "C")
        assert description.intervals[:3] == ("Unison", "Minor 3rd", "Diminished 5th")
        assert description.intervals[3:] == ("Diminished 7th", "Minor 9th", "Perfect 11th")

    def test_plain_quality_has_no_extension(self):
        description = ChordDescription.from_chord(build(PitchClass.A, ChordQuality.MINOR))
        assert description.extension is None
        assert description.substitutions == ()

    def test_flat_spelling(self):
        description = ChordDescription.from_chord(build(PitchClass.Ds, ChordQuality.MINOR), prefer_flats=True)
        assert description.name == "Ebmin"
        assert description.notes == ("Eb", "Gb", "Bb")

    def test_str(self):
        assert str(ChordDescription.from_chord(build(PitchClass.A, ChordQuality.MINOR))) == "Amin: A C E"
