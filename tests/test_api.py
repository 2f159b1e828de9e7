"""Tests for the name_chord / identify_chord boundary."""

import logging

import pytest

from chord_finder import (
    ChordDescription,
    EmptyNoteSet,
    InvalidNoteName,
    TrailingGarbage,
    UnknownQuality,
    identify_chord,
    name_chord,
    parse_notes,
)


class TestNameChord:
    def test_minor(self):
        description = name_chord("Amin")
        assert description.root == "A"
        assert description.quality == "Minor"
        assert description.notes == ("A", "C", "E")

    def test_augmented(self):
        description = name_chord("Gaug")
        assert description.root == "G"
        assert description.quality == "Augmented"
        assert description.notes == ("G", "B", "D#")

    def test_returns_description(self):
        assert isinstance(name_chord("C"), ChordDescription)

    def test_name_is_canonical(self):
        assert name_chord("Dbmin7").name == "C#min7"
        assert name_chord("Dbmin7", prefer_flats=True).name == "Dbmin7"

    def test_invalid_root(self):
        with pytest.raises(InvalidNoteName):
            name_chord("Xmaj")

    def test_unknown_quality(self):
        with pytest.raises(UnknownQuality):
            name_chord("Cmaj13")

    def test_trailing_garbage(self):
        with pytest.raises(TrailingGarbage):
            name_chord("Cmin7b9")

    def test_half_diminished(self):
        description = name_chord("Bmin7b5")
        assert description.quality == "Half Diminished 7th"
        assert description.extension is None
        assert description.notes == ("B", "D", "F", "A")
        assert description.intervals == ("Unison", "Minor 3rd", "Diminished 5th", "Minor 7th")


class TestIdentifyChord:
    def test_single_match(self):
        descriptions = identify_chord({"D", "F", "A"})
        assert len(descriptions) == 1
        assert descriptions[0].root == "D"
        assert descriptions[0].quality == "Minor"

    def test_ambiguous_set(self):
        descriptions = identify_chord(["C", "E", "G", "A#"])
        assert [d.name for d in descriptions[:2]] == ["C7", "C"]
        assert descriptions[0].quality == "Dominant 7th"

    def test_flat_input(self):
        assert identify_chord(["C", "E", "G", "Bb"]) == identify_chord(["C", "E", "G", "A#"])

    def test_flat_output(self):
        assert identify_chord(["Bb", "Db", "F"], prefer_flats=True)[0].name == "Bbmin"

    def test_no_match_is_empty_list(self):
        assert identify_chord(["C", "C#"]) == []

    def test_single_note_raises(self):
        with pytest.raises(EmptyNoteSet):
            identify_chord({"A"})

    def test_enharmonic_duplicates_count_once(self):
        with pytest.raises(EmptyNoteSet):
            identify_chord(["C#", "Db"])

    def test_invalid_notes_reported_together(self):
        with pytest.raises(InvalidNoteName) as excinfo:
            identify_chord(["C", "X", "E", "H#"])
        assert excinfo.value.names == ("X", "H#")
        assert "note names" in str(excinfo.value)

    def test_invalid_note_checked_before_count(self):
        with pytest.raises(InvalidNoteName):
            identify_chord(["X"])

    def test_logs_when_nothing_matches(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="chord_finder"):
            identify_chord(["C", "C#"])
        assert "No chord matches" in caplog.text


class TestParseNotes:
    def test_keeps_order(self):
        assert [str(n) for n in parse_notes(["E", "C", "G"])] == ["E", "C", "G"]

    def test_single_invalid(self):
        with pytest.raises(InvalidNoteName, match="Invalid note name: 'c'"):
            parse_notes(["c"])
