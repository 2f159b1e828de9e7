import sys

from chord_finder import identify_chord, name_chord

# Notes of a named chord
description = name_chord("Gdim11")
sys.stdout.write(f"{description.name}: {' '.join(description.notes)}\n")  # "Gdim11: G A# C# E G# C"

# Every chord a set of notes can spell, most specific first
for match in identify_chord(["C", "E", "G", "Bb"], prefer_flats=True):
    sys.stdout.write(f"{match.name} ({match.quality})\n")  # "C7 (Dominant 7th)", "C (Major)", "Edim (Diminished)"
