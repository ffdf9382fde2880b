import unittest
import numpy as np
import music21
import music21.pitch

from chordnote.constants import NOTE_TO_PC
from chordnote.errors import InvalidNoteError
from chordnote.pitch import (
    pitch_class_of,
    spellings_of,
    resolve_spelling,
    normalize_accidental,
    transpose_key,
    pitch_class_vector,
)

NATURALS = ["C", "D", "E", "F", "G", "A", "B"]


class TestPitchClasses(unittest.TestCase):
    def test_pitch_class_of(self):
        self.assertEqual(pitch_class_of("C"), 0)
        self.assertEqual(pitch_class_of("C#"), 1)
        self.assertEqual(pitch_class_of("Db"), 1)
        self.assertEqual(pitch_class_of("Bb"), 10)
        self.assertEqual(pitch_class_of("B"), 11)

    def test_pitch_class_of_invalid(self):
        for bad in ["H", "c", "Cb", "E#", "", "C##"]:
            with self.assertRaises(InvalidNoteError) as ctx:
                pitch_class_of(bad)
            self.assertEqual(ctx.exception.value, bad)

    def test_invalid_note_is_value_error(self):
        with self.assertRaises(ValueError):
            pitch_class_of("X")

    def test_agrees_with_music21(self):
        # music21 spells flats with '-'
        for name, pc in NOTE_TO_PC.items():
            m21_name = name[0] + name[1:].replace("b", "-")
            self.assertEqual(music21.pitch.Pitch(m21_name).pitchClass, pc, name)

    def test_spellings_of(self):
        self.assertEqual(spellings_of(0), frozenset({"C"}))
        self.assertEqual(spellings_of(1), frozenset({"C#", "Db"}))
        self.assertEqual(spellings_of(10), frozenset({"A#", "Bb"}))
        for pc in range(12):
            for name in spellings_of(pc):
                self.assertEqual(pitch_class_of(name), pc)


class TestEnharmonics(unittest.TestCase):
    def test_resolve_spelling(self):
        self.assertEqual(resolve_spelling(1, "sharp"), "C#")
        self.assertEqual(resolve_spelling(1, "flat"), "Db")
        self.assertEqual(resolve_spelling(6), "F#")
        self.assertEqual(resolve_spelling(13, "flat"), "Db")

    def test_naturals_are_fixed_points(self):
        for name in NATURALS:
            pc = pitch_class_of(name)
            self.assertEqual(resolve_spelling(pc, "sharp"), name)
            self.assertEqual(resolve_spelling(pc, "flat"), name)
            self.assertEqual(normalize_accidental(name, "sharp"), name)
            self.assertEqual(normalize_accidental(name, "flat"), name)

    def test_bad_preference(self):
        with self.assertRaises(ValueError):
            resolve_spelling(1, "natural")

    def test_normalize_accidental(self):
        self.assertEqual(normalize_accidental("Db", "sharp"), "C#")
        self.assertEqual(normalize_accidental("C#", "flat"), "Db")
        self.assertEqual(normalize_accidental("F#", "flat"), "Gb")
        self.assertEqual(normalize_accidental("C", "flat"), "C")
        with self.assertRaises(InvalidNoteError):
            normalize_accidental("Fb", "sharp")

    def test_transpose_key(self):
        self.assertEqual(transpose_key("C", 2, "sharp"), "D")
        self.assertEqual(transpose_key("C", -2, "sharp"), "A#")
        self.assertEqual(transpose_key("C", -2, "flat"), "Bb")
        self.assertEqual(transpose_key("G", 5, "sharp"), "C")
        self.assertEqual(transpose_key("C", 12, "sharp"), "C")
        # more than an octave down still wraps
        self.assertEqual(transpose_key("C", -14, "flat"), "Bb")
        with self.assertRaises(InvalidNoteError):
            transpose_key("Z", 1, "sharp")

    def test_pitch_class_vector(self):
        vec = pitch_class_vector([0, 4, 7])
        expected = np.zeros(12, dtype=np.float32)
        expected[[0, 4, 7]] = 1.0
        np.testing.assert_array_equal(vec, expected)
        self.assertEqual(vec.dtype, np.float32)
        np.testing.assert_array_equal(pitch_class_vector([12, 16]), pitch_class_vector([0, 4]))


if __name__ == "__main__":
    unittest.main()
