from collections import namedtuple
from types import MappingProxyType
from typing import Literal

Mode = Literal["major", "minor"]
AccidentalPreference = Literal["sharp", "flat"]

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

NOTE_TO_PC: MappingProxyType = MappingProxyType({
    "C": 0,  "C#": 1,  "Db": 1,  "D": 2,  "D#": 3,  "Eb": 3,
    "E": 4,  "F": 5,   "F#": 6,  "Gb": 6, "G": 7,   "G#": 8,
    "Ab": 8, "A": 9,   "A#": 10, "Bb": 10, "B": 11,
})


class Spelling(namedtuple("Spelling", ["sharp", "flat"])):
    __slots__ = ()

    @property
    def is_natural(self) -> bool:
        return self.sharp == self.flat


# Pitch class → (sharp spelling, flat spelling). Naturals spell the same both ways.
PC_SPELLINGS: tuple = (
    Spelling("C", "C"),
    Spelling("C#", "Db"),
    Spelling("D", "D"),
    Spelling("D#", "Eb"),
    Spelling("E", "E"),
    Spelling("F", "F"),
    Spelling("F#", "Gb"),
    Spelling("G", "G"),
    Spelling("G#", "Ab"),
    Spelling("A", "A"),
    Spelling("A#", "Bb"),
    Spelling("B", "B"),
)

# ── Scales ────────────────────────────────────────────────────────────────────

MAJOR_INTERVALS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)   # W-W-H-W-W-W-H
MINOR_INTERVALS: tuple[int, ...] = (0, 2, 3, 5, 7, 8, 10)   # W-H-W-W-H-W-W (natural)

# 88-key piano: index 0 is A0, pitch class 9.
PIANO_KEY_COUNT = 88
PIANO_LOWEST_PC = 9

# ── Degree tables ─────────────────────────────────────────────────────────────

# Roman stem → semitone offset above tonic. Case carries no pitch meaning here.
MAJOR_DEGREE_OFFSETS: MappingProxyType = MappingProxyType({
    "I": 0, "II": 2, "III": 4, "IV": 5, "V": 7, "VI": 9, "VII": 11,
    "i": 0, "ii": 2, "iii": 4, "iv": 5, "v": 7, "vi": 9, "vii": 11,
})
MINOR_DEGREE_OFFSETS: MappingProxyType = MappingProxyType({
    "I": 0, "II": 2, "III": 3, "IV": 5, "V": 7, "VI": 8, "VII": 10,
    "i": 0, "ii": 2, "iii": 3, "iv": 5, "v": 7, "vi": 8, "vii": 10,
})

# Chromatic degree above tonic → roman numeral
CHROMATIC_DEGREES: tuple[str, ...] = (
    "I", "bII", "II", "bIII", "III", "IV", "#IV", "V", "bVI", "VI", "bVII", "VII",
)

# Digit (1-7) → diatonic triad numeral. Index 0 is unused.
MAJOR_DIGIT_DEGREES: tuple[str, ...] = ("", "I", "ii", "iii", "IV", "V", "vi", "vii°")
MINOR_DIGIT_DEGREES: tuple[str, ...] = ("", "i", "ii°", "III", "iv", "v", "VI", "VII")

# Bare numeral (upper-cased) → digit. Shared by both modes.
DEGREE_DIGITS: MappingProxyType = MappingProxyType({
    "I": "1", "II": "2", "III": "3", "IV": "4", "V": "5", "VI": "6", "VII": "7",
    "bII": "2", "bIII": "3", "#IV": "4", "bVI": "6", "bVII": "7",
})

# ── Key names ─────────────────────────────────────────────────────────────────

JAPANESE_KEY_NAMES: MappingProxyType = MappingProxyType({
    "C major": "ハ長調",    "C minor": "ハ短調",
    "C# major": "嬰ハ長調", "C# minor": "嬰ハ短調",
    "Db major": "変ニ長調", "Db minor": "変ニ短調",
    "D major": "ニ長調",    "D minor": "ニ短調",
    "Eb major": "変ホ長調", "Eb minor": "変ホ短調",
    "E major": "ホ長調",    "E minor": "ホ短調",
    "F major": "ヘ長調",    "F minor": "ヘ短調",
    "F# major": "嬰ヘ長調", "F# minor": "嬰ヘ短調",
    "Gb major": "変ト長調", "Gb minor": "変ト短調",
    "G major": "ト長調",    "G minor": "ト短調",
    "Ab major": "変イ長調", "Ab minor": "変イ短調",
    "A major": "イ長調",    "A minor": "イ短調",
    "Bb major": "変ロ長調", "Bb minor": "変ロ短調",
    "B major": "ロ長調",    "B minor": "ロ短調",
})


def scale_intervals(mode) -> tuple[int, ...]:
    """Interval pattern for a mode; anything but "major" is natural minor."""
    return MAJOR_INTERVALS if mode == "major" else MINOR_INTERVALS
