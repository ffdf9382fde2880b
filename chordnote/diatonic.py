"""
Diatonic scales and 88-key keyboard highlighting.
"""
from dataclasses import dataclass

import numpy as np

from chordnote.constants import PIANO_KEY_COUNT, PIANO_LOWEST_PC, Mode, scale_intervals
from chordnote.pitch import pitch_class_of, pitch_class_vector, resolve_spelling

# Pitch class of every key on the keyboard, A0 .. C8.
_KEYBOARD_PCS = (PIANO_LOWEST_PC + np.arange(PIANO_KEY_COUNT)) % 12


@dataclass(frozen=True)
class DiatonicScale:
    notes: list[str]          # 7 names in scale-degree order
    highlighted: list[bool]   # one flag per piano key


def _diatonic_pitch_classes(root: str, mode: Mode) -> list[int]:
    root_pc = pitch_class_of(root)
    return [(root_pc + interval) % 12 for interval in scale_intervals(mode)]


def diatonic_notes(root: str, mode: Mode) -> list[str]:
    """
    The seven scale notes in degree order, spelled with sharps.

    >>> diatonic_notes("G", "major")
    ['G', 'A', 'B', 'C', 'D', 'E', 'F#']
    """
    return [resolve_spelling(pc, "sharp") for pc in _diatonic_pitch_classes(root, mode)]


def piano_highlights(root: str, mode: Mode) -> list[bool]:
    """88 flags, True where the key's pitch class belongs to the scale."""
    scale_vec = pitch_class_vector(_diatonic_pitch_classes(root, mode))
    return (scale_vec[_KEYBOARD_PCS] > 0).tolist()


def diatonic_scale(root: str, mode: Mode) -> DiatonicScale:
    return DiatonicScale(
        notes=diatonic_notes(root, mode),
        highlighted=piano_highlights(root, mode),
    )


def is_diatonic_key(index: int, root: str, mode: Mode) -> bool:
    """Whether piano key `index` (0 = A0) is in the scale; False off the keyboard."""
    if index < 0 or index >= PIANO_KEY_COUNT:
        return False
    return piano_highlights(root, mode)[index]
