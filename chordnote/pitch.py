"""
Pitch classes and enharmonic spelling.

Every recognised note name maps to one pitch class (0-11). Going back the
other way is ambiguous for the five chromatic tones, so the reverse lookup
goes through PC_SPELLINGS and an explicit sharp/flat preference.
"""
import numpy as np

from chordnote.constants import NOTE_TO_PC, PC_SPELLINGS, AccidentalPreference
from chordnote.errors import InvalidNoteError

_PREFERENCES = ("sharp", "flat")


def pitch_class_of(name: str) -> int:
    """Map a note name (e.g. 'C', 'F#', 'Gb') to its pitch class (0-11)."""
    pc = NOTE_TO_PC.get(name)
    if pc is None:
        raise InvalidNoteError(name)
    return pc


def spellings_of(pc: int) -> frozenset[str]:
    """All recognised spellings of a pitch class: one for naturals, two otherwise."""
    spelling = PC_SPELLINGS[int(pc) % 12]
    return frozenset((spelling.sharp, spelling.flat))


def resolve_spelling(pc: int, pref: AccidentalPreference = "sharp") -> str:
    """
    Pick the note name for a pitch class.

    Naturals come back unchanged whatever the preference; chromatic tones use
    the sharp or flat spelling as requested.
    """
    if pref not in _PREFERENCES:
        raise ValueError(f"accidental preference must be 'sharp' or 'flat', got {pref!r}")
    spelling = PC_SPELLINGS[int(pc) % 12]
    if spelling.is_natural:
        return spelling.sharp
    return spelling.sharp if pref == "sharp" else spelling.flat


def normalize_accidental(note: str, pref: AccidentalPreference) -> str:
    """Re-spell a note with the preferred accidental: ('Db', 'sharp') -> 'C#'."""
    return resolve_spelling(pitch_class_of(note), pref)


def transpose_key(root: str, semitones: int, pref: AccidentalPreference) -> str:
    """
    Move a key root by a signed number of semitones.

    >>> transpose_key("C", -2, "flat")
    'Bb'
    """
    return resolve_spelling((pitch_class_of(root) + int(semitones)) % 12, pref)


def pitch_class_vector(pitch_classes) -> np.ndarray:
    """12-element multi-hot float32 vector with 1.0 at every given pitch class."""
    v = np.zeros(12, dtype=np.float32)
    for pc in pitch_classes:
        v[int(pc) % 12] = 1.0
    return v
