"""
Key metadata: English/Japanese labels and the relative major/minor.

Also bridges to music21.key.Key, which spells flats with '-' ("B-").
"""
from dataclasses import dataclass

import music21
import music21.key

from chordnote.constants import JAPANESE_KEY_NAMES, Mode
from chordnote.pitch import pitch_class_of, resolve_spelling


@dataclass(frozen=True)
class KeyInfo:
    root: str          # bare letter, e.g. "F"
    accidental: str    # "", "#" or "b"
    mode: str
    japanese: str      # "嬰ヘ短調"; falls back to the English label
    english: str       # "F# Minor"


@dataclass(frozen=True)
class RelativeKey:
    original: KeyInfo
    relative: KeyInfo


def describe_key(root: str, mode: Mode) -> KeyInfo:
    """
    Build display metadata for a key.

    The root is not validated: a spelling missing from the Japanese table
    just gets its English label in both fields.
    """
    english = f"{root} {mode[:1].upper()}{mode[1:]}"
    japanese = JAPANESE_KEY_NAMES.get(f"{root} {mode.lower()}", english)
    return KeyInfo(
        root=root[:1],
        accidental=root[1:],
        mode=mode,
        japanese=japanese,
        english=english,
    )


def relative_key(root: str, mode: Mode) -> RelativeKey:
    """
    Relative key: major → minor a minor third down, minor → major a minor third up.

    >>> relative_key("C", "major").relative.english
    'A Minor'
    """
    original = describe_key(root, mode)
    offset = -3 if mode == "major" else 3
    relative_pc = (pitch_class_of(root) + offset) % 12
    relative_mode = "minor" if mode == "major" else "major"
    relative = describe_key(resolve_spelling(relative_pc, "sharp"), relative_mode)
    return RelativeKey(original=original, relative=relative)


def key_from_music21(key) -> tuple[str, str]:
    """Return (root, mode) for a music21.key.Key, e.g. Key('B-') → ('Bb', 'major')."""
    name = key.tonic.name
    root = name[:1] + name[1:].replace("-", "b")
    pitch_class_of(root)  # raises InvalidNoteError
    return root, key.mode


def to_music21_key(root: str, mode: Mode) -> music21.key.Key:
    pitch_class_of(root)  # raises InvalidNoteError
    return music21.key.Key(root[:1] + root[1:].replace("b", "-"), mode)
