"""
Conversion between the three chord-progression notations.

    degree    I-V-vi-IV     roman numerals, lower case = minor triad
    absolute  C-G-Am-F      real root names plus an opaque quality suffix
    digits    1564          one digit per chord, meaning depends on the mode

Progressions are hyphen- (or whitespace-) separated. Tokens that cannot be
read are carried through unchanged so a half-typed progression still shows
its recognisable chords; only a bad key root raises.
"""
import re
from dataclasses import asdict, dataclass
from typing import NamedTuple, Optional

from chordnote.constants import (
    CHROMATIC_DEGREES,
    DEGREE_DIGITS,
    MAJOR_DEGREE_OFFSETS,
    MAJOR_DIGIT_DEGREES,
    MINOR_DEGREE_OFFSETS,
    MINOR_DIGIT_DEGREES,
    NOTE_TO_PC,
    Mode,
)
from chordnote.errors import InvalidKeyError
from chordnote.pitch import resolve_spelling

NOTATION_KINDS = ("degree", "absolute", "digits")

_SEPARATOR_RE = re.compile(r"[-\s]+")
_NUMERAL_RE = re.compile(r"^([IViv]+)(.*)$", re.DOTALL)
_ROOT_RE = re.compile(r"^([A-G][#b]?)(.*)$", re.DOTALL)
# First alternative wins: "min7" only loses its leading "m".
_MINOR_MARKER_RE = re.compile(r"^(m|min|-)", re.IGNORECASE)
_DECORATION_RE = re.compile(r"[°+\-7659maj]")


class ChordToken(NamedTuple):
    head: str     # roman numeral or note name
    suffix: str   # quality annotation, carried through as-is


@dataclass(frozen=True)
class ChordNotation:
    degree: str
    absolute: str
    digits: str

    def as_dict(self) -> dict:
        return asdict(self)


def split_progression(text: str) -> list[str]:
    """Split on runs of hyphens/whitespace, dropping empty tokens."""
    return [t for t in _SEPARATOR_RE.split(text) if t]


def split_chord(token: str, pattern=_ROOT_RE) -> Optional[ChordToken]:
    """Split a token into head + suffix, or None when the head doesn't match."""
    m = pattern.match(token)
    if not m:
        return None
    return ChordToken(m.group(1), m.group(2))


def _key_pc(key_root: str) -> int:
    pc = NOTE_TO_PC.get(key_root)
    if pc is None:
        raise InvalidKeyError(key_root)
    return pc


def degree_to_absolute(degree: str, key_root: str, key_mode: Mode) -> str:
    """
    Degree notation → absolute notation, spelled with sharps.

    The numeral's case is not used to choose a chord quality, so
    degree_to_absolute("I-V-vi-IV", "C", "major") gives "C-G-A-F".
    """
    root_pc = _key_pc(key_root)
    offsets = MAJOR_DEGREE_OFFSETS if key_mode == "major" else MINOR_DEGREE_OFFSETS

    chords = []
    for token in split_progression(degree):
        parts = split_chord(token, _NUMERAL_RE)
        interval = offsets.get(parts.head) if parts else None
        if interval is None:
            chords.append(token)
            continue
        note = resolve_spelling((root_pc + interval) % 12, "sharp")
        chords.append(f"{note}{parts.suffix}")
    return "-".join(chords)


def absolute_to_degree(absolute: str, key_root: str, key_mode: Mode) -> str:
    """
    Absolute notation → degree notation.

    Minor chords (suffix starting m / min / -) become lower-case numerals and
    lose the marker: "C-G-Am-F" in C major → "I-V-vi-IV". Degrees carrying a
    b/# prefix stay upper case even for minor chords.
    """
    root_pc = _key_pc(key_root)

    chords = []
    for token in split_progression(absolute):
        parts = split_chord(token, _ROOT_RE)
        note_pc = NOTE_TO_PC.get(parts.head) if parts else None
        if note_pc is None:
            chords.append(token)
            continue

        degree = CHROMATIC_DEGREES[(note_pc - root_pc) % 12]
        marker = _MINOR_MARKER_RE.match(parts.suffix)
        if marker and degree[0] not in "b#":
            degree = degree.lower()
        suffix = parts.suffix[marker.end():] if marker else parts.suffix
        chords.append(f"{degree}{suffix}")
    return "-".join(chords)


def digits_to_degree(digits: str, key_mode: Mode) -> str:
    """
    Digit notation → degree notation, one character per chord.

    >>> digits_to_degree("4536", "major")
    'IV-V-iii-vi'
    >>> digits_to_degree("1451", "minor")
    'i-iv-v-i'
    """
    table = MAJOR_DIGIT_DEGREES if key_mode == "major" else MINOR_DIGIT_DEGREES
    degrees = []
    for ch in digits:
        if ch in "1234567":
            degrees.append(table[int(ch)])
        else:
            degrees.append(ch)
    return "-".join(degrees)


def _numeral_digit(base: str) -> str:
    if base[:1] in ("b", "#"):
        key = base[0] + base[1:].upper()
    else:
        key = base.upper()
    return DEGREE_DIGITS.get(key, "?")


def degree_to_digits(degree: str, key_mode: Mode) -> str:
    """
    Degree notation → digit notation.

    Quality decorations are dropped and the numeral read case-insensitively
    from one table shared by both modes (key_mode is accepted for symmetry
    with digits_to_degree). Unknown numerals come out as "?".
    """
    return "".join(
        _numeral_digit(_DECORATION_RE.sub("", token))
        for token in split_progression(degree)
    )


def parse_progression(text: str, kind: str, key_root: str, key_mode: Mode) -> ChordNotation:
    """
    Fill in all three notations from whichever one the user typed.

    >>> parse_progression("1564", "digits", "C", "major").degree
    'I-V-vi-IV'
    """
    if kind == "degree":
        return ChordNotation(
            degree=text,
            absolute=degree_to_absolute(text, key_root, key_mode),
            digits=degree_to_digits(text, key_mode),
        )
    if kind == "absolute":
        degree = absolute_to_degree(text, key_root, key_mode)
        return ChordNotation(
            degree=degree,
            absolute=text,
            digits=degree_to_digits(degree, key_mode),
        )
    if kind == "digits":
        degree = digits_to_degree(text, key_mode)
        return ChordNotation(
            degree=degree,
            absolute=degree_to_absolute(degree, key_root, key_mode),
            digits=text,
        )
    raise ValueError(f"notation kind must be one of {NOTATION_KINDS}, got {kind!r}")


def transpose_chords(absolute: str, from_key: str, to_key: str) -> str:
    """
    Move an absolute progression from one key to another, spelled with sharps.

    When both keys are the same the chords are not transposed; instead one
    trailing "m" is stripped from every token, so
    transpose_chords("C-G-Am-F", "C", "C") == "C-G-A-F".
    """
    from_pc = _key_pc(from_key)
    to_pc = _key_pc(to_key)

    if from_key == to_key:
        return "-".join(re.sub(r"m$", "", t) for t in _SEPARATOR_RE.split(absolute))

    offset = (to_pc - from_pc) % 12
    chords = []
    for token in split_progression(absolute):
        parts = split_chord(token, _ROOT_RE)
        note_pc = NOTE_TO_PC.get(parts.head) if parts else None
        if note_pc is None:
            chords.append(token)
            continue
        note = resolve_spelling((note_pc + offset) % 12, "sharp")
        chords.append(f"{note}{parts.suffix}")
    return "-".join(chords)
