#!/usr/bin/env python3
"""
scripts/progression_table.py — show one progression in every key.

Parses the progression once per key and prints the degree / absolute /
digit renderings side by side, plus the key's Japanese name and relative
key. Handy for eyeballing spelling and mode-table changes.

Usage:
    python scripts/progression_table.py 1564
    python scripts/progression_table.py I-V-vi-IV --notation degree --mode minor
    python scripts/progression_table.py C-G-Am-F --notation absolute --from-key C
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from chordnote.chord_notation import NOTATION_KINDS, parse_progression, transpose_chords
from chordnote.errors import InvalidKeyError
from chordnote.keys import describe_key, relative_key
from chordnote.pitch import resolve_spelling

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
GREEN = "\033[92m"
YELL  = "\033[93m"
RED   = "\033[91m"
RESET = "\033[0m"


def _colour_unread(text: str) -> str:
    """Highlight '?' digits, which mark tokens the converter couldn't read."""
    return text.replace("?", f"{RED}?{RESET}")


def print_key_row(text: str, kind: str, root: str, mode: str) -> None:
    info = describe_key(root, mode)
    rel = relative_key(root, mode).relative
    result = parse_progression(text, kind, root, mode)
    print(f"  {CYAN}{info.english:<10}{RESET} {info.japanese:<8}  "
          f"{result.degree:<22}  {GREEN}{result.absolute:<24}{RESET}  "
          f"{_colour_unread(result.digits):<10}  rel: {rel.english}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Render a chord progression in all three notations across all 12 keys.")
    parser.add_argument("progression", type=str)
    parser.add_argument("--notation", choices=NOTATION_KINDS, default="digits")
    parser.add_argument("--mode", choices=("major", "minor"), default="major")
    parser.add_argument("--pref", choices=("sharp", "flat"), default="sharp",
                        help="Spelling of the key roots in the table (default: sharp)")
    parser.add_argument("--from-key", type=str, default=None,
                        help="Key an absolute progression is written in; "
                             "adds a transposition column")
    args = parser.parse_args()

    print(f"\n{BOLD}{'═'*100}{RESET}")
    print(f"{BOLD}  {args.progression}  ({args.notation}, {args.mode}){RESET}")
    print(f"{BOLD}{'═'*100}{RESET}")
    print(f"  {'Key':<10} {'和名':<8}  {'Degree':<22}  {'Absolute':<24}  {'Digits':<10}  Relative")
    print(f"  {'─'*10} {'─'*8}  {'─'*22}  {'─'*24}  {'─'*10}  {'─'*12}")

    for pc in range(12):
        root = resolve_spelling(pc, args.pref)
        try:
            print_key_row(args.progression, args.notation, root, args.mode)
        except InvalidKeyError as e:
            print(f"  {RED}{e}{RESET}", file=sys.stderr)
            return 1

    if args.from_key and args.notation == "absolute":
        print(f"\n{BOLD}── Transposed from {args.from_key} ──{RESET}")
        for pc in range(12):
            to_key = resolve_spelling(pc, args.pref)
            try:
                moved = transpose_chords(args.progression, args.from_key, to_key)
            except InvalidKeyError as e:
                print(f"  {RED}{e}{RESET}", file=sys.stderr)
                return 1
            mark = f"{YELL}(same key){RESET}" if to_key == args.from_key else ""
            print(f"  {to_key:<4} {moved:<30} {mark}")

    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
