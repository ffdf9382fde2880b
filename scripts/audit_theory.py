#!/usr/bin/env python3
"""
scripts/audit_theory.py — cross-check the chordnote tables against music21.

For every recognised root spelling in both modes:
  1. SCALE       diatonic_notes() pitch classes == music21 scale pitch classes
  2. RELATIVE    relative_key() tonic/mode       == music21 Key.relative
  3. DEGREES     digits 1-7 → degree → absolute roots == music21 pitchFromDegree

Any disagreement is written to reports/theory_mismatches.csv.

Usage (from project root):
    python scripts/audit_theory.py
    python scripts/audit_theory.py --reports-dir /tmp/reports
"""
import os
import sys
import csv
import argparse
from collections import Counter

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import warnings
warnings.filterwarnings("ignore")

from chordnote.chord_notation import degree_to_absolute, digits_to_degree, split_chord, split_progression
from chordnote.constants import NOTE_TO_PC
from chordnote.diatonic import diatonic_notes
from chordnote.keys import relative_key, to_music21_key
from chordnote.pitch import pitch_class_of

MODES = ("major", "minor")


def _check_scale(root: str, mode: str, m21_key) -> tuple[list, list]:
    expected = sorted({p.pitchClass for p in m21_key.getPitches()})
    got = sorted({pitch_class_of(n) for n in diatonic_notes(root, mode)})
    return expected, got


def _check_relative(root: str, mode: str, m21_key) -> tuple[str, str]:
    m21_rel = m21_key.relative
    rel = relative_key(root, mode).relative
    expected = f"{m21_rel.tonic.pitchClass} {m21_rel.mode}"
    got = f"{pitch_class_of(rel.root + rel.accidental)} {rel.mode}"
    return expected, got


def _check_degrees(root: str, mode: str, m21_key) -> tuple[list, list]:
    expected = [m21_key.pitchFromDegree(d).pitchClass for d in range(1, 8)]
    absolute = degree_to_absolute(digits_to_degree("1234567", mode), root, mode)
    got = [NOTE_TO_PC.get(split_chord(tok).head) for tok in split_progression(absolute)]
    return expected, got


_CHECKS = {
    "scale": _check_scale,
    "relative": _check_relative,
    "degrees": _check_degrees,
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Audit chordnote tables against music21.")
    parser.add_argument("--reports-dir", type=str, default=os.path.join(ROOT, "reports"))
    args = parser.parse_args()

    os.makedirs(args.reports_dir, exist_ok=True)
    report_path = os.path.join(args.reports_dir, "theory_mismatches.csv")

    rows = []
    per_check: Counter = Counter()
    total = 0
    for root in NOTE_TO_PC:
        for mode in MODES:
            m21_key = to_music21_key(root, mode)
            for name, check in _CHECKS.items():
                total += 1
                expected, got = check(root, mode, m21_key)
                if expected != got:
                    per_check[name] += 1
                    rows.append({
                        "key":      f"{root} {mode}",
                        "check":    name,
                        "expected": expected,
                        "got":      got,
                    })

    with open(report_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["key", "check", "expected", "got"])
        w.writeheader()
        w.writerows(rows)

    print(f"\n{'═'*60}")
    print(f"THEORY AUDIT SUMMARY")
    print(f"{'═'*60}")
    print(f"  Keys audited   : {len(NOTE_TO_PC) * len(MODES)}")
    print(f"  Checks run     : {total}")
    print(f"  Mismatches     : {len(rows)}")
    for name in _CHECKS:
        mark = "✓" if per_check[name] == 0 else f"✗ {per_check[name]}"
        print(f"    {name:<10} {mark}")
    print(f"\n  Report written to:")
    print(f"    {report_path}")
    print()
    return 1 if rows else 0


if __name__ == "__main__":
    sys.exit(main())
