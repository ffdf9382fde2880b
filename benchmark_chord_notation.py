import timeit
from chordnote.chord_notation import parse_progression

SETUP = """
from chordnote.chord_notation import parse_progression, transpose_chords
"""

STMT = """
parse_progression("1564", "digits", "C", "major")
parse_progression("Dm7-G7-Cmaj7-Am", "absolute", "C", "major")
parse_progression("i-VII-VI-V", "degree", "A", "minor")
transpose_chords("C-G-Am-F", "C", "Eb")
"""

def run_benchmark():
    # Warmup
    parse_progression("1564", "digits", "C", "major")

    times = timeit.repeat(STMT, SETUP, number=10000, repeat=5)
    print(f"Baseline (min of 5 runs, 10000 loops each): {min(times):.5f} seconds")

if __name__ == '__main__':
    run_benchmark()
