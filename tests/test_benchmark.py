import timeit
import unittest
from unittest.mock import patch

from benchmark_chord_notation import SETUP, STMT, run_benchmark


class TestBenchmark(unittest.TestCase):
    def test_statement_runs_with_setup(self):
        # a single loop is enough to surface missing imports in SETUP
        timeit.timeit(STMT, SETUP, number=1)

    @patch("benchmark_chord_notation.timeit.repeat", return_value=[0.5, 0.25])
    def test_run_benchmark_uses_setup(self, mock_repeat):
        run_benchmark()
        mock_repeat.assert_called_once_with(
            STMT, SETUP, number=10000, repeat=5,
        )


if __name__ == "__main__":
    unittest.main()
