from __future__ import annotations

import random
import unittest

from minavg.naive import min_abaverage_naive
from minavg.scan import find_min_average_range


def _assert_matches_oracle(case: unittest.TestCase, values: list[int]) -> None:
    result = find_min_average_range(values)
    oracle_mean, _ = min_abaverage_naive(values)
    case.assertLess(result.left, result.right)
    window = values[result.left : result.right + 1]
    case.assertAlmostEqual(result.mean, sum(window) / len(window), delta=1e-9)
    if abs(result.mean - oracle_mean) > 1e-6:
        case.fail(f"heuristic diverged from brute force on {values}: {result} vs {oracle_mean}")


class OracleCrosscheckTest(unittest.TestCase):
    def test_random_sequences_match_brute_force_mean(self) -> None:
        rng = random.Random(20240611)
        for _ in range(1500):
            length = rng.randint(5, 50)
            values = [rng.randint(-5000, 5000) for _ in range(length)]
            _assert_matches_oracle(self, values)

    def test_small_alphabet_sequences_with_many_ties(self) -> None:
        rng = random.Random(99)
        for _ in range(3000):
            length = rng.randint(2, 13)
            values = [rng.randint(-3, 3) for _ in range(length)]
            _assert_matches_oracle(self, values)

    def test_monotone_sequences(self) -> None:
        for values in (list(range(30)), list(range(30, 0, -1)), [(-1) ** i * i for i in range(25)]):
            with self.subTest(values=values[:5]):
                _assert_matches_oracle(self, values)


if __name__ == "__main__":
    unittest.main()
