from __future__ import annotations

import unittest

from minavg.naive import min_abaverage_naive
from minavg.scan import InvalidInput, ScanResult, find_min_average_range, min_abaverage_smart

SCENARIOS = [
    ([0, 1], 0.5, (0, 1)),
    ([5, 7, 4, 8, 1], 4.3333335, (2, 4)),
    ([6, 7, 0, 9, 3, 2], 2.5, (4, 5)),
    ([4, 8, -2, 5, 1, 2, 3, 4, 5], 1.3333333, (2, 4)),
]


class KnownScenariosTest(unittest.TestCase):
    def test_smart_matches_expected_ranges(self) -> None:
        for values, mean, bounds in SCENARIOS:
            with self.subTest(values=values):
                got_mean, got_bounds = min_abaverage_smart(values)
                self.assertEqual(got_bounds, bounds)
                self.assertAlmostEqual(got_mean, mean, delta=1e-6)

    def test_naive_matches_expected_ranges(self) -> None:
        for values, mean, bounds in SCENARIOS:
            with self.subTest(values=values):
                got_mean, got_bounds = min_abaverage_naive(values)
                self.assertEqual(got_bounds, bounds)
                self.assertAlmostEqual(got_mean, mean, delta=1e-6)

    def test_result_fields_and_pair_form_agree(self) -> None:
        result = find_min_average_range([6, 7, 0, 9, 3, 2])
        self.assertIsInstance(result, ScanResult)
        self.assertEqual((result.left, result.right), (4, 5))
        self.assertEqual(result.as_pair(), (2.5, (4, 5)))


class BoundaryTest(unittest.TestCase):
    def test_two_elements_always_whole_list(self) -> None:
        for values in ([7, -3], [-5000, 5000], [0, 0], [2**31 - 1, -(2**31)]):
            with self.subTest(values=values):
                result = find_min_average_range(values)
                self.assertEqual((result.left, result.right), (0, 1))
                self.assertEqual(result.mean, (values[0] + values[1]) / 2)

    def test_ties_keep_first_window(self) -> None:
        result = find_min_average_range([1, 1, 1, 1, 1])
        self.assertEqual((result.mean, result.left, result.right), (1.0, 0, 1))

    def test_final_pair_after_close_out_is_examined(self) -> None:
        # Extension and final pair tie at 0.0, below the first window.
        self.assertEqual(find_min_average_range([0, 1, -1]).as_pair(), (0.0, (1, 2)))
        self.assertEqual(find_min_average_range([-1, 1, -3]).as_pair(), (-1.0, (1, 2)))

    def test_tuple_input_and_input_left_unchanged(self) -> None:
        values = [4, 8, -2, 5, 1, 2, 3, 4, 5]
        snapshot = list(values)
        self.assertEqual(find_min_average_range(tuple(values)), find_min_average_range(values))
        self.assertEqual(values, snapshot)

    def test_repeated_calls_are_identical(self) -> None:
        values = [340, -3077, -1866, -2035, -3667, 3506, -333, 2054, -742, 4533]
        self.assertEqual(find_min_average_range(values), find_min_average_range(values))


class InvalidInputTest(unittest.TestCase):
    def test_short_sequences_are_rejected(self) -> None:
        for values in ([], [42]):
            with self.subTest(values=values):
                with self.assertRaises(InvalidInput):
                    find_min_average_range(values)
                with self.assertRaises(InvalidInput):
                    min_abaverage_naive(values)

    def test_non_int32_values_are_rejected(self) -> None:
        for values in ([1, 2.5], [True, 1], [1, "2"], [2**31, 0], [0, -(2**31) - 1]):
            with self.subTest(values=values):
                with self.assertRaises(InvalidInput):
                    find_min_average_range(values)

    def test_invalid_input_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            find_min_average_range([1])


if __name__ == "__main__":
    unittest.main()
