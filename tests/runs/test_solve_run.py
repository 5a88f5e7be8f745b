from __future__ import annotations

import unittest

from minavg.eval_solve import parse_values, resolve_solve_settings, run_solve
from minavg.scan import InvalidInput


class ParseValuesTest(unittest.TestCase):
    def test_commas_and_whitespace(self) -> None:
        self.assertEqual(parse_values("5, 7,-4  8"), [5, 7, -4, 8])

    def test_non_integer_token_raises(self) -> None:
        with self.assertRaises(ValueError):
            parse_values("1,two,3")


class SolveSettingsTest(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = resolve_solve_settings(config={})
        self.assertEqual(settings.length, 50000)
        self.assertFalse(settings.with_naive)
        self.assertIsNone(settings.values)

    def test_length_below_two_raises(self) -> None:
        with self.assertRaises(ValueError):
            resolve_solve_settings(config={"solve": {"length": 1}})


class SolveRunTest(unittest.TestCase):
    def test_explicit_values_with_naive(self) -> None:
        settings = resolve_solve_settings(
            config={},
            with_naive_override=True,
            values=[5, 7, 4, 8, 1],
        )
        result = run_solve(seed=0, settings=settings)
        report = result["report"]

        self.assertEqual(report["source"], "explicit")
        self.assertEqual(report["length"], 5)
        self.assertEqual((report["smart"]["left"], report["smart"]["right"]), (2, 4))
        self.assertEqual(report["smart"]["values"], [4, 8, 1])
        self.assertAlmostEqual(report["naive"]["mean"], report["smart"]["mean"])
        self.assertEqual({r["method"] for r in result["sample_records"]}, {"smart", "naive"})

    def test_random_values_are_seeded(self) -> None:
        settings = resolve_solve_settings(config={}, length_override=500)
        first = run_solve(seed=5, settings=settings)
        second = run_solve(seed=5, settings=settings)
        self.assertEqual(first["values"], second["values"])
        self.assertEqual(first["smart"], second["smart"])
        self.assertEqual(len(first["values"]), 500)
        self.assertTrue(all(-5000 <= v < 5000 for v in first["values"]))
        self.assertNotIn("naive", first["report"])

    def test_short_explicit_values_raise_invalid_input(self) -> None:
        settings = resolve_solve_settings(config={}, values=[3])
        with self.assertRaises(InvalidInput):
            run_solve(seed=0, settings=settings)


if __name__ == "__main__":
    unittest.main()
