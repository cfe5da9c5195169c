"""Tests for Range clauses."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AskLucy.core.errors import InvalidArgumentError, InvalidFormatError
from AskLucy.core.range import Range


class TestRange(unittest.TestCase):
    def test_inclusive_range_with_field(self) -> None:
        self.assertEqual(str(Range(10, 20, "price", "inclusive")), "price:[10 TO 20]")

    def test_default_type_is_inclusive(self) -> None:
        self.assertEqual(str(Range(10, 20, "price")), "price:[10 TO 20]")

    def test_exclusive_range(self) -> None:
        self.assertEqual(str(Range("a", "m", range_type="exclusive")), "{a TO m}")

    def test_unbounded_bounds(self) -> None:
        self.assertEqual(str(Range(None, 2020, "year")), "year:[* TO 2020]")
        self.assertEqual(str(Range(5)), "[5 TO *]")
        self.assertEqual(str(Range()), "[* TO *]")
        self.assertEqual(str(Range("", "*")), "[* TO *]")

    def test_bound_order_is_not_checked(self) -> None:
        self.assertEqual(str(Range(20, 10)), "[20 TO 10]")

    def test_switch_type(self) -> None:
        clause = Range(1, 5).exclusive()
        self.assertEqual(str(clause), "{1 TO 5}")
        self.assertEqual(clause.range_type, "exclusive")
        self.assertEqual(str(clause.inclusive()), "[1 TO 5]")

    def test_unknown_type_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Range(1, 2, range_type="bogus")

    def test_bound_with_whitespace_rejected(self) -> None:
        with self.assertRaises(InvalidFormatError):
            Range("new york", "paris", "city")
        with self.assertRaises(InvalidFormatError):
            Range(1, "2 3")

    def test_bound_surrounding_whitespace_is_allowed(self) -> None:
        self.assertEqual(str(Range(" a ", "b ")), "[a TO b]")

    def test_full_rendering_order(self) -> None:
        clause = Range("2020-01-01", "2021-01-01", "date").prohibited().boost(0.5)
        self.assertEqual(str(clause), "-date:[2020-01-01 TO 2021-01-01]^0.5")

    def test_float_bounds(self) -> None:
        self.assertEqual(str(Range(0.5, 1.25)), "[0.5 TO 1.25]")

    def test_escape_option(self) -> None:
        clause = Range("2020-01-01T00:00:00Z", None, "date", escape=True)
        self.assertEqual(str(clause), r"date:[2020\-01\-01T00\:00\:00Z TO *]")


if __name__ == "__main__":
    unittest.main()
