"""Tests for clause modifier value objects."""

import sys
import unittest
from decimal import Decimal
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AskLucy.core.errors import InvalidArgumentError
from AskLucy.core.modifiers import Boost, Field, Fuzziness, Operator, Proximity, RangeType


class TestField(unittest.TestCase):
    def test_default_field_renders_empty(self) -> None:
        self.assertEqual(Field().render(), "")

    def test_empty_name_renders_empty(self) -> None:
        self.assertEqual(str(Field("")), "")

    def test_named_field_renders_separator(self) -> None:
        self.assertEqual(Field("title").render(), "title:")


class TestOperator(unittest.TestCase):
    def test_symbols(self) -> None:
        self.assertEqual(Operator.OPTIONAL.render(), "")
        self.assertEqual(Operator.REQUIRED.render(), "+")
        self.assertEqual(Operator.PROHIBITED.render(), "-")

    def test_from_name_is_case_insensitive(self) -> None:
        self.assertIs(Operator.from_name("Required"), Operator.REQUIRED)
        self.assertIs(Operator.from_name(" prohibited "), Operator.PROHIBITED)
        self.assertIs(Operator.from_name("optional"), Operator.OPTIONAL)

    def test_from_name_unknown(self) -> None:
        with self.assertRaisesRegex(InvalidArgumentError, "operator"):
            Operator.from_name("should")


class TestBoost(unittest.TestCase):
    def test_default_renders_empty(self) -> None:
        self.assertEqual(Boost().render(), "")

    def test_explicit_default_renders_empty(self) -> None:
        self.assertEqual(Boost(1.0).render(), "")
        self.assertEqual(Boost(1).render(), "")

    def test_integer_weight(self) -> None:
        self.assertEqual(Boost(2).render(), "^2")

    def test_float_weight_without_fraction_renders_integer(self) -> None:
        self.assertEqual(Boost(2.0).render(), "^2")
        self.assertEqual(Boost(100.0).render(), "^100")

    def test_trailing_zeros_are_stripped(self) -> None:
        self.assertEqual(Boost(2.10).render(), "^2.1")
        self.assertEqual(Boost(Decimal("2.50")).render(), "^2.5")

    def test_fraction(self) -> None:
        self.assertEqual(Boost(0.5).render(), "^0.5")
        self.assertEqual(Boost(2.25).render(), "^2.25")

    def test_small_weight_is_not_in_exponent_notation(self) -> None:
        self.assertEqual(Boost(1e-7).render(), "^0.0000001")

    def test_zero_weight(self) -> None:
        self.assertEqual(Boost(0).render(), "^0")

    def test_negative_weight_rejected(self) -> None:
        with self.assertRaisesRegex(InvalidArgumentError, "negative"):
            Boost(-1)

    def test_non_finite_weight_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Boost(float("inf"))
        with self.assertRaises(InvalidArgumentError):
            Boost(float("nan"))

    def test_non_numeric_weight_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Boost("2")  # type: ignore[arg-type]
        with self.assertRaises(InvalidArgumentError):
            Boost(True)

    def test_failed_set_keeps_previous_weight(self) -> None:
        boost = Boost(3)
        with self.assertRaises(InvalidArgumentError):
            boost.set(-3)
        self.assertEqual(boost.render(), "^3")

    def test_invalid_argument_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Boost(-0.5)


class TestFuzziness(unittest.TestCase):
    def test_zero_renders_empty(self) -> None:
        self.assertEqual(Fuzziness().render(), "")
        self.assertEqual(Fuzziness(0).render(), "")

    def test_valid_distances(self) -> None:
        self.assertEqual(Fuzziness(1).render(), "~1")
        self.assertEqual(Fuzziness(2).render(), "~2")

    def test_out_of_range(self) -> None:
        for distance in (-1, 3, 10):
            with self.subTest(distance=distance):
                with self.assertRaisesRegex(InvalidArgumentError, "out of range"):
                    Fuzziness(distance)

    def test_non_integer_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Fuzziness(1.5)  # type: ignore[arg-type]
        with self.assertRaises(InvalidArgumentError):
            Fuzziness(True)

    def test_set_distance_overwrites(self) -> None:
        fuzziness = Fuzziness(2)
        fuzziness.set_distance(0)
        self.assertEqual(fuzziness.render(), "")


class TestProximity(unittest.TestCase):
    def test_zero_renders_empty(self) -> None:
        self.assertEqual(Proximity().render(), "")

    def test_no_upper_bound(self) -> None:
        self.assertEqual(Proximity(42).render(), "~42")

    def test_negative_rejected(self) -> None:
        with self.assertRaisesRegex(InvalidArgumentError, "proximity"):
            Proximity(-1)


class TestRangeType(unittest.TestCase):
    def test_default_is_inclusive(self) -> None:
        range_type = RangeType()
        self.assertEqual(range_type.opening_bracket(), "[")
        self.assertEqual(range_type.closing_bracket(), "]")

    def test_inclusive(self) -> None:
        self.assertEqual(RangeType("inclusive").opening_bracket(), "[")
        self.assertEqual(RangeType("inclusive").closing_bracket(), "]")

    def test_exclusive(self) -> None:
        self.assertEqual(RangeType("exclusive").opening_bracket(), "{")
        self.assertEqual(RangeType("exclusive").closing_bracket(), "}")

    def test_unknown_kind(self) -> None:
        with self.assertRaisesRegex(InvalidArgumentError, "bogus"):
            RangeType("bogus")


if __name__ == "__main__":
    unittest.main()
