"""Unit tests for app.services.percentages: keeping a PD's responsibility weights at or below 100."""

import unittest

from app.services.percentages import (
    TOTAL_PERCENTAGE,
    clamp_percentage,
    max_allowed_percentage,
    redistribute,
)


class TestMaxAllowedPercentage(unittest.TestCase):
    def test_no_other_rows_allows_full_hundred(self) -> None:
        self.assertEqual(max_allowed_percentage([]), TOTAL_PERCENTAGE)

    def test_subtracts_other_rows(self) -> None:
        self.assertEqual(max_allowed_percentage([30, 20.5]), 49.5)

    def test_none_values_count_as_zero(self) -> None:
        self.assertEqual(max_allowed_percentage([None, 40]), 60.0)

    def test_never_negative(self) -> None:
        self.assertEqual(max_allowed_percentage([80, 50]), 0.0)


class TestClampPercentage(unittest.TestCase):
    def test_within_limit_unchanged(self) -> None:
        self.assertEqual(clamp_percentage(25, 50), 25)

    def test_lowered_to_remaining_share(self) -> None:
        """Siblings at 90 leave room for 10."""
        self.assertEqual(clamp_percentage(50, 90), 10.0)

    def test_exactly_reaches_limit(self) -> None:
        self.assertEqual(clamp_percentage(40, 60), 40)

    def test_negative_request_floored_at_zero(self) -> None:
        self.assertEqual(clamp_percentage(-5, 0), 0.0)

    def test_siblings_over_limit_leave_zero(self) -> None:
        self.assertEqual(clamp_percentage(10, 120), 0.0)


class TestRedistribute(unittest.TestCase):
    def test_within_limit_returned_as_is(self) -> None:
        self.assertEqual(redistribute([20.0, 30.0]), [20.0, 30.0])

    def test_scales_proportionally_over_limit(self) -> None:
        result = redistribute([100.0, 100.0])
        self.assertEqual(result, [50.0, 50.0])

    def test_uneven_values_keep_ratio(self) -> None:
        result = redistribute([60.0, 60.0, 30.0])
        self.assertEqual(result, [40.0, 40.0, 20.0])
        self.assertLessEqual(sum(result), TOTAL_PERCENTAGE)

    def test_scaled_values_never_round_total_above_limit(self) -> None:
        """44/25/83 rounded to nearest hundredth would total 100.01."""
        result = redistribute([44.0, 25.0, 83.0])
        self.assertEqual(result, [28.94, 16.44, 54.6])
        self.assertLessEqual(sum(result), TOTAL_PERCENTAGE)

    def test_many_uneven_rows_stay_within_limit(self) -> None:
        for values in ([33.0, 33.0, 35.0], [70.0, 70.0, 70.0], [1.0, 99.0, 3.0, 7.0], [44.0, 25.0, 83.0, 0.0]):
            with self.subTest(values=values):
                self.assertLessEqual(sum(redistribute(values)), TOTAL_PERCENTAGE)

    def test_negative_entries_floored(self) -> None:
        self.assertEqual(redistribute([-10.0, 50.0]), [0.0, 50.0])

    def test_empty_list(self) -> None:
        self.assertEqual(redistribute([]), [])


if __name__ == "__main__":
    unittest.main()
