import unittest
import datetime
from withdrawal.backtest import PriceSample, PriceSeries, add_years, locate


def make_series(*days):
    return PriceSeries.from_samples(
        PriceSample(date=datetime.date.fromisoformat(d), price=100.0) for d in days
    )


class TestLocate(unittest.TestCase):

    def setUp(self):
        self.series = make_series("2000-01-03", "2000-01-04", "2000-01-07", "2000-01-10")

    def test_should_return_exact_match_index(self):
        self.assertEqual(locate(datetime.date(2000, 1, 4), self.series), 1)

    def test_should_return_next_trading_day_given_gap(self):
        # Weekend / holiday gap: 5th and 6th are missing
        self.assertEqual(locate(datetime.date(2000, 1, 5), self.series), 2)

    def test_should_return_zero_given_date_before_first_sample(self):
        self.assertEqual(locate(datetime.date(1999, 6, 1), self.series), 0)

    def test_should_find_last_sample_given_its_date(self):
        self.assertEqual(locate(datetime.date(2000, 1, 10), self.series), 3)

    def test_should_report_not_found_given_date_after_last_sample(self):
        self.assertIsNone(locate(datetime.date(2000, 1, 11), self.series))

    def test_should_return_lowest_index_given_duplicate_dates(self):
        # Precondition
        series = make_series("2000-01-01", "2000-01-02", "2000-01-02", "2000-01-02", "2000-01-03")

        # Under test / Postcondition
        self.assertEqual(locate(datetime.date(2000, 1, 2), series), 1)

    def test_should_report_not_found_given_empty_series(self):
        self.assertIsNone(locate(datetime.date(2000, 1, 1), make_series()))

    def test_should_match_linear_scan_for_every_day_in_range(self):
        days = [datetime.date(2000, 1, 1) + datetime.timedelta(days=d) for d in range(-3, 14)]
        for day in days:
            expected = next(
                (i for i, s in enumerate(self.series) if s.date >= day), None
            )
            self.assertEqual(locate(day, self.series), expected, msg=str(day))


class TestAddYears(unittest.TestCase):

    def test_should_keep_month_and_day(self):
        self.assertEqual(add_years(datetime.date(1990, 7, 15), 10), datetime.date(2000, 7, 15))

    def test_should_roll_leap_day_over_to_march_first(self):
        self.assertEqual(add_years(datetime.date(2000, 2, 29), 1), datetime.date(2001, 3, 1))

    def test_should_keep_leap_day_given_leap_target_year(self):
        self.assertEqual(add_years(datetime.date(2000, 2, 29), 4), datetime.date(2004, 2, 29))

    def test_should_return_none_given_year_past_calendar_range(self):
        self.assertIsNone(add_years(datetime.date(9995, 1, 1), 10))
        self.assertIsNone(add_years(datetime.date(9996, 2, 29), 10))


if __name__ == '__main__':
    unittest.main()
