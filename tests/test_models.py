import unittest
import datetime
from withdrawal.backtest import AggregateResult, InputError, Outcome, StrategyConfig


class TestStrategyConfig(unittest.TestCase):

    def test_should_use_default_parameters(self):
        config = StrategyConfig()
        self.assertEqual(config.initial_capital, 333333)
        self.assertEqual(config.num_runs, 5)
        self.assertEqual(config.years_per_run, 10)
        self.assertAlmostEqual(config.inflation_rate, 1.016)
        self.assertEqual(config.annual_cost_of_living, 16666)

    def test_should_reject_invalid_parameters(self):
        for bad in (
            {"initial_capital": 0},
            {"num_runs": 0},
            {"years_per_run": 0},
            {"inflation_rate": 0.0},
            {"annual_cost_of_living": -1},
        ):
            with self.subTest(**bad):
                with self.assertRaises(InputError):
                    StrategyConfig(**bad)

    def test_should_build_from_dict_ignoring_unknown_keys(self):
        config = StrategyConfig.from_dict({"num_runs": 3, "price_column": "High", "years_per_run": None})
        self.assertEqual(config.num_runs, 3)
        self.assertEqual(config.years_per_run, 10)


class TestAggregateResult(unittest.TestCase):

    def test_should_tally_outcomes(self):
        # Precondition
        result = AggregateResult()
        day = datetime.date(2000, 1, 1)

        # Under test
        for outcome in (Outcome.SUCCESS, Outcome.SUCCESS, Outcome.FAILED, Outcome.NOT_APPLICABLE):
            result.record(day, outcome)

        # Postcondition
        self.assertEqual(result.success_count, 2)
        self.assertEqual(result.failed_count, 1)
        self.assertEqual(result.na_count, 1)
        self.assertEqual(result.total, 4)
        self.assertAlmostEqual(result.success_rate, 2 / 3)

    def test_should_have_no_success_rate_given_only_na(self):
        result = AggregateResult()
        result.record(datetime.date(2000, 1, 1), Outcome.NOT_APPLICABLE)
        self.assertIsNone(result.success_rate)


if __name__ == '__main__':
    unittest.main()
