"""withdrawal.cli

Command line entry point: backtests the fixed-withdrawal strategy against a
Yahoo Finance CSV and prints how often it would have worked.

Flags follow the original tool (-v -c -f -r -y -i -l).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from withdrawal import market_data
from withdrawal.backtest import AggregateResult, InputError, StrategyConfig, run_backtest

logger = logging.getLogger(__name__)

_DEFAULTS = StrategyConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixed-withdrawal",
        description="Historical success rate of a fixed-withdrawal retirement strategy.",
    )
    parser.add_argument("-v", dest="verbose", action="store_true", help="show verbose progress")
    parser.add_argument("-c", dest="capital", type=int, default=_DEFAULTS.initial_capital, help="initial capital")
    parser.add_argument("-f", dest="file_path", default="./GSPC.csv", help="input csv path")
    parser.add_argument("-r", dest="runs", type=int, default=_DEFAULTS.num_runs, help="how many runs to test")
    parser.add_argument(
        "-y", dest="years_per_run", type=int, default=_DEFAULTS.years_per_run, help="how many years in one run"
    )
    parser.add_argument(
        "-i", dest="inflation_rate", type=float, default=_DEFAULTS.inflation_rate, help="inflation rate"
    )
    parser.add_argument(
        "-l", dest="cost_per_year", type=int, default=_DEFAULTS.annual_cost_of_living, help="cost per year"
    )
    parser.add_argument("--column", default="High", help="price column to trade at")
    parser.add_argument("--debug", action="store_true", help="debug logging")
    return parser


def format_summary(result: AggregateResult) -> str:
    rate = result.success_rate
    rate_text = "N/A" if rate is None else f"{rate:f}"
    return (
        f"success {result.success_count}, failed: {result.failed_count}, "
        f"N/A: {result.na_count}, successful rate {rate_text}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = StrategyConfig(
            initial_capital=args.capital,
            num_runs=args.runs,
            years_per_run=args.years_per_run,
            inflation_rate=args.inflation_rate,
            annual_cost_of_living=args.cost_per_year,
        )
        series = market_data.load_price_series(args.file_path, price_column=args.column)
        result = run_backtest(config, series, trace=print if args.verbose else None)
    except (InputError, OSError) as e:
        logger.error("%s", e)
        return 1

    print(format_summary(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
