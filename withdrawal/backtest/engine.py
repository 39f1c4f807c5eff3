import logging
from typing import Callable, Optional

import numpy as np
import pandas as pd

from withdrawal.backtest.locator import add_years, locate
from withdrawal.backtest.models import (
    AggregateResult,
    InputError,
    Outcome,
    SimulationState,
    StrategyConfig,
)
from withdrawal.backtest.series import PriceSeries

logger = logging.getLogger(__name__)

Trace = Callable[[str], None]


def simulate(
    config: StrategyConfig,
    series: PriceSeries,
    start_index: int,
    trace: Optional[Trace] = None
) -> Outcome:
    """
    Simulate one retirement starting on ``series[start_index]``.

    Shares are bought with the initial capital on the first day. Every
    ``years_per_run`` years the holding must reach the inflated capital plus
    the living costs of the period; the first day it does, enough shares are
    sold to cover those costs. Only data from the start day onwards is used.

    Args:
        config: Strategy parameters
        series: Full ascending price series
        start_index: Index of the first day of the simulation
        trace: Optional sink receiving human readable progress lines

    Returns:
        SUCCESS if every run was funded, FAILED at the first run that could
        not be, NOT_APPLICABLE if the data ends before the last run does.
    """
    window = series[start_index:]
    first_day = window.date_at(0)
    state = SimulationState(
        held_shares=int(config.initial_capital / window.price_at(0)),
        period_start=first_day,
        period_end=first_day
    )
    if trace:
        trace(f"initial: capital {config.initial_capital}, it can buy {state.held_shares} shares\n")

    for run in range(config.num_runs):
        # No period end past the last representable year
        next_end = add_years(state.period_end, config.years_per_run)
        start_idx = locate(state.period_end, window)
        end_idx = None if next_end is None else locate(next_end, window)
        if start_idx is None or end_idx is None:
            if trace:
                trace("no more available date to test")
            return Outcome.NOT_APPLICABLE
        state.period_start, state.period_end = state.period_end, next_end

        # Capital has to keep pace with inflation and fund the coming period
        inflation = config.inflation_rate ** ((run + 1) * config.years_per_run)
        inflated_capital = config.initial_capital * inflation
        cost_of_living = config.annual_cost_of_living * config.years_per_run * inflation
        target_capital = inflated_capital + cost_of_living
        if trace:
            trace(
                f"{window.date_at(start_idx)} to {window.date_at(end_idx)}, "
                f"target capital {int(target_capital)}, prepared cost of living {int(cost_of_living)}"
            )

        hits = np.flatnonzero(state.held_shares * window.prices[start_idx:end_idx] >= target_capital)
        if hits.size == 0:
            if trace:
                trace("not satisfied")
            return Outcome.FAILED

        event_idx = start_idx + int(hits[0])
        price = window.price_at(event_idx)
        sold_shares = int(cost_of_living / price)
        state.held_shares -= sold_shares
        if trace:
            trace(
                f"{window.date_at(event_idx)} sell {sold_shares} shares in {price:f}, "
                f"earn {int(sold_shares * price)}, remained shares {state.held_shares}"
            )
            trace(f"new capital {int(state.held_shares * price)}\n")

    return Outcome.SUCCESS


def run_backtest(
    config: StrategyConfig,
    series: PriceSeries,
    trace: Optional[Trace] = None
) -> AggregateResult:
    """
    Simulate the strategy from every day of the series and tally the outcomes.

    Raises:
        InputError: If the series is empty.
    """
    if series.empty:
        raise InputError("no input data")

    logger.debug("Backtesting %s over %d starting days", config, len(series))
    result = AggregateResult()
    for start_index in range(len(series)):
        outcome = simulate(config, series, start_index, trace)
        result.record(series.date_at(start_index), outcome)

    logger.info(
        "Backtest finished: %d succeeded, %d failed, %d n/a",
        result.success_count, result.failed_count, result.na_count
    )
    return result


class BacktestEngine:
    """
    Runs the fixed-withdrawal backtest over historical market data.

    Wraps a DataFrame of daily prices so the dashboard and the command line
    can evaluate several parameter sets against the same history.
    """

    def __init__(self, market_data: pd.DataFrame, price_column: str = "High"):
        """
        Args:
            market_data: DataFrame indexed by date with a price column
            price_column: Column to trade at (Yahoo Finance 'High' by default)
        """
        self.price_column = price_column
        self.series = PriceSeries.from_frame(market_data, price_column=price_column)

    def run(self, config: StrategyConfig, trace: Optional[Trace] = None) -> AggregateResult:
        return run_backtest(config, self.series, trace)

    def calculate_stats(self, result: AggregateResult) -> dict:
        """Calculate summary statistics from a backtest result."""
        if result.total == 0:
            return {}

        return {
            "success_count": result.success_count,
            "failed_count": result.failed_count,
            "na_count": result.na_count,
            "total": result.total,
            "success_rate": result.success_rate,
        }
