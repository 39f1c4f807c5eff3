"""
Fixed-withdrawal backtest package.

Buys a block of shares with an initial capital and checks, every few years,
whether the holding has grown enough to keep pace with inflation and pay for
the next period's living costs, starting from every day of the history.

All public classes are re-exported here.
"""

# Models
from withdrawal.backtest.models import (
    InputError,
    PriceSample,
    StrategyConfig,
    SimulationState,
    Outcome,
    AggregateResult,
)

# Price data
from withdrawal.backtest.series import (
    PriceSeries,
)

# Day lookup
from withdrawal.backtest.locator import (
    add_years,
    locate,
)

# Engine
from withdrawal.backtest.engine import (
    simulate,
    run_backtest,
    BacktestEngine,
)

__all__ = [
    # Models
    "InputError",
    "PriceSample",
    "StrategyConfig",
    "SimulationState",
    "Outcome",
    "AggregateResult",
    # Price data
    "PriceSeries",
    # Day lookup
    "add_years",
    "locate",
    # Engine
    "simulate",
    "run_backtest",
    "BacktestEngine",
]
