import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, fields


class InputError(ValueError):
    """Raised when the price series or the strategy parameters are unusable."""


@dataclass(frozen=True)
class PriceSample:
    """One trading day of the price history."""
    date: datetime.date
    price: float


@dataclass(frozen=True)
class StrategyConfig:
    """Parameters of the fixed-withdrawal strategy under test."""
    initial_capital: int = 333333
    num_runs: int = 5
    years_per_run: int = 10
    inflation_rate: float = 1.016  # Annual multiplier, 1.016 = 1.6% per year
    annual_cost_of_living: int = 16666

    def __post_init__(self):
        if self.initial_capital <= 0:
            raise InputError(f"initial_capital must be positive, got {self.initial_capital}")
        if self.num_runs < 1:
            raise InputError(f"num_runs must be at least 1, got {self.num_runs}")
        if self.years_per_run < 1:
            raise InputError(f"years_per_run must be at least 1, got {self.years_per_run}")
        if self.inflation_rate <= 0:
            raise InputError(f"inflation_rate must be a positive multiplier, got {self.inflation_rate}")
        if self.annual_cost_of_living < 0:
            raise InputError(f"annual_cost_of_living cannot be negative, got {self.annual_cost_of_living}")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "StrategyConfig":
        """Build a config from saved or UI inputs, ignoring unrelated keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known and v is not None})


@dataclass
class SimulationState:
    """Mutable state of one simulation, owned by a single simulate() call."""
    held_shares: int
    period_start: datetime.date
    period_end: datetime.date


class Outcome(Enum):
    SUCCESS = "success"
    FAILED = "failed"
    NOT_APPLICABLE = "n/a"


@dataclass
class AggregateResult:
    """Tally of outcomes across every starting date of a backtest."""
    success_count: int = 0
    failed_count: int = 0
    na_count: int = 0
    start_dates: List[datetime.date] = field(default_factory=list)
    outcomes: List[Outcome] = field(default_factory=list)

    def record(self, start_date: datetime.date, outcome: Outcome) -> None:
        if outcome is Outcome.SUCCESS:
            self.success_count += 1
        elif outcome is Outcome.FAILED:
            self.failed_count += 1
        else:
            self.na_count += 1
        self.start_dates.append(start_date)
        self.outcomes.append(outcome)

    @property
    def total(self) -> int:
        return self.success_count + self.failed_count + self.na_count

    @property
    def success_rate(self) -> Optional[float]:
        """Share of decided simulations that succeeded; None if none were decided."""
        decided = self.success_count + self.failed_count
        if decided == 0:
            return None
        return self.success_count / decided
