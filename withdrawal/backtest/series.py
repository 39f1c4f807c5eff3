import datetime
from typing import Iterable, Iterator

import numpy as np
import pandas as pd

from withdrawal.backtest.models import InputError, PriceSample


class PriceSeries:
    """
    Daily price history, ascending by date.

    Dates are held as a ``datetime64[D]`` array and prices as ``float64``, so
    slicing a series (``series[i:]``) yields a view without copying data.
    Duplicate dates are allowed and keep their input order.
    """

    def __init__(self, dates: np.ndarray, prices: np.ndarray):
        self.dates = dates
        self.prices = prices

    @classmethod
    def from_frame(cls, market_data: pd.DataFrame, price_column: str = "High") -> "PriceSeries":
        """
        Build a series from a DataFrame indexed by date.

        Args:
            market_data: DataFrame with a date-like index (strings are parsed)
            price_column: Column holding the price used by the strategy

        Raises:
            InputError: If the column is missing, a date cannot be parsed, or a
                price is missing, non-numeric or not positive.
        """
        if price_column not in market_data.columns:
            raise InputError(f"Price column '{price_column}' not found in market data")

        index = market_data.index
        if not isinstance(index, pd.DatetimeIndex):
            try:
                index = pd.to_datetime(index)
            except (ValueError, TypeError) as e:
                raise InputError(f"Could not parse market data dates: {e}") from e
        missing = index.isna()
        if missing.any():
            raise InputError(
                f"{int(missing.sum())} row(s) with a missing date, first at row {int(np.argmax(missing))}"
            )
        if index.tz is not None:
            # Keep the exchange's local calendar day
            index = index.tz_localize(None)

        prices = pd.to_numeric(market_data[price_column], errors="coerce").to_numpy(dtype=np.float64)
        bad = ~(prices > 0)  # NaN compares False
        if bad.any():
            first = market_data.index[int(np.argmax(bad))]
            raise InputError(
                f"{int(bad.sum())} row(s) with missing or non-positive '{price_column}' price, first at {first}"
            )

        dates = index.normalize().to_numpy().astype("datetime64[D]")
        order = np.argsort(dates, kind="stable")
        return cls(dates[order], prices[order])

    @classmethod
    def from_samples(cls, samples: Iterable[PriceSample]) -> "PriceSeries":
        samples = list(samples)
        frame = pd.DataFrame(
            {"Price": [s.price for s in samples]},
            index=pd.DatetimeIndex([pd.Timestamp(s.date) for s in samples]),
        )
        return cls.from_frame(frame, price_column="Price")

    def __len__(self) -> int:
        return len(self.dates)

    def __getitem__(self, key: slice) -> "PriceSeries":
        if not isinstance(key, slice):
            raise TypeError("PriceSeries only supports slicing; use sample() for a single day")
        return PriceSeries(self.dates[key], self.prices[key])

    def __iter__(self) -> Iterator[PriceSample]:
        for i in range(len(self)):
            yield self.sample(i)

    def date_at(self, index: int) -> datetime.date:
        return self.dates[index].item()

    def price_at(self, index: int) -> float:
        return float(self.prices[index])

    def sample(self, index: int) -> PriceSample:
        return PriceSample(date=self.date_at(index), price=self.price_at(index))

    @property
    def empty(self) -> bool:
        return len(self.dates) == 0
