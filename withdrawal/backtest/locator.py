import datetime
from typing import Optional

import numpy as np

from withdrawal.backtest.series import PriceSeries


def add_years(day: datetime.date, years: int) -> Optional[datetime.date]:
    """
    Calendar addition of whole years, keeping month and day.

    A 29 February landing in a non-leap year rolls over to 1 March, the way
    normalised calendar arithmetic treats the overflowing day. Returns None
    when the resulting year is outside the calendar's supported range.
    """
    year = day.year + years
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        return None
    try:
        return day.replace(year=year)
    except ValueError:
        return datetime.date(year, 3, 1)


def locate(target: datetime.date, series: PriceSeries) -> Optional[int]:
    """
    Find the earliest sample dated on or after ``target``.

    Args:
        target: Day to look for
        series: Ascending price series

    Returns:
        Index of the first sample with ``date >= target`` (the lowest one when
        dates repeat), or None when every sample is earlier than ``target``.
    """
    index = int(np.searchsorted(series.dates, np.datetime64(target, "D"), side="left"))
    if index == len(series):
        return None
    return index
