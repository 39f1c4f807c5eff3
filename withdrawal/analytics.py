import pandas as pd
import numpy as np
from withdrawal.backtest import AggregateResult, Outcome


def calculate_cohort_stats(result: AggregateResult) -> pd.DataFrame:
    """
    Lists the outcome of every starting date.
    Returns a DataFrame indexed by Start Date with columns:
    - Outcome (success / failed / n/a)
    - Success (Bool)
    """
    if not result.outcomes:
        return pd.DataFrame()

    df = pd.DataFrame({
        "Start Date": pd.to_datetime(result.start_dates),
        "Outcome": [o.value for o in result.outcomes],
        "Success": [o is Outcome.SUCCESS for o in result.outcomes]
    })

    df.set_index("Start Date", inplace=True)
    return df


def get_failed_cohorts(cohort_stats: pd.DataFrame) -> pd.DataFrame:
    """
    Returns only the cohorts that failed.
    """
    if cohort_stats.empty:
        return cohort_stats
    return cohort_stats[cohort_stats["Outcome"] == Outcome.FAILED.value]


def success_rate_by_year(cohort_stats: pd.DataFrame) -> pd.DataFrame:
    """
    Groups starting dates by calendar year.
    Returns a DataFrame indexed by Start Year with success/failed/n/a counts
    and the success rate among decided cohorts (NaN if none were decided).
    """
    if cohort_stats.empty:
        return pd.DataFrame()

    # Start dates may repeat, so no index alignment
    counts = pd.crosstab(
        cohort_stats.index.year.to_numpy(),
        cohort_stats["Outcome"].to_numpy(),
        rownames=["Start Year"],
        colnames=["Outcome"]
    )
    for outcome in Outcome:
        if outcome.value not in counts.columns:
            counts[outcome.value] = 0
    counts = counts[[o.value for o in Outcome]].copy()

    decided = counts[Outcome.SUCCESS.value] + counts[Outcome.FAILED.value]
    counts["Success Rate"] = np.where(
        decided > 0, counts[Outcome.SUCCESS.value] / decided.where(decided > 0, 1), np.nan
    )
    return counts
