import logging
import os

import pandas as pd
import yfinance as yf

from withdrawal.backtest import InputError, PriceSeries

logger = logging.getLogger(__name__)

DATA_PATH = "data/GSPC.csv"
TICKER = "^GSPC"


def load_price_csv(path: str) -> pd.DataFrame:
    """
    Reads a Yahoo Finance style CSV (Date, Open, High, Low, Close, ...).
    Returns a DataFrame with 'Date' index.
    """
    try:
        return pd.read_csv(path, index_col="Date", parse_dates=True)
    except ValueError as e:
        # Covers malformed CSV and a missing 'Date' column
        raise InputError(f"Could not read price data from {path}: {e}") from e


def get_market_data(path: str = DATA_PATH) -> pd.DataFrame:
    """
    Fetches historical S&P 500 data from yfinance or loads from cache.
    Returns a DataFrame with 'Date' index and 'Open'/'High'/'Close' columns (and others).
    """
    if os.path.exists(path):
        return load_price_csv(path)

    # ^GSPC is the ticker for S&P 500
    logger.info("No cached market data at %s, downloading %s history", path, TICKER)
    df = yf.Ticker(TICKER).history(period="max")

    # Calendar days only, in the exchange's own time zone
    if getattr(df.index, "tz", None) is not None:
        df.index = df.index.tz_localize(None)
    df.index = df.index.normalize()
    df.index.name = "Date"

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(path)

    return df


def load_price_series(path: str, price_column: str = "High") -> PriceSeries:
    """Loads a CSV from disk straight into a PriceSeries."""
    return PriceSeries.from_frame(load_price_csv(path), price_column=price_column)
