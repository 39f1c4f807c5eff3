import streamlit as st
from withdrawal import market_data
from withdrawal.backtest import BacktestEngine, StrategyConfig

@st.cache_data
def load_market_data():
    return market_data.get_market_data()

@st.cache_resource
def get_engine(price_column: str) -> BacktestEngine:
    return BacktestEngine(load_market_data(), price_column=price_column)

@st.cache_data
def run_backtest_cached(price_column: str, inputs: dict):
    config = StrategyConfig.from_dict(inputs)
    engine = get_engine(price_column)
    result = engine.run(config)
    return result, engine.calculate_stats(result)
