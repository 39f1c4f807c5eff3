import streamlit as st
from withdrawal import persistence
from ui import analysis

st.set_page_config(page_title="Fixed Withdrawal Backtest", layout="wide")
st.title("Fixed Withdrawal Retirement Backtest")

# --- SESSION STATE INITIALIZATION ---
input_keys = list(persistence.default_backtest_inputs().keys())
if not all(key in st.session_state for key in input_keys):
    loaded_inputs = persistence.load_backtest_inputs()
    for key, value in loaded_inputs.items():
        if key not in st.session_state:
            st.session_state[key] = value

# Track previous values for change detection
if "_prev_backtest_values" not in st.session_state:
    st.session_state._prev_backtest_values = {key: st.session_state.get(key) for key in input_keys}

analysis.render_analysis()

# --- SAVE INPUTS ON CHANGE ---
current_values = {key: st.session_state.get(key) for key in input_keys}
if current_values != st.session_state._prev_backtest_values:
    persistence.save_backtest_inputs(current_values)
    st.session_state._prev_backtest_values = current_values.copy()
