import streamlit as st
import plotly.graph_objects as go
from withdrawal import analytics
from withdrawal.backtest import InputError, Outcome
from ui.utils import run_backtest_cached
from ui.cohorts import render_by_year_view

OUTCOME_COLORS = {
    Outcome.SUCCESS.value: "#27AE60",
    Outcome.FAILED.value: "#C0392B",
    Outcome.NOT_APPLICABLE.value: "#95A5A6",
}


def render_analysis():
    st.header("Fixed Withdrawal Backtest")

    # Inputs Layout
    c1, c2 = st.columns(2)
    with c1:
        st.subheader("1. Capital & Spending")
        st.number_input("Initial Capital ($)", min_value=1, step=1000, key="initial_capital")
        st.number_input("Annual Cost of Living ($)", min_value=0, step=500, key="annual_cost_of_living")
        st.number_input("Inflation (annual multiplier)", min_value=0.9, max_value=1.2, step=0.001,
                        format="%.3f", key="inflation_rate",
                        help="1.016 means prices grow 1.6% per year")
    with c2:
        st.subheader("2. Timeline")
        st.number_input("Runs", min_value=1, max_value=20, step=1, key="num_runs",
                        help="How many consecutive periods the capital must fund")
        st.number_input("Years per Run", min_value=1, max_value=40, step=1, key="years_per_run")
        st.selectbox("Price Column", ["High", "Open", "Close", "Low"], key="price_column",
                     help="Daily price the shares are bought and sold at")

    st.divider()

    inputs = {
        "initial_capital": int(st.session_state.initial_capital),
        "num_runs": int(st.session_state.num_runs),
        "years_per_run": int(st.session_state.years_per_run),
        "inflation_rate": float(st.session_state.inflation_rate),
        "annual_cost_of_living": int(st.session_state.annual_cost_of_living),
    }

    try:
        with st.spinner("Backtesting every historical start date..."):
            res, stats = run_backtest_cached(st.session_state.price_column, inputs)
    except InputError as e:
        st.error(f"Cannot run backtest: {e}")
        return

    st.session_state.backtest_result = res

    # Results Summary
    rate = stats.get("success_rate")
    r1, r2, r3, r4 = st.columns(4)
    if rate is None:
        r1.metric("Success Rate", "N/A")
    else:
        r1.metric("Success Rate", f"{rate:.1%}",
                  delta="Safe" if rate > 0.95 else "Risky" if rate < 0.8 else "Caution")
    r2.metric("Succeeded", f"{stats.get('success_count', 0):,}")
    r3.metric("Failed", f"{stats.get('failed_count', 0):,}")
    r4.metric("Not Enough Data", f"{stats.get('na_count', 0):,}")

    st.divider()

    view_tab1, view_tab2 = st.tabs(["Outcome by Start Date", "By Start Year"])

    cohort_stats = analytics.calculate_cohort_stats(res)
    with view_tab1:
        render_timeline_view(cohort_stats)
    with view_tab2:
        render_by_year_view(cohort_stats)


def render_timeline_view(cohort_stats):
    """Scatter of every start date colored by its outcome."""
    if cohort_stats.empty:
        st.info("No results to display.")
        return

    fig = go.Figure()
    for outcome, color in OUTCOME_COLORS.items():
        subset = cohort_stats[cohort_stats["Outcome"] == outcome]
        if subset.empty:
            continue
        fig.add_trace(go.Scatter(
            x=subset.index, y=[outcome] * len(subset), mode="markers",
            marker=dict(color=color, size=4), name=outcome
        ))
    fig.update_layout(xaxis_title="Start Date", yaxis_title="Outcome", showlegend=False)
    st.plotly_chart(fig, width='stretch')
