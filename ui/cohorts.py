import streamlit as st
import plotly.express as px
from withdrawal import analytics


def render_by_year_view(cohort_stats):
    """Render success rate per calendar start year and the failed cohorts."""
    by_year = analytics.success_rate_by_year(cohort_stats)
    if by_year.empty:
        st.info("No results to display.")
        return

    decided = by_year.dropna(subset=["Success Rate"])
    if decided.empty:
        st.info("No start year has enough data for a verdict.")
    else:
        fig = px.bar(
            decided.reset_index(), x="Start Year", y="Success Rate",
            title="Success Rate by Start Year"
        )
        fig.update_yaxes(tickformat=".0%", range=[0, 1])
        st.plotly_chart(fig, width='stretch')

    with st.expander("Counts by Start Year"):
        st.dataframe(by_year)

    failed = analytics.get_failed_cohorts(cohort_stats)
    st.subheader(f"Failed Start Dates ({len(failed):,})")
    if failed.empty:
        st.success("No starting date failed.")
    else:
        st.dataframe(failed[["Outcome"]])
