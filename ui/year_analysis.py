import streamlit as st
import plotly.graph_objects as go
import pandas as pd
from logic.retirement import ProjectionEngine, STRATEGY_LABELS

MONEY = st.column_config.NumberColumn(format="$%.0f")
PERCENT = st.column_config.NumberColumn(format="%.2f%%")

COLUMN_CONFIG = {
    "Balance": MONEY,
    "Withdrawal": MONEY,
    "Cumulative Withdrawal": MONEY,
    "Market Return": PERCENT,
    "Portfolio Return": PERCENT,
}


def build_year_table(records) -> pd.DataFrame:
    """Display-ready table of one trajectory. Returns are shown in percent."""
    df = ProjectionEngine.to_frame(records)
    df["market_return"] = df["market_return"] * 100
    df["portfolio_return"] = df["portfolio_return"] * 100
    return df.rename(columns={
        "year": "Year",
        "balance": "Balance",
        "withdrawal": "Withdrawal",
        "market_return": "Market Return",
        "portfolio_return": "Portfolio Return",
        "cumulative_withdrawal": "Cumulative Withdrawal",
    })


def render_year_by_year(fixed, dynamic):
    """Render per-year withdrawals and returns for both strategies."""
    st.subheader("Withdrawals by Year")

    fig = go.Figure()
    for name, records, color in [("fixed", fixed, "#896B25"), ("dynamic", dynamic, "#00768F")]:
        flows = records[1:]
        fig.add_trace(go.Bar(
            x=[r.year for r in flows],
            y=[r.withdrawal for r in flows],
            name=STRATEGY_LABELS[name],
            marker_color=color
        ))
    fig.update_layout(barmode="group", xaxis_title="Year", yaxis_title="Withdrawal ($)")
    st.plotly_chart(fig, use_container_width=True)

    c1, c2 = st.columns(2)
    with c1:
        st.markdown(f"**{STRATEGY_LABELS['fixed']}**")
        st.dataframe(build_year_table(fixed), column_config=COLUMN_CONFIG, hide_index=True)
    with c2:
        st.markdown(f"**{STRATEGY_LABELS['dynamic']}**")
        st.dataframe(build_year_table(dynamic), column_config=COLUMN_CONFIG, hide_index=True)
