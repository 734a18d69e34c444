import streamlit as st
from logic import analytics
from logic.simulation_bridge import FORM_BOUNDS
from logic.retirement import get_strategy_description


def render_inputs():
    """Render the three input panels. Values are stored in st.session_state."""
    c1, c2, c3 = st.columns(3)

    with c1:
        st.subheader("Portfolio Settings")
        st.number_input("Initial Balance ($)", min_value=FORM_BOUNDS["initial_balance"][0],
                        step=10000.0, key="initial_balance")
        st.number_input("Annual Withdrawal ($)", min_value=FORM_BOUNDS["annual_withdrawal"][0],
                        step=1000.0, key="annual_withdrawal")
        st.number_input("Time Period (Years)", min_value=FORM_BOUNDS["years"][0], max_value=FORM_BOUNDS["years"][1],
                        step=1, key="years")
        st.number_input("Inflation Rate (%)", step=0.1, key="inflation_rate")

    with c2:
        st.subheader("Asset Allocation")
        st.slider("Cash (%)", *FORM_BOUNDS["cash_allocation"], step=1.0, key="cash_allocation")
        st.caption("~1% return")
        st.slider("Safe Growth (%)", *FORM_BOUNDS["safe_allocation"], step=1.0, key="safe_allocation")
        st.number_input("Safe Growth Expected Return (%)", step=0.1, key="safe_growth_rate")
        st.slider("Risky Growth (%)", *FORM_BOUNDS["risky_allocation"], step=1.0, key="risky_allocation")
        st.caption("S&P 500 historical returns")

        total = analytics.allocation_total_pct(
            st.session_state.cash_allocation,
            st.session_state.safe_allocation,
            st.session_state.risky_allocation
        )
        st.markdown(f"**Total: {total:g}%**")
        if abs(total - 100) > 1e-9:
            st.warning("Should equal 100%")

    with c3:
        st.subheader("Dynamic Strategy Settings")
        st.slider("Adjustment Rate (%)", *FORM_BOUNDS["dynamic_adjustment"], step=1.0,
                  key="dynamic_adjustment",
                  help="How much to reduce withdrawals in bad years or increase in good years")

        adj = st.session_state.dynamic_adjustment
        with st.container(border=True):
            st.markdown("##### Strategy Comparison")
            st.markdown(f"**Fixed Strategy:** {get_strategy_description('fixed')}")
            st.markdown(
                f"**Dynamic Strategy:** Reduces withdrawals by {adj:g}% in negative years "
                f"and increases by {adj:g}% when returns exceed 10%."
            )
