import streamlit as st
from logic import simulation_bridge


def format_currency(value: float) -> str:
    """Whole-dollar USD formatting, e.g. -$1,234."""
    if value < 0:
        return f"-${abs(value):,.0f}"
    return f"${value:,.0f}"


@st.cache_data
def run_comparison(inputs_dict: dict):
    inputs = simulation_bridge.CalculatorInputs.from_dict(inputs_dict)
    return simulation_bridge.run_comparison_wrapper(inputs)
