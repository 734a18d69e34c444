import logging
import streamlit as st
from logic import persistence, simulation_bridge
from ui import calculator, compare, year_analysis
from ui.utils import run_comparison

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Strategic Withdrawal Plan Calculator", layout="wide")
st.title("Strategic Withdrawal Plan Calculator")
st.caption("Compare fixed vs. dynamic withdrawal strategies with sequence of return risk analysis")

input_keys = list(persistence.DEFAULT_INPUTS.keys())

# --- SESSION STATE INITIALIZATION ---
# Initialize calculator inputs from disk if not already in session
if not all(key in st.session_state for key in input_keys):
    loaded_inputs = simulation_bridge.CalculatorInputs.from_dict(persistence.load_calculator_inputs()).clamped()
    for key, value in loaded_inputs.to_dict().items():
        if key not in st.session_state:
            st.session_state[key] = value

# Track previous input values for change detection
if "_prev_inputs" not in st.session_state:
    st.session_state._prev_inputs = {key: st.session_state.get(key) for key in input_keys}

calculator.render_inputs()
st.divider()

current_inputs = {key: st.session_state.get(key) for key in input_keys}
inputs = simulation_bridge.CalculatorInputs.from_dict(current_inputs)
fixed_records, dynamic_records, stats = run_comparison(inputs.to_dict())

compare.render_summary(inputs, stats)

# --- MAIN TABS ---
tab_chart, tab_years = st.tabs(["Balance Comparison", "Year by Year"])

with tab_chart:
    compare.render_balance_chart(fixed_records, dynamic_records)
    compare.render_analysis_text(inputs, stats)

with tab_years:
    year_analysis.render_year_by_year(fixed_records, dynamic_records)

st.divider()
compare.render_pdf_download(inputs, fixed_records, dynamic_records, stats)
st.caption("This report is for informational purposes only and does not constitute financial advice.")

# --- SAVE CALCULATOR INPUTS ON CHANGE ---
if current_inputs != st.session_state._prev_inputs:
    try:
        persistence.save_calculator_inputs(current_inputs)
    except OSError:
        logger.warning("Calculator inputs were not saved")
    st.session_state._prev_inputs = current_inputs.copy()
