import logging
import datetime as dt
import streamlit as st
import plotly.graph_objects as go
from logic import analytics, report
from logic.retirement import Allocation
from ui.utils import format_currency

logger = logging.getLogger(__name__)

FIXED_COLOR = "#896B25"
DYNAMIC_COLOR = "#00768F"


def render_summary(inputs, stats):
    """Render the four summary cards."""
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Fixed Strategy End Balance", format_currency(stats["fixed_end_balance"]))
    m1.caption(f"After {stats['fixed_years']} years")
    m2.metric("Dynamic Strategy End Balance", format_currency(stats["dynamic_end_balance"]))
    m2.caption(f"After {stats['dynamic_years']} years")
    m3.metric("Difference", format_currency(stats["difference"]),
              delta=f"{stats['difference_pct']:.1f}% of initial")

    amounts = analytics.allocation_amounts(
        inputs.initial_balance,
        Allocation(inputs.cash_allocation / 100, inputs.safe_allocation / 100, inputs.risky_allocation / 100)
    )
    with m4:
        st.markdown("**Portfolio Allocation**")
        for bucket, amount in amounts.items():
            st.write(f"{bucket}: {format_currency(amount)}")


def render_balance_chart(fixed, dynamic):
    st.subheader("Portfolio Balance Over Time")
    df = analytics.pair_trajectories(fixed, dynamic)

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["Year"], y=df["Fixed"], mode="lines", fill="tozeroy",
                             name="Fixed Withdrawal", line=dict(color=FIXED_COLOR, width=2),
                             fillcolor="rgba(188,149,92,0.19)"))
    fig.add_trace(go.Scatter(x=df["Year"], y=df["Dynamic"], mode="lines", fill="tozeroy",
                             name="Dynamic Withdrawal", line=dict(color=DYNAMIC_COLOR, width=2),
                             fillcolor="rgba(0,118,143,0.13)"))
    fig.update_layout(xaxis_title="Year", yaxis_title="Balance ($)", hovermode="x unified")
    fig.update_yaxes(tickprefix="$", tickformat=",.0f")
    st.plotly_chart(fig, use_container_width=True)


def render_analysis_text(inputs, stats):
    st.subheader("Sequence of Return Risk Analysis")
    for paragraph in report.build_key_findings(inputs, stats):
        title, _, body = paragraph.partition(": ")
        st.markdown(f"**{title}:** {body}")


def render_pdf_download(inputs, fixed, dynamic, stats):
    try:
        pdf_bytes = report.generate_pdf_report(inputs, fixed, dynamic, stats)
    except Exception as e:
        logger.error("Report generation failed: %s", e)
        st.info("Unable to create the PDF report. Please use your browser's print function (Ctrl+P or Cmd+P).")
        return

    st.download_button(
        label="Download PDF Report",
        data=pdf_bytes,
        file_name=f"Withdrawal_Plan_{dt.datetime.now().strftime('%Y%m%d_%H%M')}.pdf",
        mime="application/pdf",
        type="primary",
    )
