"""PDF export of a fixed-vs-dynamic withdrawal comparison.

No Streamlit imports. The UI passes in the current inputs and both
trajectories and serves the returned bytes as a download.
"""

import datetime as dt
from typing import List
from fpdf import FPDF

from logic import analytics
from logic.retirement import Allocation, YearRecord
from logic.simulation_bridge import CalculatorInputs

DISCLAIMER = "This report is for informational purposes only and does not constitute financial advice."


def _pdf_safe(text):
    """Replace Unicode characters that Helvetica can't render with ASCII equivalents."""
    s = str(text)
    s = s.replace("\u2013", "-").replace("\u2014", "-")
    s = s.replace("\u2018", "'").replace("\u2019", "'")
    s = s.replace("\u201c", '"').replace("\u201d", '"')
    s = s.replace("\u2026", "...").replace("\u2022", "*")
    return s


def pdf_money(x):
    """Format number as $1,234 for PDF."""
    try:
        v = float(x)
        if v < 0:
            return f"-${abs(v):,.0f}"
        return f"${v:,.0f}"
    except (TypeError, ValueError):
        return "$0"


def _pdf_section_header(pdf, title):
    pdf.set_font("Helvetica", "B", 13)
    pdf.set_fill_color(0, 48, 60)
    pdf.set_text_color(255, 255, 255)
    pdf.cell(0, 9, _pdf_safe(f"  {title}"), new_x="LMARGIN", new_y="NEXT", fill=True)
    pdf.set_text_color(0, 0, 0)
    pdf.ln(2)


def _pdf_kv_line(pdf, label, value, bold_value=False):
    pdf.set_font("Helvetica", "", 9)
    pdf.cell(60, 5, _pdf_safe(label), new_x="END")
    pdf.set_font("Helvetica", "B" if bold_value else "", 9)
    pdf.cell(0, 5, _pdf_safe(value), new_x="LMARGIN", new_y="NEXT")


def _pdf_table(pdf, headers, rows, col_widths=None, header_fill=(220, 230, 241)):
    """Render a table in the PDF with header and data rows."""
    if col_widths is None:
        total = pdf.w - pdf.l_margin - pdf.r_margin
        col_widths = [total / len(headers)] * len(headers)
    pdf.set_font("Helvetica", "B", 8)
    pdf.set_fill_color(*header_fill)
    for i, h in enumerate(headers):
        align = "R" if i > 0 else "L"
        pdf.cell(col_widths[i], 6, _pdf_safe(h), border=1, align=align, fill=True)
    pdf.ln()
    pdf.set_font("Helvetica", "", 8)
    for row_idx, row in enumerate(rows):
        fill = row_idx % 2 == 1
        if fill:
            pdf.set_fill_color(245, 245, 245)
        for i, val in enumerate(row):
            align = "R" if i > 0 else "L"
            pdf.cell(col_widths[i], 5, _pdf_safe(val), border=1, align=align, fill=fill)
        pdf.ln()


def build_key_findings(inputs: CalculatorInputs, stats: dict) -> List[str]:
    """Narrative paragraphs shared by the on-screen analysis and the PDF."""
    profile = analytics.portfolio_profile(inputs.risky_allocation)
    adj = f"{inputs.dynamic_adjustment:g}%"
    return [
        (
            f"Key Finding: The dynamic withdrawal strategy results in a "
            f"{pdf_money(abs(stats['difference']))} difference compared to the fixed withdrawal "
            f"strategy after {inputs.years} years."
        ),
        (
            "Sequence of Return Risk: The timing of investment returns significantly impacts "
            "portfolio longevity. Poor returns early in retirement hurt a portfolio more than the "
            "same poor returns later, because withdrawals come out of a declining balance and leave "
            "less capital to recover when markets improve."
        ),
        (
            f"Dynamic Strategy Benefits: Reducing withdrawals by {adj} during market downturns "
            f"preserves capital for future growth. Increasing withdrawals by {adj} in strong years "
            f"(returns above 10%) lets you enjoy prosperity while keeping the portfolio sustainable."
        ),
        (
            f"Your Portfolio Mix: {inputs.cash_allocation:g}% cash, {inputs.safe_allocation:g}% safe "
            f"growth (at {inputs.safe_growth_rate:g}% expected return) and {inputs.risky_allocation:g}% "
            f"S&P 500 exposure make a {profile} portfolio."
        ),
    ]


def generate_pdf_report(
    inputs: CalculatorInputs,
    fixed: List[YearRecord],
    dynamic: List[YearRecord],
    stats: dict
) -> bytes:
    """Generate the comparison report. Returns PDF bytes."""
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.set_margins(15, 15, 15)
    pdf.add_page()

    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 10, "Strategic Withdrawal Plan", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 6, "Fixed vs. dynamic withdrawal strategies with sequence of return risk analysis",
             new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    _pdf_section_header(pdf, "Portfolio Settings")
    _pdf_kv_line(pdf, "Initial Balance", pdf_money(inputs.initial_balance))
    _pdf_kv_line(pdf, "Annual Withdrawal", pdf_money(inputs.annual_withdrawal))
    _pdf_kv_line(pdf, "Time Period", f"{inputs.years} years")
    _pdf_kv_line(pdf, "Inflation Rate", f"{inputs.inflation_rate:g}%")
    _pdf_kv_line(pdf, "Dynamic Adjustment", f"{inputs.dynamic_adjustment:g}%")
    pdf.ln(2)

    _pdf_section_header(pdf, "Asset Allocation")
    amounts = analytics.allocation_amounts(
        inputs.initial_balance,
        Allocation(inputs.cash_allocation / 100, inputs.safe_allocation / 100,
                   inputs.risky_allocation / 100)
    )
    _pdf_kv_line(pdf, f"Cash ({inputs.cash_allocation:g}%)", pdf_money(amounts["Cash"]))
    _pdf_kv_line(pdf, f"Safe Growth ({inputs.safe_allocation:g}%)", pdf_money(amounts["Safe"]))
    _pdf_kv_line(pdf, f"Risky Growth ({inputs.risky_allocation:g}%)", pdf_money(amounts["Risky"]))
    if abs(inputs.allocation_total - 100) > 1e-9:
        _pdf_kv_line(pdf, "Warning", f"Allocation totals {inputs.allocation_total:g}%, should equal 100%",
                     bold_value=True)
    pdf.ln(2)

    _pdf_section_header(pdf, "Summary")
    _pdf_kv_line(pdf, "Fixed Strategy End Balance",
                 f"{pdf_money(stats['fixed_end_balance'])} after {stats['fixed_years']} years", bold_value=True)
    _pdf_kv_line(pdf, "Dynamic Strategy End Balance",
                 f"{pdf_money(stats['dynamic_end_balance'])} after {stats['dynamic_years']} years", bold_value=True)
    _pdf_kv_line(pdf, "Difference",
                 f"{pdf_money(stats['difference'])} ({stats['difference_pct']:.1f}% of initial)")
    pdf.ln(2)

    _pdf_section_header(pdf, "Sequence of Return Risk Analysis")
    pdf.set_font("Helvetica", "", 9)
    for paragraph in build_key_findings(inputs, stats):
        pdf.multi_cell(0, 5, _pdf_safe(paragraph), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(1)

    pdf.add_page()
    _pdf_section_header(pdf, "Year-by-Year Balances")
    paired = analytics.pair_trajectories(fixed, dynamic)
    fixed_by_year = {r.year: r for r in fixed}
    dynamic_by_year = {r.year: r for r in dynamic}
    rows = []
    for year in paired["Year"].tolist():
        f = fixed_by_year.get(year)
        d = dynamic_by_year.get(year)
        market = f.market_return if f is not None else d.market_return
        rows.append([
            str(year),
            f"{market:.2%}",
            pdf_money(f.withdrawal) if f is not None else "-",
            pdf_money(f.balance) if f is not None else pdf_money(0),
            pdf_money(d.withdrawal) if d is not None else "-",
            pdf_money(d.balance) if d is not None else pdf_money(0),
        ])
    _pdf_table(pdf, ["Year", "Market Return", "Fixed Withdrawal", "Fixed Balance",
                     "Dynamic Withdrawal", "Dynamic Balance"], rows)

    pdf.ln(6)
    pdf.set_font("Helvetica", "", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.cell(0, 5, f"Strategic Withdrawal Plan Calculator - Generated {dt.date.today().strftime('%m/%d/%Y')}",
             align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, DISCLAIMER, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
