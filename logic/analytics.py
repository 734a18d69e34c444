import pandas as pd
import numpy as np
from typing import List
from logic.retirement import Allocation, YearRecord


def pair_trajectories(fixed: List[YearRecord], dynamic: List[YearRecord]) -> pd.DataFrame:
    """
    Lines up two strategy runs by year for charting.
    Returns a DataFrame with columns:
    - Year
    - Fixed (end-of-year balance)
    - Dynamic (end-of-year balance)

    A run that exhausted its portfolio early shows a balance of 0 for the
    remaining years.
    """
    df_fixed = pd.DataFrame({
        "Year": [r.year for r in fixed],
        "Fixed": [r.balance for r in fixed],
    })
    df_dynamic = pd.DataFrame({
        "Year": [r.year for r in dynamic],
        "Dynamic": [r.balance for r in dynamic],
    })

    df = pd.merge(df_fixed, df_dynamic, on="Year", how="outer")
    df[["Fixed", "Dynamic"]] = df[["Fixed", "Dynamic"]].fillna(0.0)
    df = df.sort_values("Year").reset_index(drop=True)
    df["Year"] = df["Year"].astype(int)
    return df


def summarize_comparison(
    fixed: List[YearRecord],
    dynamic: List[YearRecord],
    initial_balance: float
) -> dict:
    """Summary statistics of the final record of each run."""
    final_fixed = fixed[-1]
    final_dynamic = dynamic[-1]

    difference = final_dynamic.balance - final_fixed.balance
    difference_pct = difference / initial_balance * 100 if initial_balance else 0.0

    if np.isclose(difference, 0.0):
        leader = "tie"
    elif difference > 0:
        leader = "dynamic"
    else:
        leader = "fixed"

    return {
        "fixed_end_balance": final_fixed.balance,
        "fixed_years": final_fixed.year,
        "dynamic_end_balance": final_dynamic.balance,
        "dynamic_years": final_dynamic.year,
        "difference": difference,
        "difference_pct": difference_pct,
        "fixed_total_withdrawn": final_fixed.cumulative_withdrawal,
        "dynamic_total_withdrawn": final_dynamic.cumulative_withdrawal,
        "leader": leader,
    }


def allocation_amounts(initial_balance: float, allocation: Allocation) -> dict:
    """Currency amount in each bucket at the start of the plan."""
    return {
        "Cash": initial_balance * allocation.cash,
        "Safe": initial_balance * allocation.safe,
        "Risky": initial_balance * allocation.risky,
    }


def allocation_total_pct(cash_pct: float, safe_pct: float, risky_pct: float) -> float:
    return cash_pct + safe_pct + risky_pct


def portfolio_profile(risky_pct: float) -> str:
    """
    Classifies the mix by its risky share (in percent).
    """
    if risky_pct > 60:
        return "aggressive"
    elif risky_pct > 40:
        return "balanced"
    return "conservative"
