import pandas as pd
from typing import Sequence, Tuple

# Annual S&P 500 total returns (percent), one real 30-year history.
# Replayed cyclically: simulation year y uses entry y % 30.
HISTORICAL_RETURNS: Tuple[float, ...] = (
    32.31, -4.38, 21.04, 28.88, 10.88, 4.91, 15.79, 5.49, -37.0, 26.46,
    15.06, 2.11, 16.0, 32.39, 13.69, 1.38, 11.96, 21.83, -4.38, 28.88,
    18.40, -6.24, 31.21, 18.76, 32.50, -4.23, 21.61, 22.34, 28.36, 10.50,
)


def return_at(year: int, returns: Sequence[float] = HISTORICAL_RETURNS) -> float:
    """
    Risky-asset return for a simulation year, as a fraction of 1.

    Indexes the percentage dataset cyclically, so horizons longer than the
    dataset repeat history from the start.
    """
    return returns[year % len(returns)] / 100


class ReturnSequence:
    """
    An ordered list of annual percentage returns with cyclic lookup.

    Lets callers substitute a different history while keeping the same
    contract as the built-in dataset.
    """

    def __init__(self, returns: Sequence[float] = HISTORICAL_RETURNS):
        if len(returns) == 0:
            raise ValueError("Return sequence must contain at least one annual return")
        self.returns: Tuple[float, ...] = tuple(float(r) for r in returns)

    def __len__(self) -> int:
        return len(self.returns)

    def return_at(self, year: int) -> float:
        return return_at(year, self.returns)

    def to_series(self) -> pd.Series:
        """Returns the dataset as fractions indexed by position in the history."""
        return pd.Series([r / 100 for r in self.returns], name="Market_Return")


def get_annual_returns() -> pd.Series:
    """
    Returns the built-in historical dataset as a Series of fractions.
    Index is the position in the history (0..29).
    """
    return ReturnSequence(HISTORICAL_RETURNS).to_series()
