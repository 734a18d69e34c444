from abc import ABC, abstractmethod
from typing import Dict

from logic.retirement.models import SimulationParameters


# Strategy descriptions for UI display
STRATEGY_DESCRIPTIONS: Dict[str, str] = {
    "fixed": (
        "Withdraws a fixed amount adjusted for inflation each year, regardless of market "
        "performance. The first year's withdrawal is exactly the base amount; escalation "
        "starts the year after."
    ),
    "dynamic": (
        "Reduces the withdrawal by the adjustment rate in years when the portfolio loses money, "
        "and increases it by the same rate when the portfolio return exceeds 10%. "
        "Other years withdraw the base amount. No inflation escalation is applied."
    ),
    "percentage": (
        "Withdraws 4% of the portfolio value each year, measured after that year's growth. "
        "Spending moves with the market and the portfolio is never withdrawn to zero by "
        "this rule alone."
    ),
}

STRATEGY_LABELS: Dict[str, str] = {
    "fixed": "Fixed Withdrawal",
    "dynamic": "Dynamic Withdrawal",
    "percentage": "Percentage of Portfolio",
}


def get_strategy_description(strategy_name: str) -> str:
    """Get the description for a withdrawal strategy by name."""
    return STRATEGY_DESCRIPTIONS.get(strategy_name, "No description available.")


def get_all_strategy_names() -> list:
    """Get list of all available strategy names."""
    return list(STRATEGY_DESCRIPTIONS.keys())


class WithdrawalStrategy(ABC):
    """
    Abstract base class for all withdrawal strategies.

    A strategy decides how much to take out each year. The only state carried
    between years is the base withdrawal, which the engine threads through the
    loop and updates via next_base_withdrawal().
    """

    name: str = ""

    @abstractmethod
    def calculate_withdrawal(
        self,
        balance_after_growth: float,
        portfolio_return: float,
        base_withdrawal: float
    ) -> float:
        """
        Calculates the withdrawal amount for the current year.

        Args:
            balance_after_growth: Portfolio value after this year's return was applied
            portfolio_return: Blended return applied this year
            base_withdrawal: Running base withdrawal carried from the previous year

        Returns:
            Withdrawal amount for the current year
        """
        ...

    def next_base_withdrawal(self, base_withdrawal: float, year_withdrawal: float) -> float:
        """Base withdrawal to carry into next year. Default leaves it unchanged."""
        return base_withdrawal


class FixedStrategy(WithdrawalStrategy):
    """
    Withdraws the base amount, escalating it by inflation after each withdrawal.
    """

    name = "fixed"

    def __init__(self, inflation_rate: float):
        self.inflation_rate = inflation_rate

    def calculate_withdrawal(
        self,
        balance_after_growth: float,
        portfolio_return: float,
        base_withdrawal: float
    ) -> float:
        return base_withdrawal

    def next_base_withdrawal(self, base_withdrawal: float, year_withdrawal: float) -> float:
        return base_withdrawal * (1 + self.inflation_rate)


class DynamicStrategy(WithdrawalStrategy):
    """
    Cuts the withdrawal in losing years and raises it in strong years.

    Both thresholds are strict: a return of exactly 0% or exactly 10% takes the
    base amount. By default the adjustment applies only to the year it was made
    in; with compound_adjustments the adjusted amount becomes the new base.
    """

    name = "dynamic"

    UPSIDE_THRESHOLD = 0.10
    DOWNSIDE_THRESHOLD = 0.0

    def __init__(self, adjustment_rate: float, compound_adjustments: bool = False):
        self.adjustment_rate = adjustment_rate
        self.compound_adjustments = compound_adjustments

    def calculate_withdrawal(
        self,
        balance_after_growth: float,
        portfolio_return: float,
        base_withdrawal: float
    ) -> float:
        if portfolio_return < self.DOWNSIDE_THRESHOLD:
            return base_withdrawal * (1 - self.adjustment_rate)
        elif portfolio_return > self.UPSIDE_THRESHOLD:
            return base_withdrawal * (1 + self.adjustment_rate)
        return base_withdrawal

    def next_base_withdrawal(self, base_withdrawal: float, year_withdrawal: float) -> float:
        if self.compound_adjustments:
            return year_withdrawal
        return base_withdrawal


class PercentageStrategy(WithdrawalStrategy):
    """
    Withdraws a constant 4% of the portfolio after growth.
    Ignores the base withdrawal and inflation entirely.
    """

    name = "percentage"

    WITHDRAWAL_RATE = 0.04

    def calculate_withdrawal(
        self,
        balance_after_growth: float,
        portfolio_return: float,
        base_withdrawal: float
    ) -> float:
        return balance_after_growth * self.WITHDRAWAL_RATE


def build_strategy(strategy_name: str, params: SimulationParameters) -> WithdrawalStrategy:
    """Creates the strategy object for a name, configured from the run parameters."""
    if strategy_name == "fixed":
        return FixedStrategy(inflation_rate=params.inflation_rate)
    elif strategy_name == "dynamic":
        return DynamicStrategy(adjustment_rate=params.dynamic_adjustment_rate)
    elif strategy_name == "percentage":
        return PercentageStrategy()
    raise ValueError(
        f"Unknown withdrawal strategy '{strategy_name}'. "
        f"Expected one of: {', '.join(get_all_strategy_names())}"
    )
