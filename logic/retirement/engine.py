import logging
import math
import numpy as np
import pandas as pd
from typing import Dict, Iterable, List, Sequence, Union

from logic.market_data import HISTORICAL_RETURNS, ReturnSequence
from logic.retirement.models import SimulationParameters, YearRecord, YearState
from logic.retirement.portfolio import Portfolio
from logic.retirement.strategies import WithdrawalStrategy, build_strategy

logger = logging.getLogger(__name__)

StrategyArg = Union[str, WithdrawalStrategy, None]


def round_currency(value: float) -> float:
    """Round half-up to whole currency units. NaN and infinities pass through."""
    return float(np.floor(value + 0.5))


def horizon_length(horizon_years: float) -> int:
    """Number of simulated years. NaN and infinite horizons simulate none."""
    if not math.isfinite(horizon_years):
        return 0
    return max(int(horizon_years), 0)


class ProjectionEngine:
    """
    Runs year-by-year projections of a retirement portfolio.

    Every run replays the same cyclic return history, so strategies run on
    one engine see identical market conditions and can be compared directly.
    The engine holds no state between runs.
    """

    def __init__(
        self,
        returns: Sequence[float] = HISTORICAL_RETURNS,
        cash_return: float = Portfolio.CASH_RETURN
    ):
        """
        Args:
            returns: Annual percentage returns for the risky bucket
            cash_return: Fixed annual return for the cash bucket
        """
        self.returns = ReturnSequence(returns)
        self.cash_return = cash_return

    def _resolve_strategy(self, params: SimulationParameters, strategy: StrategyArg) -> WithdrawalStrategy:
        if isinstance(strategy, WithdrawalStrategy):
            return strategy
        return build_strategy(strategy if strategy is not None else params.strategy, params)

    def run_simulation(
        self,
        params: SimulationParameters,
        strategy: StrategyArg = None
    ) -> List[YearRecord]:
        """
        Project the portfolio over the horizon.

        Year 0 is the starting snapshot. Each following year applies the
        blended return, takes the strategy's withdrawal and floors the balance
        at zero. The run stops after the first year that ends with an empty
        portfolio.
        """
        withdrawal_strategy = self._resolve_strategy(params, strategy)
        portfolio = Portfolio(
            balance=params.initial_balance,
            allocation=params.allocation,
            safe_growth_rate=params.safe_growth_rate,
            cash_return=self.cash_return
        )
        state = YearState(balance=portfolio.balance, base_withdrawal=params.annual_withdrawal)

        records = [YearRecord(
            year=0,
            balance=params.initial_balance,
            withdrawal=0.0,
            market_return=0.0,
            portfolio_return=0.0,
            cumulative_withdrawal=0.0
        )]

        for year in range(1, horizon_length(params.horizon_years) + 1):
            market_return = self.returns.return_at(year)
            portfolio_return = portfolio.blended_return(market_return)
            portfolio.apply_market_return(portfolio_return)

            year_withdrawal = withdrawal_strategy.calculate_withdrawal(
                balance_after_growth=portfolio.balance,
                portfolio_return=portfolio_return,
                base_withdrawal=state.base_withdrawal
            )
            portfolio.withdraw(year_withdrawal)

            state.base_withdrawal = withdrawal_strategy.next_base_withdrawal(
                state.base_withdrawal, year_withdrawal
            )
            state.balance = portfolio.balance
            state.cumulative_withdrawal += year_withdrawal

            records.append(YearRecord(
                year=year,
                balance=round_currency(state.balance),
                withdrawal=round_currency(year_withdrawal),
                market_return=market_return,
                portfolio_return=portfolio_return,
                cumulative_withdrawal=state.cumulative_withdrawal
            ))

            if portfolio.is_depleted:
                logger.debug("%s strategy exhausted the portfolio in year %d",
                             withdrawal_strategy.name, year)
                break

        return records

    def run_comparison(
        self,
        params: SimulationParameters,
        strategies: Iterable[str] = ("fixed", "dynamic")
    ) -> Dict[str, List[YearRecord]]:
        """Run the same parameters under several strategies. Runs are independent."""
        return {name: self.run_simulation(params, name) for name in strategies}

    @staticmethod
    def to_frame(records: List[YearRecord]) -> pd.DataFrame:
        """Convert a trajectory to a DataFrame with one row per year."""
        columns = ["year", "balance", "withdrawal", "market_return",
                   "portfolio_return", "cumulative_withdrawal"]
        return pd.DataFrame([r.to_dict() for r in records], columns=columns)

    def calculate_stats(self, records: List[YearRecord], params: SimulationParameters) -> dict:
        """Calculate summary statistics for a single trajectory."""
        if not records:
            return {}

        final = records[-1]
        flows = records[1:]
        withdrawals = [r.withdrawal for r in flows]
        returns = [r.portfolio_return for r in flows]

        return {
            "end_balance": final.balance,
            "years_simulated": final.year,
            "depleted": len(flows) > 0 and final.balance <= 0,
            "total_withdrawn": final.cumulative_withdrawal,
            "min_annual_withdrawal": min(withdrawals) if withdrawals else 0.0,
            "max_annual_withdrawal": max(withdrawals) if withdrawals else 0.0,
            "mean_portfolio_return": float(np.mean(returns)) if returns else 0.0,
            "end_balance_pct_of_initial": (
                final.balance / params.initial_balance * 100 if params.initial_balance else 0.0
            ),
        }


def simulate(params: SimulationParameters, strategy: StrategyArg = None) -> List[YearRecord]:
    """
    Project a portfolio over the built-in historical return sequence.

    Args:
        params: Run parameters
        strategy: Strategy name, strategy object, or None to use params.strategy

    Returns:
        Ordered list of YearRecord, starting with the year-0 snapshot
    """
    return ProjectionEngine().run_simulation(params, strategy)
