from logic.retirement.models import Allocation


class Portfolio:
    """
    A single balance split across cash, safe and risky buckets.

    The buckets are not tracked separately: each year the whole balance grows
    by the allocation-weighted return and withdrawals come out of the total.
    The balance is never allowed to go negative.
    """

    CASH_RETURN = 0.01  # Fixed nominal return on cash

    def __init__(
        self,
        balance: float,
        allocation: Allocation,
        safe_growth_rate: float,
        cash_return: float = CASH_RETURN
    ):
        self.balance = balance
        self.allocation = allocation
        self.safe_growth_rate = safe_growth_rate
        self.cash_return = cash_return

    @property
    def is_depleted(self) -> bool:
        return self.balance <= 0

    def blended_return(self, market_return: float) -> float:
        """Allocation-weighted return for a year with the given risky-asset return."""
        return (
            (self.allocation.cash * self.cash_return)
            + (self.allocation.safe * self.safe_growth_rate)
            + (self.allocation.risky * market_return)
        )

    def apply_market_return(self, portfolio_return: float) -> None:
        self.balance *= (1 + portfolio_return)

    def withdraw(self, amount: float) -> None:
        """Take the amount out of the balance, flooring at zero."""
        self.balance = max(0, self.balance - amount)
