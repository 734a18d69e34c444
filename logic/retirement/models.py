from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class Allocation:
    """Asset mix as fractions of 1. Not required to sum to 1."""
    cash: float
    safe: float
    risky: float

    @property
    def total(self) -> float:
        return self.cash + self.safe + self.risky

    def is_balanced(self) -> bool:
        """True when the three buckets add up to 100% of the portfolio."""
        return abs(self.total - 1.0) < 1e-9


@dataclass(frozen=True)
class SimulationParameters:
    """Bundles all inputs of a single projection run. Rates are fractions (0.04 = 4%)."""
    initial_balance: float
    annual_withdrawal: float  # Base withdrawal for year 1
    horizon_years: int
    allocation: Allocation
    safe_growth_rate: float  # Nominal return of the safe bucket
    inflation_rate: float  # Escalation of the fixed withdrawal
    dynamic_adjustment_rate: float  # Step used by the dynamic strategy (0.2 = 20%)
    strategy: str = "fixed"


@dataclass(frozen=True)
class YearRecord:
    """Portfolio state at the end of one simulated year."""
    year: int
    balance: float  # End of year, after growth and withdrawal (rounded)
    withdrawal: float  # Amount taken this year (rounded)
    market_return: float  # Risky-asset return applied this year
    portfolio_return: float  # Blended return applied to the balance
    cumulative_withdrawal: float  # Running total of unrounded withdrawals

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class YearState:
    """Tracks mutable state while a single projection is running."""
    balance: float
    base_withdrawal: float
    cumulative_withdrawal: float = 0.0
