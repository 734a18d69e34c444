"""
Retirement withdrawal projection package.

This package projects a retirement portfolio year by year over a fixed,
cyclically replayed history of market returns, under fixed, dynamic and
percentage-of-portfolio withdrawal strategies.

All public classes are re-exported here.
"""

# Models
from logic.retirement.models import (
    Allocation,
    SimulationParameters,
    YearRecord,
    YearState,
)

# Strategies
from logic.retirement.strategies import (
    WithdrawalStrategy,
    FixedStrategy,
    DynamicStrategy,
    PercentageStrategy,
    STRATEGY_DESCRIPTIONS,
    STRATEGY_LABELS,
    build_strategy,
    get_strategy_description,
    get_all_strategy_names,
)

# Portfolio management
from logic.retirement.portfolio import (
    Portfolio,
)

# Engine
from logic.retirement.engine import (
    ProjectionEngine,
    horizon_length,
    round_currency,
    simulate,
)

__all__ = [
    # Models
    "Allocation",
    "SimulationParameters",
    "YearRecord",
    "YearState",
    # Strategies
    "WithdrawalStrategy",
    "FixedStrategy",
    "DynamicStrategy",
    "PercentageStrategy",
    "STRATEGY_DESCRIPTIONS",
    "STRATEGY_LABELS",
    "build_strategy",
    "get_strategy_description",
    "get_all_strategy_names",
    # Portfolio
    "Portfolio",
    # Engine
    "ProjectionEngine",
    "horizon_length",
    "round_currency",
    "simulate",
]
