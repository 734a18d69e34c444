import logging
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Tuple
from logic import analytics
from logic.retirement import Allocation, ProjectionEngine, SimulationParameters, YearRecord

logger = logging.getLogger(__name__)

# (min, max) of each form widget; None leaves that side open
FORM_BOUNDS: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    "initial_balance": (0.0, None),
    "annual_withdrawal": (0.0, None),
    "years": (1, 30),
    "cash_allocation": (0.0, 100.0),
    "safe_allocation": (0.0, 100.0),
    "risky_allocation": (0.0, 100.0),
    "dynamic_adjustment": (0.0, 50.0),
}


@dataclass
class CalculatorInputs:
    """Form inputs, in the units the user types them (percentages as 0-100)."""
    initial_balance: float = 1000000.0
    annual_withdrawal: float = 40000.0
    years: int = 30
    inflation_rate: float = 2.5
    cash_allocation: float = 10.0
    safe_allocation: float = 40.0
    risky_allocation: float = 50.0
    safe_growth_rate: float = 4.0
    dynamic_adjustment: float = 20.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalculatorInputs":
        """
        Builds inputs from a dict, ignoring unknown keys and parsing free-form values.
        Missing, unparsable and non-finite values take the field default.
        """
        defaults = asdict(cls())
        values = {}
        for key, default in defaults.items():
            raw = data.get(key, default)
            values[key] = parse_number(raw, fallback=float(default))
        values["years"] = int(values["years"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def clamped(self) -> "CalculatorInputs":
        """Copy with every bounded field pulled into its form widget's range."""
        values = self.to_dict()
        for key, (low, high) in FORM_BOUNDS.items():
            value = values[key]
            if low is not None and value < low:
                value = low
            if high is not None and value > high:
                value = high
            values[key] = value
        values["years"] = int(values["years"])
        return CalculatorInputs(**values)

    @property
    def allocation_total(self) -> float:
        return analytics.allocation_total_pct(self.cash_allocation, self.safe_allocation, self.risky_allocation)


def parse_number(value: Any, fallback: float = 0.0) -> float:
    """
    Parses a free-form numeric entry. Currency symbols, thousands separators
    and percent signs are ignored; anything unparsable or non-finite becomes
    the fallback.
    """
    if not isinstance(value, (bool, int, float)):
        value = str(value).replace("$", "").replace(",", "").replace("%", "").strip()
        if not value:
            return fallback
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return fallback
    if not math.isfinite(number):
        return fallback
    return number


def build_parameters(inputs: CalculatorInputs, strategy: str = "fixed") -> SimulationParameters:
    """
    Converts form inputs to run parameters. Percentages become fractions of 1.
    Allocation totals are passed through as entered.
    """
    return SimulationParameters(
        initial_balance=inputs.initial_balance,
        annual_withdrawal=inputs.annual_withdrawal,
        horizon_years=int(inputs.years),
        allocation=Allocation(
            cash=inputs.cash_allocation / 100,
            safe=inputs.safe_allocation / 100,
            risky=inputs.risky_allocation / 100,
        ),
        safe_growth_rate=inputs.safe_growth_rate / 100,
        inflation_rate=inputs.inflation_rate / 100,
        dynamic_adjustment_rate=inputs.dynamic_adjustment / 100,
        strategy=strategy,
    )


def run_comparison_wrapper(
    inputs: CalculatorInputs,
    engine: ProjectionEngine = None
) -> Tuple[List[YearRecord], List[YearRecord], dict]:
    """
    Runs the fixed and dynamic strategies on the same inputs.

    Returns:
        Tuple of (fixed_records, dynamic_records, comparison_stats)
    """
    if engine is None:
        engine = ProjectionEngine()

    if abs(inputs.allocation_total - 100) > 1e-9:
        logger.info("Allocation totals %.1f%%, simulating as entered", inputs.allocation_total)

    fixed_records = engine.run_simulation(build_parameters(inputs, "fixed"))
    dynamic_records = engine.run_simulation(build_parameters(inputs, "dynamic"))

    stats = analytics.summarize_comparison(fixed_records, dynamic_records, inputs.initial_balance)
    return fixed_records, dynamic_records, stats
