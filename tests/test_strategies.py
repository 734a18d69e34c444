import unittest
from logic.retirement import (
    Allocation,
    DynamicStrategy,
    FixedStrategy,
    PercentageStrategy,
    SimulationParameters,
    STRATEGY_DESCRIPTIONS,
    build_strategy,
    get_all_strategy_names,
    get_strategy_description,
)


def make_params(**overrides) -> SimulationParameters:
    values = dict(
        initial_balance=1_000_000,
        annual_withdrawal=40_000,
        horizon_years=30,
        allocation=Allocation(cash=0.10, safe=0.40, risky=0.50),
        safe_growth_rate=0.04,
        inflation_rate=0.025,
        dynamic_adjustment_rate=0.20,
    )
    values.update(overrides)
    return SimulationParameters(**values)


class TestFixedStrategy(unittest.TestCase):

    def test_should_withdraw_base_amount_given_any_return(self):
        strategy = FixedStrategy(inflation_rate=0.025)
        for portfolio_return in (-0.5, 0.0, 0.05, 0.5):
            self.assertEqual(strategy.calculate_withdrawal(1_000_000, portfolio_return, 40_000), 40_000)

    def test_should_escalate_base_for_next_year(self):
        strategy = FixedStrategy(inflation_rate=0.025)
        self.assertAlmostEqual(strategy.next_base_withdrawal(40_000, 40_000), 41_000)


class TestDynamicStrategy(unittest.TestCase):

    def test_should_reduce_withdrawal_given_negative_return(self):
        strategy = DynamicStrategy(adjustment_rate=0.20)
        self.assertAlmostEqual(strategy.calculate_withdrawal(1_000_000, -0.0049, 40_000), 32_000)

    def test_should_increase_withdrawal_given_return_above_ten_percent(self):
        strategy = DynamicStrategy(adjustment_rate=0.20)
        self.assertAlmostEqual(strategy.calculate_withdrawal(1_000_000, 0.1001, 40_000), 48_000)

    def test_should_keep_withdrawal_given_returns_on_thresholds(self):
        strategy = DynamicStrategy(adjustment_rate=0.20)
        self.assertEqual(strategy.calculate_withdrawal(1_000_000, 0.0, 40_000), 40_000)
        self.assertEqual(strategy.calculate_withdrawal(1_000_000, 0.10, 40_000), 40_000)
        self.assertEqual(strategy.calculate_withdrawal(1_000_000, 0.05, 40_000), 40_000)

    def test_should_not_carry_adjustment_given_default(self):
        strategy = DynamicStrategy(adjustment_rate=0.20)
        self.assertEqual(strategy.next_base_withdrawal(40_000, 32_000), 40_000)

    def test_should_carry_adjustment_given_compounding(self):
        strategy = DynamicStrategy(adjustment_rate=0.20, compound_adjustments=True)
        self.assertEqual(strategy.next_base_withdrawal(40_000, 32_000), 32_000)


class TestPercentageStrategy(unittest.TestCase):

    def test_should_withdraw_four_percent_of_balance(self):
        strategy = PercentageStrategy()
        self.assertAlmostEqual(strategy.calculate_withdrawal(995_100, -0.0049, 40_000), 39_804)

    def test_should_ignore_base_withdrawal(self):
        strategy = PercentageStrategy()
        a = strategy.calculate_withdrawal(500_000, 0.05, 40_000)
        b = strategy.calculate_withdrawal(500_000, 0.05, 1)
        self.assertEqual(a, b)
        self.assertEqual(strategy.next_base_withdrawal(40_000, a), 40_000)


class TestStrategyRegistry(unittest.TestCase):

    def test_should_build_configured_strategies_given_names(self):
        # Preconditions
        params = make_params()

        # Under test
        fixed = build_strategy("fixed", params)
        dynamic = build_strategy("dynamic", params)
        percentage = build_strategy("percentage", params)

        # Postconditions
        self.assertIsInstance(fixed, FixedStrategy)
        self.assertAlmostEqual(fixed.inflation_rate, 0.025)
        self.assertIsInstance(dynamic, DynamicStrategy)
        self.assertAlmostEqual(dynamic.adjustment_rate, 0.20)
        self.assertIsInstance(percentage, PercentageStrategy)

    def test_should_raise_given_unknown_strategy(self):
        with self.assertRaises(ValueError):
            build_strategy("guardrails", make_params())

    def test_should_list_all_strategies_with_descriptions(self):
        names = get_all_strategy_names()
        self.assertEqual(names, ["fixed", "dynamic", "percentage"])
        for name in names:
            self.assertEqual(get_strategy_description(name), STRATEGY_DESCRIPTIONS[name])
        self.assertEqual(get_strategy_description("unknown"), "No description available.")


if __name__ == '__main__':
    unittest.main()
