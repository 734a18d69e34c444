import unittest
from logic import report, simulation_bridge


class TestPdfReport(unittest.TestCase):

    def test_should_generate_pdf_bytes(self):
        # Precondition
        inputs = simulation_bridge.CalculatorInputs()
        fixed, dynamic, stats = simulation_bridge.run_comparison_wrapper(inputs)

        # Under test
        pdf_bytes = report.generate_pdf_report(inputs, fixed, dynamic, stats)

        # Postcondition
        self.assertIsInstance(pdf_bytes, bytes)
        self.assertTrue(pdf_bytes.startswith(b"%PDF"))

    def test_should_generate_pdf_given_depleted_run_and_bad_allocation(self):
        inputs = simulation_bridge.CalculatorInputs(annual_withdrawal=400_000, cash_allocation=80)
        fixed, dynamic, stats = simulation_bridge.run_comparison_wrapper(inputs)

        pdf_bytes = report.generate_pdf_report(inputs, fixed, dynamic, stats)

        self.assertTrue(pdf_bytes.startswith(b"%PDF"))

    def test_should_describe_mix_and_difference(self):
        inputs = simulation_bridge.CalculatorInputs(years=1)
        _, _, stats = simulation_bridge.run_comparison_wrapper(inputs)

        findings = report.build_key_findings(inputs, stats)

        self.assertEqual(len(findings), 4)
        self.assertIn("$8,000", findings[0])
        self.assertIn("after 1 years", findings[0])
        self.assertIn("20%", findings[2])
        self.assertIn("balanced portfolio", findings[3])

    def test_should_format_money(self):
        self.assertEqual(report.pdf_money(1234.4), "$1,234")
        self.assertEqual(report.pdf_money(-500), "-$500")
        self.assertEqual(report.pdf_money("n/a"), "$0")


if __name__ == '__main__':
    unittest.main()
