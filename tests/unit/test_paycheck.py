"""Unit tests for single-year paycheck assembly.

Reference scenario: $100,000 salary, MFJ, 6% deferral, 50% match up to 6%,
packaged 2025 rules.
"""

import pytest

from takehome.sdk import FilingStatus, YearInputs, compute_year, load_tax_rules, paycheck_snapshot


@pytest.fixture
def rules():
    return load_tax_rules("2025")


@pytest.fixture
def reference_inputs():
    return YearInputs(
        salary=100000,
        filing_status=FilingStatus.MFJ,
        employee_deferral_rate=0.06,
        employer_match_rate_per_dollar=0.5,
        employer_match_ceiling_rate=0.06,
    )


class TestComputeYear:

    def test_reference_breakdown(self, reference_inputs, rules):
        result = compute_year(reference_inputs, rules)

        assert result.employee_deferral == pytest.approx(6000)
        assert result.employer_match == pytest.approx(3000)
        assert result.payroll_base == pytest.approx(6200)
        assert result.payroll_medicare == pytest.approx(1450)
        assert result.payroll_surtax == 0.0
        assert result.federal_taxable_income == pytest.approx(64000)
        assert result.federal_tax == pytest.approx(7203)
        assert result.regional_taxable_income == pytest.approx(82920)
        assert result.regional_tax == pytest.approx(2130.32)
        assert result.disability_insurance == pytest.approx(1200)
        assert result.take_home == pytest.approx(75816.68)

    def test_take_home_identity(self, rules):
        """take_home equals salary less the deferral and every tax."""
        inputs = YearInputs(salary=320000, filing_status=FilingStatus.SINGLE,
                            employee_deferral_rate=0.15, employer_match_rate_per_dollar=1.0,
                            employer_match_ceiling_rate=0.04)
        result = compute_year(inputs, rules)

        assert result.take_home == pytest.approx(
            result.salary - result.employee_deferral - result.total_taxes
        )
        assert result.payroll_surtax == pytest.approx(120000 * 0.009)

    def test_deferral_clamped_to_limit(self, rules):
        inputs = YearInputs(salary=500000, employee_deferral_rate=0.10,
                            employer_match_rate_per_dollar=0.5, employer_match_ceiling_rate=0.06)
        result = compute_year(inputs, rules)

        assert result.employee_deferral == pytest.approx(23000)
        assert result.employer_match == pytest.approx(15000)

    def test_deferral_does_not_reduce_payroll_base(self, rules):
        with_deferral = compute_year(YearInputs(salary=100000, employee_deferral_rate=0.10), rules)
        without = compute_year(YearInputs(salary=100000), rules)

        assert with_deferral.payroll_base == without.payroll_base
        assert with_deferral.disability_insurance == without.disability_insurance
        assert with_deferral.federal_taxable_income < without.federal_taxable_income

    def test_income_below_deduction(self, rules):
        result = compute_year(YearInputs(salary=20000), rules)

        assert result.federal_taxable_income == 0.0
        assert result.federal_tax == 0.0

    def test_zero_salary(self, rules):
        result = compute_year(YearInputs(salary=0, employee_deferral_rate=0.06), rules)
        assert result.take_home == 0.0

    def test_same_inputs_same_result(self, reference_inputs, rules):
        assert compute_year(reference_inputs, rules) == compute_year(reference_inputs, rules)


class TestPaycheckSnapshot:

    def test_biweekly_per_period(self, reference_inputs, rules):
        snapshot = paycheck_snapshot(reference_inputs, rules, "biweekly")

        assert snapshot.periods == 26
        assert snapshot.gross_per_period == pytest.approx(100000 / 26)
        assert snapshot.take_home_per_period == pytest.approx(75816.68 / 26)

    def test_cash_drop_smaller_than_deferral(self, reference_inputs, rules):
        """Deferring $6000 costs $4920 of take-home (fed 720 + CA 360 saved)."""
        snapshot = paycheck_snapshot(reference_inputs, rules, "weekly")

        assert snapshot.without_deferral.employee_deferral == 0.0
        assert snapshot.without_deferral.take_home == pytest.approx(80736.68)
        assert snapshot.cash_drop_per_period == pytest.approx(4920 / 52)
        assert snapshot.cash_drop_per_period < 6000 / 52

    def test_unknown_frequency(self, reference_inputs, rules):
        with pytest.raises(ValueError, match="fortnightly"):
            paycheck_snapshot(reference_inputs, rules, "fortnightly")

    def test_default_frequency_is_weekly(self, reference_inputs, rules):
        snapshot = paycheck_snapshot(reference_inputs, rules)

        assert snapshot.pay_frequency == "weekly"
        assert snapshot.periods == 52
