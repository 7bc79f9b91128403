"""Single-year paycheck assembly.

Combines the deferral clamp, employer match, payroll taxes, federal and
regional income tax, and SDI into one YearResult. Pure: the same inputs
and rules always give the same result, and no numeric input raises.

The 401(k) deferral reduces federal and regional taxable income only.
Social Security, Medicare and SDI are charged on gross salary.
"""

import logging

from .retirement import clamp_deferral, employer_match
from .schemas import PaycheckSnapshot, PayFrequency, YearInputs, YearResult
from .taxes.brackets import progressive_tax
from .taxes.payroll import disability_insurance, payroll_tax_for
from .taxes.schemas import TaxRules

logger = logging.getLogger(__name__)

# Pay periods by frequency
PAY_PERIODS = {
    "weekly": 52,
    "biweekly": 26,
    "semimonthly": 24,
    "monthly": 12,
}


def compute_year(inputs: YearInputs, rules: TaxRules) -> YearResult:
    """Compute one year's take-home pay breakdown.

    Args:
        inputs: Salary, filing status, and 401(k) election/match terms
        rules: Plan configuration (brackets, deductions, payroll rates, limits)

    Returns:
        YearResult with every deduction and the resulting take-home
    """
    salary = inputs.salary
    status = inputs.filing_status

    deferral = clamp_deferral(
        inputs.employee_deferral_rate,
        salary,
        rules.retirement_401k.employee_elective_limit,
        rules.retirement_401k.catch_up,
    )
    match = employer_match(
        inputs.employee_deferral_rate,
        inputs.employer_match_rate_per_dollar,
        inputs.employer_match_ceiling_rate,
        salary,
    )

    payroll = payroll_tax_for(salary, status, rules)

    federal_taxable = max(0.0, salary - deferral - rules.federal_standard_deduction(status))
    federal_tax = progressive_tax(federal_taxable, rules.federal_brackets(status))

    regional_taxable = max(0.0, salary - deferral - rules.regional_standard_deduction(status))
    regional_tax = progressive_tax(regional_taxable, rules.regional_brackets(status))

    sdi = disability_insurance(salary, rules.disability_insurance.rate)

    take_home = (
        salary
        - deferral
        - payroll.base
        - payroll.medicare
        - payroll.surtax
        - federal_tax
        - regional_tax
        - sdi
    )

    logger.debug(
        f"compute_year: salary={salary:.2f} status={status.value} "
        f"fed_taxable={federal_taxable:.2f} regional_taxable={regional_taxable:.2f} "
        f"take_home={take_home:.2f}"
    )

    return YearResult(
        salary=salary,
        employee_deferral=deferral,
        employer_match=match,
        payroll_base=payroll.base,
        payroll_medicare=payroll.medicare,
        payroll_surtax=payroll.surtax,
        federal_taxable_income=federal_taxable,
        federal_tax=federal_tax,
        regional_taxable_income=regional_taxable,
        regional_tax=regional_tax,
        disability_insurance=sdi,
        take_home=take_home,
    )


def paycheck_snapshot(inputs: YearInputs, rules: TaxRules, pay_frequency: PayFrequency = "weekly") -> PaycheckSnapshot:
    """Per-paycheck amounts for a year, compared against not deferring at all.

    The cash drop is usually smaller than the per-period deferral because
    the deferral also lowers federal and regional income tax.

    Raises:
        ValueError: If pay_frequency is not one of PAY_PERIODS
    """
    if pay_frequency not in PAY_PERIODS:
        raise ValueError(
            f"Unknown pay frequency '{pay_frequency}' (expected one of: {', '.join(PAY_PERIODS)})"
        )
    periods = PAY_PERIODS[pay_frequency]

    year = compute_year(inputs, rules)
    without = compute_year(inputs.model_copy(update={"employee_deferral_rate": 0.0}), rules)

    return PaycheckSnapshot(
        pay_frequency=pay_frequency,
        periods=periods,
        year=year,
        without_deferral=without,
        gross_per_period=year.salary / periods,
        take_home_per_period=year.take_home / periods,
        take_home_without_deferral_per_period=without.take_home / periods,
        cash_drop_per_period=(without.take_home - year.take_home) / periods,
    )
