"""Payroll (FICA) and state disability insurance calculations.

None of these bases are reduced by 401(k) deferrals: Social Security,
Medicare and SDI are all charged on gross wages.
"""

from pydantic import BaseModel, ConfigDict, Field

from .schemas import FilingStatus, TaxRules


class PayrollTax(BaseModel):
    """Payroll tax components, tracked separately."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base: float = Field(..., description="Wage-base-capped tax (Social Security)")
    medicare: float = Field(default=0.0, description="Uncapped flat-rate tax (Medicare)")
    surtax: float = Field(default=0.0, description="Tax above the surtax threshold (Additional Medicare)")

    @property
    def total(self) -> float:
        return self.base + self.medicare + self.surtax


def payroll_tax(
    salary: float,
    wage_base: float,
    base_rate: float,
    surtax_rate: float,
    surtax_threshold: float,
    uncapped_rate: float = 0.0,
) -> PayrollTax:
    """Calculate payroll taxes on gross salary.

    Args:
        salary: Gross wages for the year
        wage_base: Wages above this accrue no further base tax
        base_rate: Rate charged on wages up to wage_base
        surtax_rate: Rate charged on wages above surtax_threshold (no cap)
        surtax_threshold: Filing-status threshold for the surtax
        uncapped_rate: Flat rate charged on all wages

    Returns:
        PayrollTax with base, medicare and surtax components
    """
    wages = max(0.0, salary)
    return PayrollTax(
        base=min(wages, wage_base) * base_rate,
        medicare=wages * uncapped_rate,
        surtax=max(0.0, salary - surtax_threshold) * surtax_rate,
    )


def payroll_tax_for(salary: float, status: FilingStatus, rules: TaxRules) -> PayrollTax:
    """payroll_tax bound to a rule set and filing status."""
    return payroll_tax(
        salary,
        wage_base=rules.social_security.wage_cap,
        base_rate=rules.social_security.tax_rate,
        surtax_rate=rules.medicare.additional_tax_rate,
        surtax_threshold=rules.surtax_threshold(status),
        uncapped_rate=rules.medicare.tax_rate,
    )


def disability_insurance(salary: float, rate: float) -> float:
    """State disability insurance: flat rate on gross wages."""
    return max(0.0, salary) * rate
