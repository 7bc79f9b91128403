"""Pydantic schemas for take-home calculations.

Inputs and results are immutable. Field names and units (dollars, and
rates as decimal fractions) are the stable output contract that renderers
and CSV export bind to.
"""

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .taxes.schemas import FilingStatus


PayFrequency = Literal["weekly", "biweekly", "semimonthly", "monthly"]


# =============================================================================
# Single-year
# =============================================================================


class YearInputs(BaseModel):
    """Inputs for one year's paycheck.

    Rates are not pre-capped; the engine clamps the deferral itself.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    salary: float = Field(..., description="Gross annual salary")
    filing_status: FilingStatus = Field(default=FilingStatus.MFJ)
    employee_deferral_rate: float = Field(default=0.0, description="Elected 401(k) rate (0.06 = 6%)")
    employer_match_rate_per_dollar: float = Field(default=0.0, description="Match per $1 deferred (0.5 = 50c)")
    employer_match_ceiling_rate: float = Field(default=0.0, description="Match applies up to this rate of salary")


class YearResult(BaseModel):
    """Full paycheck breakdown for one year.

    take_home = salary - employee_deferral - payroll_base - payroll_medicare
                - payroll_surtax - federal_tax - regional_tax - disability_insurance

    take_home may be negative for pathological inputs (e.g., deferral rate
    above 100% with a large limit); it is not clamped.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    salary: float
    employee_deferral: float = Field(..., description="Clamped pretax 401(k) deferral")
    employer_match: float = Field(..., description="Employer 401(k) match")
    payroll_base: float = Field(..., description="Social Security (wage-base capped)")
    payroll_medicare: float = Field(..., description="Medicare (uncapped)")
    payroll_surtax: float = Field(..., description="Additional Medicare above threshold")
    federal_taxable_income: float
    federal_tax: float
    regional_taxable_income: float
    regional_tax: float
    disability_insurance: float
    take_home: float

    @property
    def fica(self) -> float:
        """Social Security + Medicare + Additional Medicare (for display)."""
        return self.payroll_base + self.payroll_medicare + self.payroll_surtax

    @property
    def total_taxes(self) -> float:
        return self.fica + self.federal_tax + self.regional_tax + self.disability_insurance


class PaycheckSnapshot(BaseModel):
    """Per-pay-period view of a year, with and without the 401(k) deferral."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pay_frequency: PayFrequency
    periods: int = Field(..., gt=0)
    year: YearResult
    without_deferral: YearResult = Field(..., description="Same year with a 0% deferral election")
    gross_per_period: float
    take_home_per_period: float
    take_home_without_deferral_per_period: float
    cash_drop_per_period: float = Field(
        ..., description="Reduction in take-home per paycheck caused by deferring"
    )


# =============================================================================
# Multi-year projection
# =============================================================================


class ProjectionInputs(BaseModel):
    """Inputs for a multi-year contribution projection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_salary: float
    number_of_years: int = Field(..., ge=0)
    filing_status: FilingStatus = Field(default=FilingStatus.MFJ)
    employee_deferral_rate: float = 0.0
    employer_match_rate_per_dollar: float = 0.0
    employer_match_ceiling_rate: float = 0.0
    annual_raise_rate: float = 0.0
    investment_return_rate: float = 0.0
    discount_rate: float = 0.0

    def year_inputs(self, salary: float) -> YearInputs:
        """YearInputs for one projected year at the given salary."""
        return YearInputs(
            salary=salary,
            filing_status=self.filing_status,
            employee_deferral_rate=self.employee_deferral_rate,
            employer_match_rate_per_dollar=self.employer_match_rate_per_dollar,
            employer_match_ceiling_rate=self.employer_match_ceiling_rate,
        )


class ProjectionRow(BaseModel):
    """One projected year, with running totals through that year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year_index: int = Field(..., ge=1, description="1-based year number")
    result: YearResult
    total_contribution: float = Field(..., description="Employee deferral + employer match")
    cumulative_employee_deferral: float
    cumulative_employer_match: float
    cumulative_total: float
    future_value: float = Field(..., description="Account value at end of this year")
    present_value: float = Field(..., description="Discounted value of contributions so far")


class ProjectionResult(BaseModel):
    """Complete projection: yearly rows plus final aggregates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rows: Tuple[ProjectionRow, ...] = ()
    future_value: float = 0.0
    present_value: float = 0.0
    cumulative_employee_deferral: float = 0.0
    cumulative_employer_match: float = 0.0

    @property
    def cumulative_total(self) -> float:
        return self.cumulative_employee_deferral + self.cumulative_employer_match
