"""Pydantic schemas for tax rules validation.

These schemas validate the tax_rules/*.yaml files and provide typed access
to tax parameters like the SS wage cap, 401k limits, and tax brackets.
A validated TaxRules object is the plan configuration used by the engine.
"""

import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FilingStatus(str, Enum):
    """Filing status (selects brackets, standard deduction, surtax threshold)."""

    SINGLE = "single"
    MFJ = "mfj"


class RateBracket(BaseModel):
    """Single tax bracket entry."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: Optional[float] = Field(default=None, ge=0, description="Inclusive upper edge (None = and above)")
    rate: float = Field(..., ge=0, le=1, description="Tax rate as decimal")

    @property
    def upper_bound(self) -> float:
        """Upper edge as a number (infinity for the top bracket)."""
        return math.inf if self.up_to is None else self.up_to

    @property
    def unbounded(self) -> bool:
        return self.up_to is None


class BracketTable(BaseModel):
    """Ordered, contiguous rate tiers ending in an unbounded tier."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    brackets: List[RateBracket]

    @field_validator("brackets")
    @classmethod
    def check_ordering(cls, v: List[RateBracket]) -> List[RateBracket]:
        """Reject empty, non-ascending, or open-ended-in-the-middle tables."""
        if not v:
            raise ValueError("bracket table must contain at least one bracket")

        for i, bracket in enumerate(v[:-1]):
            if bracket.unbounded:
                raise ValueError(
                    f"bracket {i} has no upper bound but is not the last bracket"
                )
            if bracket.upper_bound >= v[i + 1].upper_bound:
                raise ValueError(
                    f"bracket upper bounds must be ascending: "
                    f"{bracket.upper_bound} >= {v[i + 1].upper_bound}"
                )

        if not v[-1].unbounded:
            raise ValueError("last bracket must be unbounded (omit up_to)")

        return v


class FilingStatusRules(BaseModel):
    """Tax rules for a filing status (MFJ, single)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    standard_deduction: float = Field(..., ge=0)
    tax_brackets: BracketTable

    @field_validator("tax_brackets", mode="before")
    @classmethod
    def wrap_bracket_list(cls, v):
        # YAML gives a bare list of brackets
        if isinstance(v, list):
            return {"brackets": v}
        return v


class JurisdictionRules(BaseModel):
    """Income tax rules for one taxing authority (federal or regional)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Display name (e.g., 'Federal', 'California')")
    year: int = Field(..., description="Tax year the brackets were published for")
    single: FilingStatusRules
    mfj: FilingStatusRules

    def for_status(self, status: FilingStatus) -> FilingStatusRules:
        return self.single if FilingStatus(status) is FilingStatus.SINGLE else self.mfj


class FilingStatusAmounts(BaseModel):
    """A dollar amount that depends on filing status."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    single: float = Field(..., ge=0)
    mfj: float = Field(..., ge=0)

    def for_status(self, status: FilingStatus) -> float:
        return self.single if FilingStatus(status) is FilingStatus.SINGLE else self.mfj


class SocialSecurityRules(BaseModel):
    """Social Security tax rules."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    wage_cap: float = Field(..., gt=0, description="SS wage base (max taxable)")
    tax_rate: float = Field(..., ge=0, le=1, description="SS tax rate (employee portion)")


class MedicareRules(BaseModel):
    """Medicare tax rules, including the Additional Medicare Tax surtax."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_rate: float = Field(..., ge=0, le=1, description="Uncapped Medicare rate (employee portion)")
    additional_tax_rate: float = Field(..., ge=0, le=1, description="Surtax rate above threshold")
    additional_tax_threshold: FilingStatusAmounts


class DisabilityInsuranceRules(BaseModel):
    """State disability insurance (flat rate on gross wages)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, le=1)


class Retirement401kRules(BaseModel):
    """401(k) contribution limits."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    employee_elective_limit: float = Field(..., ge=0, description="Pre-tax employee deferral limit")
    catch_up: float = Field(default=0, ge=0, description="Additional catch-up allowance")


class TaxRules(BaseModel):
    """Complete plan configuration for a reference tax year."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    federal: JurisdictionRules
    regional: JurisdictionRules
    social_security: SocialSecurityRules
    medicare: MedicareRules
    disability_insurance: DisabilityInsuranceRules
    retirement_401k: Retirement401kRules = Field(..., alias="401k")

    def federal_standard_deduction(self, status: FilingStatus) -> float:
        return self.federal.for_status(status).standard_deduction

    def regional_standard_deduction(self, status: FilingStatus) -> float:
        return self.regional.for_status(status).standard_deduction

    def federal_brackets(self, status: FilingStatus) -> List[RateBracket]:
        return self.federal.for_status(status).tax_brackets.brackets

    def regional_brackets(self, status: FilingStatus) -> List[RateBracket]:
        return self.regional.for_status(status).tax_brackets.brackets

    def surtax_threshold(self, status: FilingStatus) -> float:
        return self.medicare.additional_tax_threshold.for_status(status)

    @property
    def deferral_cap(self) -> float:
        """Maximum employee deferral (elective limit + catch-up)."""
        return self.retirement_401k.employee_elective_limit + self.retirement_401k.catch_up


# The engine's name for a validated rule set.
PlanConfiguration = TaxRules
