"""taxes - Tax rules and tax calculations.

Scope:
- Reference tax rules (brackets, deductions, payroll rates, 401k limits)
- Progressive bracket tax (federal and regional)
- Payroll taxes (Social Security, Medicare, Additional Medicare) and SDI

Constraints:
- Pure calculation - no paycheck assembly (that's in paycheck.py)
- Rules loaded from tax_rules/{year}.yaml and validated on load

Usage:
    from takehome.sdk.taxes import load_tax_rules, progressive_tax, FilingStatus

    rules = load_tax_rules("2025")
    tax = progressive_tax(64000, rules.federal_brackets(FilingStatus.MFJ))
"""

from .schemas import (
    FilingStatus,
    RateBracket,
    BracketTable,
    FilingStatusRules,
    JurisdictionRules,
    TaxRules,
    PlanConfiguration,
)

from .rules import (
    ConfigurationError,
    DEFAULT_YEAR,
    get_available_years,
    parse_tax_rules,
    load_rules_file,
    load_tax_rules,
    load_plan_configuration,
    with_overrides,
)

from .brackets import progressive_tax, marginal_rate

from .payroll import (
    PayrollTax,
    payroll_tax,
    payroll_tax_for,
    disability_insurance,
)

__all__ = [
    # Schemas
    "FilingStatus",
    "RateBracket",
    "BracketTable",
    "FilingStatusRules",
    "JurisdictionRules",
    "TaxRules",
    "PlanConfiguration",
    # Rules loading
    "ConfigurationError",
    "DEFAULT_YEAR",
    "get_available_years",
    "parse_tax_rules",
    "load_rules_file",
    "load_tax_rules",
    "load_plan_configuration",
    "with_overrides",
    # Calculations
    "progressive_tax",
    "marginal_rate",
    "PayrollTax",
    "payroll_tax",
    "payroll_tax_for",
    "disability_insurance",
]
