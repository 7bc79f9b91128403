"""Progressive (marginal) bracket tax."""

from typing import Iterable, Sequence

from .schemas import RateBracket


def progressive_tax(taxable_income: float, brackets: Iterable[RateBracket]) -> float:
    """Calculate tax owed on taxable income using marginal brackets.

    Each rate applies only to the slice of income inside its bracket, so the
    result is continuous across bracket edges. Zero or negative income owes
    nothing.
    """
    if taxable_income <= 0:
        return 0.0

    tax_owed = 0.0
    previous_bracket_max = 0.0

    for bracket in brackets:
        current_bracket_max = bracket.upper_bound
        income_in_this_bracket = min(taxable_income, current_bracket_max) - previous_bracket_max
        if income_in_this_bracket > 0:
            tax_owed += income_in_this_bracket * bracket.rate
        if taxable_income <= current_bracket_max:
            break
        previous_bracket_max = current_bracket_max

    return tax_owed


def marginal_rate(taxable_income: float, brackets: Sequence[RateBracket]) -> float:
    """Rate of the bracket that the last dollar of taxable income falls in."""
    for bracket in brackets:
        if taxable_income <= bracket.upper_bound:
            return bracket.rate
    return brackets[-1].rate
