"""Unit tests for progressive bracket tax.

Uses the packaged 2025 rules: federal MFJ brackets and California MFJ brackets.
"""

import pytest

from takehome.sdk.taxes import FilingStatus, RateBracket, load_tax_rules, marginal_rate, progressive_tax


@pytest.fixture
def rules():
    return load_tax_rules("2025")


@pytest.fixture
def simple_brackets():
    """10% to 10k, 20% to 50k, 30% above."""
    return [
        RateBracket(up_to=10000, rate=0.10),
        RateBracket(up_to=50000, rate=0.20),
        RateBracket(rate=0.30),
    ]


class TestProgressiveTaxBasics:
    """Zero income and bracket edges."""

    def test_zero_income_owes_nothing(self, simple_brackets):
        assert progressive_tax(0, simple_brackets) == 0.0

    def test_negative_income_owes_nothing(self, simple_brackets):
        assert progressive_tax(-5000, simple_brackets) == 0.0

    def test_within_first_bracket(self, simple_brackets):
        assert progressive_tax(5000, simple_brackets) == pytest.approx(500)

    def test_exactly_at_bracket_edge(self, simple_brackets):
        assert progressive_tax(10000, simple_brackets) == pytest.approx(1000)

    def test_spans_three_brackets(self, simple_brackets):
        # 1000 + 8000 + 15000
        assert progressive_tax(100000, simple_brackets) == pytest.approx(24000)

    def test_single_unbounded_bracket_is_flat(self):
        assert progressive_tax(80000, [RateBracket(rate=0.05)]) == pytest.approx(4000)


class TestProgressiveTaxProperties:
    """Monotonic and continuous across edges."""

    def test_monotonic(self, simple_brackets):
        incomes = [0, 1, 9999, 10000, 10001, 49999, 50000, 50001, 250000]
        taxes = [progressive_tax(i, simple_brackets) for i in incomes]
        assert taxes == sorted(taxes)

    @pytest.mark.parametrize("edge", [10000, 50000])
    def test_continuous_at_edges(self, simple_brackets, edge):
        below = progressive_tax(edge - 0.01, simple_brackets)
        above = progressive_tax(edge + 0.01, simple_brackets)
        assert 0 < above - below < 0.01

    def test_never_exceeds_top_rate(self, simple_brackets):
        assert progressive_tax(1_000_000, simple_brackets) < 0.30 * 1_000_000


class TestReferenceBrackets:
    """Known values from the packaged rules."""

    def test_federal_mfj_64000(self, rules):
        """2385 at 10% + 4818 at 12%."""
        tax = progressive_tax(64000, rules.federal_brackets(FilingStatus.MFJ))
        assert tax == pytest.approx(7203.00)

    def test_california_mfj_82920(self, rules):
        tax = progressive_tax(82920, rules.regional_brackets(FilingStatus.MFJ))
        assert tax == pytest.approx(2130.32)

    def test_federal_single_uses_single_table(self, rules):
        # 11925 * 0.10 + (20000 - 11925) * 0.12
        tax = progressive_tax(20000, rules.federal_brackets(FilingStatus.SINGLE))
        assert tax == pytest.approx(1192.50 + 969.00)


class TestMarginalRate:

    def test_marginal_rate_by_bracket(self, simple_brackets):
        assert marginal_rate(5000, simple_brackets) == 0.10
        assert marginal_rate(10000, simple_brackets) == 0.10
        assert marginal_rate(10001, simple_brackets) == 0.20
        assert marginal_rate(900000, simple_brackets) == 0.30
