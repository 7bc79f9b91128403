"""Unit tests for the multi-year contribution projection."""

import csv

import pytest

from takehome.sdk import (
    FilingStatus,
    ProjectionInputs,
    iter_projection,
    load_tax_rules,
    project,
    projection_to_csv_string,
    write_projection_csv,
)
from takehome.sdk.projection import CSV_COLUMNS


@pytest.fixture
def rules():
    return load_tax_rules("2025")


def make_inputs(**overrides):
    values = dict(
        start_salary=100000,
        number_of_years=10,
        filing_status=FilingStatus.MFJ,
        employee_deferral_rate=0.06,
        employer_match_rate_per_dollar=0.5,
        employer_match_ceiling_rate=0.06,
        annual_raise_rate=0.0,
        investment_return_rate=0.0,
        discount_rate=0.04,
    )
    values.update(overrides)
    return ProjectionInputs(**values)


class TestProjectionEdges:

    def test_zero_years(self, rules):
        result = project(make_inputs(number_of_years=0), rules)

        assert result.rows == ()
        assert result.future_value == 0.0
        assert result.present_value == 0.0
        assert result.cumulative_total == 0.0

    def test_iter_projection_zero_years_yields_nothing(self, rules):
        assert list(iter_projection(make_inputs(number_of_years=0), rules)) == []

    def test_one_year(self, rules):
        result = project(make_inputs(number_of_years=1), rules)

        assert len(result.rows) == 1
        assert result.future_value == pytest.approx(9000)
        assert result.present_value == pytest.approx(9000 / 1.04)


class TestProjectionValues:

    def test_zero_return_fv_is_sum_of_contributions(self, rules):
        result = project(make_inputs(), rules)

        assert result.future_value == pytest.approx(90000)
        assert result.cumulative_employee_deferral == pytest.approx(60000)
        assert result.cumulative_employer_match == pytest.approx(30000)
        assert result.cumulative_total == pytest.approx(90000)

    def test_constant_contribution_annuity(self, rules):
        """Flat salary: FV and PV follow the ordinary annuity formulas."""
        result = project(make_inputs(investment_return_rate=0.07), rules)

        assert result.future_value == pytest.approx(9000 * (1.07 ** 10 - 1) / 0.07)
        assert result.present_value == pytest.approx(9000 * (1 - 1.04 ** -10) / 0.04)

    def test_salary_raises_after_each_year(self, rules):
        result = project(make_inputs(number_of_years=3, annual_raise_rate=0.03), rules)
        salaries = [row.result.salary for row in result.rows]

        assert salaries == pytest.approx([100000, 103000, 106090])

    def test_future_value_recurrence(self, rules):
        inputs = make_inputs(annual_raise_rate=0.03, investment_return_rate=0.07)
        result = project(inputs, rules)

        fv = 0.0
        pv = 0.0
        for k, row in enumerate(result.rows, start=1):
            fv = fv * 1.07 + row.total_contribution
            pv += row.total_contribution / 1.04 ** k
            assert row.future_value == pytest.approx(fv)
            assert row.present_value == pytest.approx(pv)

        assert result.future_value == pytest.approx(fv)
        assert result.present_value == pytest.approx(pv)

    def test_rows_numbered_from_one(self, rules):
        result = project(make_inputs(number_of_years=4), rules)
        assert [row.year_index for row in result.rows] == [1, 2, 3, 4]

    def test_deferral_limit_holds_every_year(self, rules):
        result = project(make_inputs(start_salary=400000, employee_deferral_rate=0.10,
                                     annual_raise_rate=0.05), rules)
        assert all(row.result.employee_deferral == pytest.approx(23000) for row in result.rows)


class TestProjectionCsv:

    def test_csv_header_and_rows(self, rules):
        result = project(make_inputs(number_of_years=3), rules)
        rows = list(csv.reader(projection_to_csv_string(result).splitlines()))

        assert rows[0] == CSV_COLUMNS
        assert len(rows) == 4
        assert rows[1][0] == "1"
        assert rows[1][1] == "100000.00"
        assert rows[3][CSV_COLUMNS.index("cumulative_total")] == "27000.00"

    def test_csv_zero_years_header_only(self, rules):
        text = projection_to_csv_string(project(make_inputs(number_of_years=0), rules))
        assert text.splitlines() == [",".join(CSV_COLUMNS)]

    def test_write_projection_csv(self, rules, tmp_path):
        result = project(make_inputs(number_of_years=2), rules)
        path = write_projection_csv(result, tmp_path / "projection.csv")

        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))

        assert len(rows) == 2
        assert rows[1]["future_value"] == "18000.00"
