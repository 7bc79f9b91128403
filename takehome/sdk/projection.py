"""Multi-year 401(k) contribution projection.

Runs compute_year once per year on a salary that grows by the raise rate,
accumulating contributions into a future value (end-of-year deposits,
compounded at the investment return) and a present value (each year's
contribution discounted back to year zero).

Each year depends only on the prior year's salary; contributions never
feed back into later paychecks.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterator, Union

from .paycheck import compute_year
from .schemas import ProjectionInputs, ProjectionResult, ProjectionRow
from .taxes.schemas import TaxRules

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "year",
    "salary",
    "employee_401k",
    "employer_match",
    "total_contribution",
    "take_home",
    "cumulative_employee",
    "cumulative_match",
    "cumulative_total",
    "future_value",
    "present_value",
]


def iter_projection(inputs: ProjectionInputs, rules: TaxRules) -> Iterator[ProjectionRow]:
    """Yield one ProjectionRow per year, in order.

    Yields nothing when number_of_years is 0.
    """
    salary = inputs.start_salary
    future_value = 0.0
    present_value = 0.0
    cumulative_employee = 0.0
    cumulative_match = 0.0

    for year_index in range(1, inputs.number_of_years + 1):
        result = compute_year(inputs.year_inputs(salary), rules)
        contribution = result.employee_deferral + result.employer_match

        # Prior balance compounds a full year; this year's deposit lands at year end
        future_value = future_value * (1 + inputs.investment_return_rate) + contribution
        present_value += contribution / (1 + inputs.discount_rate) ** year_index

        cumulative_employee += result.employee_deferral
        cumulative_match += result.employer_match

        logger.debug(
            f"projection year {year_index}: salary={salary:.2f} "
            f"contribution={contribution:.2f} fv={future_value:.2f} pv={present_value:.2f}"
        )

        yield ProjectionRow(
            year_index=year_index,
            result=result,
            total_contribution=contribution,
            cumulative_employee_deferral=cumulative_employee,
            cumulative_employer_match=cumulative_match,
            cumulative_total=cumulative_employee + cumulative_match,
            future_value=future_value,
            present_value=present_value,
        )

        salary = salary * (1 + inputs.annual_raise_rate)


def project(inputs: ProjectionInputs, rules: TaxRules) -> ProjectionResult:
    """Run the full projection and return rows plus final aggregates."""
    rows = tuple(iter_projection(inputs, rules))
    if not rows:
        return ProjectionResult()

    last = rows[-1]
    return ProjectionResult(
        rows=rows,
        future_value=last.future_value,
        present_value=last.present_value,
        cumulative_employee_deferral=last.cumulative_employee_deferral,
        cumulative_employer_match=last.cumulative_employer_match,
    )


def _write_projection_rows(writer, result: ProjectionResult) -> None:
    """Write header and per-year rows to a csv writer."""
    writer.writerow(CSV_COLUMNS)
    for row in result.rows:
        writer.writerow([
            row.year_index,
            f"{row.result.salary:.2f}",
            f"{row.result.employee_deferral:.2f}",
            f"{row.result.employer_match:.2f}",
            f"{row.total_contribution:.2f}",
            f"{row.result.take_home:.2f}",
            f"{row.cumulative_employee_deferral:.2f}",
            f"{row.cumulative_employer_match:.2f}",
            f"{row.cumulative_total:.2f}",
            f"{row.future_value:.2f}",
            f"{row.present_value:.2f}",
        ])


def projection_to_csv_string(result: ProjectionResult) -> str:
    """Render a projection as CSV text."""
    output = io.StringIO()
    writer = csv.writer(output)
    _write_projection_rows(writer, result)
    return output.getvalue()


def write_projection_csv(result: ProjectionResult, output_path: Union[str, Path]) -> Path:
    """Write a projection to a CSV file.

    Args:
        result: Projection from project()
        output_path: Path to output CSV file

    Returns:
        Path to the written file
    """
    output_path = Path(output_path)
    with open(output_path, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        _write_projection_rows(writer, result)

    return output_path
