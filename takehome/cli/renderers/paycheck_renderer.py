"""Rich renderers for paycheck, projection and tax rules output.

Transforms SDK models into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from takehome.sdk.schemas import PaycheckSnapshot, ProjectionResult, YearResult
from takehome.sdk.taxes.brackets import marginal_rate
from takehome.sdk.taxes.schemas import FilingStatus, JurisdictionRules, TaxRules


def _money(amount: float) -> str:
    return f"${amount:,.2f}"


def _pct(rate: float) -> str:
    return f"{rate * 100:.2f}%"


def _breakdown_rows(yr: YearResult, regional_name: str) -> list:
    return [
        ("Gross Salary", yr.salary),
        ("Employee 401(k)", yr.employee_deferral),
        ("Employer Match", yr.employer_match),
        ("Federal Tax", yr.federal_tax),
        ("Social Security", yr.payroll_base),
        ("Medicare", yr.payroll_medicare),
        ("Additional Medicare", yr.payroll_surtax),
        (f"{regional_name} Income Tax", yr.regional_tax),
        (f"{regional_name} SDI", yr.disability_insurance),
    ]


def render_paycheck(console: Console, snapshot: PaycheckSnapshot, rules: TaxRules,
                    status: FilingStatus) -> None:
    """Render the annual breakdown and per-period paycheck view.

    Args:
        console: Rich Console instance
        snapshot: SDK output from paycheck_snapshot()
        rules: Rules the snapshot was computed with (for labels and brackets)
        status: Filing status the snapshot was computed for
    """
    yr = snapshot.year
    regional = rules.regional.name

    table = Table(title="Current Year Snapshot", box=box.SIMPLE_HEAVY)
    table.add_column("Item")
    table.add_column("Annual", justify="right")
    table.add_column(f"Per Period ({snapshot.periods})", justify="right")

    for label, amount in _breakdown_rows(yr, regional):
        table.add_row(label, _money(amount), _money(amount / snapshot.periods))
    table.add_section()
    table.add_row("[bold]Take-Home[/bold]", f"[bold]{_money(yr.take_home)}[/bold]",
                  f"[bold]{_money(snapshot.take_home_per_period)}[/bold]")
    console.print(table)

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("key", style="dim")
    summary.add_column("value", justify="right")
    summary.add_row("FICA (SS + Medicare)", _money(yr.fica))
    summary.add_row("Federal taxable income", _money(yr.federal_taxable_income))
    summary.add_row(f"{regional} taxable income", _money(yr.regional_taxable_income))
    summary.add_row("Federal marginal rate",
                    _pct(marginal_rate(yr.federal_taxable_income, rules.federal_brackets(status))))
    summary.add_row(f"{regional} marginal rate",
                    _pct(marginal_rate(yr.regional_taxable_income, rules.regional_brackets(status))))
    summary.add_row(f"Take-home without 401(k) ({snapshot.pay_frequency})",
                    _money(snapshot.take_home_without_deferral_per_period))
    summary.add_row(f"Cash drop vs no 401(k) ({snapshot.pay_frequency})",
                    _money(snapshot.cash_drop_per_period))
    console.print(Panel(summary, title="Paycheck", border_style="dim"))


def render_projection(console: Console, result: ProjectionResult,
                      investment_return_rate: float, discount_rate: float) -> None:
    """Render yearly projection rows and final totals."""
    if not result.rows:
        console.print(Panel("[yellow]No years projected.[/yellow]", title="Note", border_style="yellow"))

    table = Table(title="Retirement Contributions Over Time", box=box.SIMPLE_HEAVY)
    table.add_column("Year", justify="right")
    table.add_column("Salary", justify="right")
    table.add_column("Employee 401(k)", justify="right")
    table.add_column("Match", justify="right")
    table.add_column("Take-Home", justify="right")
    table.add_column("Cumulative", justify="right")

    for row in result.rows:
        table.add_row(
            str(row.year_index),
            _money(row.result.salary),
            _money(row.result.employee_deferral),
            _money(row.result.employer_match),
            _money(row.result.take_home),
            _money(row.cumulative_total),
        )
    if result.rows:
        console.print(table)

    totals = Table(show_header=False, box=None, padding=(0, 2))
    totals.add_column("key", style="dim")
    totals.add_column("value", justify="right")
    totals.add_row("Years", str(len(result.rows)))
    totals.add_row("Cumulative Employee", _money(result.cumulative_employee_deferral))
    totals.add_row("Cumulative Match", _money(result.cumulative_employer_match))
    totals.add_row("Total Contributions", _money(result.cumulative_total))
    totals.add_row(f"Future Value (@ {_pct(investment_return_rate)})", _money(result.future_value))
    totals.add_row(f"Present Value (@ {_pct(discount_rate)})", _money(result.present_value))
    console.print(Panel(totals, title="Projection (Contributions Only)", border_style="dim"))


def _render_jurisdiction(console: Console, rules: JurisdictionRules) -> None:
    for status in ("single", "mfj"):
        fs = getattr(rules, status)
        table = Table(
            title=f"{rules.name} {rules.year} ({status}) - standard deduction {_money(fs.standard_deduction)}",
            box=box.SIMPLE,
        )
        table.add_column("Over", justify="right")
        table.add_column("Up To", justify="right")
        table.add_column("Rate", justify="right")

        lower = 0.0
        for bracket in fs.tax_brackets.brackets:
            upper = "and above" if bracket.unbounded else _money(bracket.upper_bound)
            table.add_row(_money(lower), upper, _pct(bracket.rate))
            lower = bracket.upper_bound
        console.print(table)


def render_rules(console: Console, rules: TaxRules) -> None:
    """Render brackets, deductions, payroll rates and limits."""
    _render_jurisdiction(console, rules.federal)
    _render_jurisdiction(console, rules.regional)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", justify="right")
    table.add_row("Social Security wage base", _money(rules.social_security.wage_cap))
    table.add_row("Social Security rate", _pct(rules.social_security.tax_rate))
    table.add_row("Medicare rate", _pct(rules.medicare.tax_rate))
    table.add_row("Additional Medicare rate", _pct(rules.medicare.additional_tax_rate))
    table.add_row("Additional Medicare threshold (single)",
                  _money(rules.medicare.additional_tax_threshold.single))
    table.add_row("Additional Medicare threshold (mfj)",
                  _money(rules.medicare.additional_tax_threshold.mfj))
    table.add_row(f"{rules.regional.name} SDI rate", _pct(rules.disability_insurance.rate))
    table.add_row("401(k) elective limit", _money(rules.retirement_401k.employee_elective_limit))
    table.add_row("401(k) catch-up", _money(rules.retirement_401k.catch_up))
    console.print(Panel(table, title="Payroll & Limits", border_style="dim"))
