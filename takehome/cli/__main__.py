"""takehome CLI - Command-line interface for take-home pay and 401(k) projections."""

import json
from typing import Optional

import click
from rich.console import Console

from takehome import __version__
from takehome.sdk import (
    ConfigNotFoundError,
    ConfigurationError,
    FilingStatus,
    PAY_PERIODS,
    ProfileValidationError,
    ProjectionInputs,
    TaxRules,
    YearInputs,
    get_input_defaults,
    get_setting,
    load_plan_configuration,
    paycheck_snapshot,
    project,
    projection_to_csv_string,
    with_overrides,
)

from .renderers.paycheck_renderer import render_paycheck, render_projection
from .rules_commands import rules as rules_group
from .settings_commands import settings as settings_group


@click.group()
@click.version_option(version=__version__, prog_name="takehome")
def cli():
    """takehome - Take-home pay and 401(k) contribution planner.

    Estimates annual and per-paycheck take-home pay under federal and
    California income tax, FICA and SDI, and projects 401(k)
    contributions over several years.

    Inputs not given on the command line come from (in order):

    \b
    1. profile.yaml 'inputs' in the config directory
    2. Built-in defaults ($100,000 MFJ, 6% deferral, 50% match up to 6%)

    Run 'takehome settings show' to see the config directory.
    """
    pass


cli.add_command(rules_group)
cli.add_command(settings_group)


def plan_options(f):
    """Options shared by paycheck and project."""
    decorators = [
        click.option("--filing", type=click.Choice([s.value for s in FilingStatus]), default=None,
                     help="Filing status (default: mfj)"),
        click.option("--deferral-rate", type=click.FloatRange(min=0), default=None,
                     help="Your 401(k) contribution as a fraction of salary (0.06 = 6%)"),
        click.option("--match-per-dollar", type=click.FloatRange(min=0), default=None,
                     help="Employer match per $1 deferred (0.5 = 50c)"),
        click.option("--match-up-to", type=click.FloatRange(min=0), default=None,
                     help="Match applies to deferrals up to this fraction of salary"),
        click.option("--rules", "rules_path", type=click.Path(dir_okay=False), default=None,
                     help="Tax rules YAML replacing the packaged reference year"),
        click.option("--federal-std", type=float, default=None,
                     help="Override federal standard deduction for the filing status"),
        click.option("--regional-std", type=float, default=None,
                     help="Override California standard deduction for the filing status"),
        click.option("--deferral-limit", type=float, default=None,
                     help="Override 401(k) elective deferral limit"),
        click.option("--catch-up", type=float, default=None,
                     help="Override 401(k) catch-up allowance"),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def _pick(value, default):
    return default if value is None else value


def _load_defaults():
    try:
        return get_input_defaults()
    except ProfileValidationError as e:
        raise click.ClickException(str(e))


def _resolve_rules(
    rules_path: Optional[str],
    status: FilingStatus,
    federal_std: Optional[float],
    regional_std: Optional[float],
    deferral_limit: Optional[float],
    catch_up: Optional[float],
) -> TaxRules:
    """Load rules and apply any command-line overrides."""
    try:
        rules = load_plan_configuration(rules_path)
        if any(v is not None for v in (federal_std, regional_std, deferral_limit, catch_up)):
            rules = with_overrides(
                rules,
                status,
                federal_standard_deduction=federal_std,
                regional_standard_deduction=regional_std,
                deferral_limit=deferral_limit,
                catch_up=catch_up,
            )
    except (ConfigurationError, ConfigNotFoundError) as e:
        raise click.ClickException(str(e))
    return rules


def _resolve_format(output_format: Optional[str], allowed: tuple) -> str:
    """Explicit --format, else settings default_output_format, else text."""
    if output_format:
        return output_format
    default = get_setting("default_output_format", "text")
    return default if default in allowed else "text"


@cli.command("paycheck")
@click.option("--salary", type=click.FloatRange(min=0), default=None, help="Annual gross salary")
@plan_options
@click.option("--pay-frequency", type=click.Choice(list(PAY_PERIODS)), default=None,
              help="Pay frequency for per-paycheck amounts (default: weekly)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default=None,
              help="Output format (default: settings or text)")
def paycheck(salary, filing, deferral_rate, match_per_dollar, match_up_to, rules_path,
             federal_std, regional_std, deferral_limit, catch_up, pay_frequency, output_format):
    """Show this year's take-home pay breakdown.

    The 401(k) deferral reduces federal and California taxable income.
    FICA and SDI apply to gross salary. Per-paycheck amounts include the
    cash drop compared with not contributing at all.

    \b
    Examples:
      takehome paycheck --salary 100000 --filing mfj --deferral-rate 0.06
      takehome paycheck --pay-frequency biweekly --format json
    """
    defaults = _load_defaults()
    status = FilingStatus(_pick(filing, defaults.filing_status))
    rules = _resolve_rules(rules_path, status, federal_std, regional_std, deferral_limit, catch_up)

    inputs = YearInputs(
        salary=_pick(salary, defaults.salary),
        filing_status=status,
        employee_deferral_rate=_pick(deferral_rate, defaults.employee_deferral_rate),
        employer_match_rate_per_dollar=_pick(match_per_dollar, defaults.employer_match_rate_per_dollar),
        employer_match_ceiling_rate=_pick(match_up_to, defaults.employer_match_ceiling_rate),
    )
    snapshot = paycheck_snapshot(inputs, rules, _pick(pay_frequency, defaults.pay_frequency))

    if _resolve_format(output_format, ("text", "json")) == "json":
        output = snapshot.model_dump(mode="json")
        output["fica"] = snapshot.year.fica
        click.echo(json.dumps(output, indent=2))
    else:
        render_paycheck(Console(), snapshot, rules, status)


@cli.command("project")
@click.option("--salary", "start_salary", type=click.FloatRange(min=0), default=None,
              help="Starting annual salary")
@plan_options
@click.option("--years", type=click.IntRange(min=0), default=None, help="Number of years to project (default: 10)")
@click.option("--raise-rate", type=click.FloatRange(min=0), default=None,
              help="Annual salary raise (0.03 = 3%)")
@click.option("--return-rate", type=click.FloatRange(min=0), default=None,
              help="Annual investment return (0.07 = 7%)")
@click.option("--discount-rate", type=click.FloatRange(min=0), default=None,
              help="Discount rate for present value (0.04 = 4%)")
@click.option("--format", "output_format", type=click.Choice(["text", "json", "csv"]), default=None,
              help="Output format (default: settings or text)")
def project_cmd(start_salary, filing, deferral_rate, match_per_dollar, match_up_to, rules_path,
                federal_std, regional_std, deferral_limit, catch_up, years, raise_rate,
                return_rate, discount_rate, output_format):
    """Project 401(k) contributions over several years.

    Contributions are deposited at the end of each year; the prior balance
    compounds one full year first. Present value discounts each year's
    contribution back to today.

    \b
    Output formats:
      --format=text  Rich tables (default, for terminal viewing)
      --format=json  JSON object (rows and totals)
      --format=csv   CSV rows (for spreadsheet or chart import)
    """
    defaults = _load_defaults()
    status = FilingStatus(_pick(filing, defaults.filing_status))
    rules = _resolve_rules(rules_path, status, federal_std, regional_std, deferral_limit, catch_up)

    inputs = ProjectionInputs(
        start_salary=_pick(start_salary, defaults.salary),
        number_of_years=_pick(years, defaults.number_of_years),
        filing_status=status,
        employee_deferral_rate=_pick(deferral_rate, defaults.employee_deferral_rate),
        employer_match_rate_per_dollar=_pick(match_per_dollar, defaults.employer_match_rate_per_dollar),
        employer_match_ceiling_rate=_pick(match_up_to, defaults.employer_match_ceiling_rate),
        annual_raise_rate=_pick(raise_rate, defaults.annual_raise_rate),
        investment_return_rate=_pick(return_rate, defaults.investment_return_rate),
        discount_rate=_pick(discount_rate, defaults.discount_rate),
    )
    result = project(inputs, rules)

    fmt = _resolve_format(output_format, ("text", "json", "csv"))
    if fmt == "json":
        output = result.model_dump(mode="json")
        output["cumulative_total"] = result.cumulative_total
        click.echo(json.dumps(output, indent=2))
    elif fmt == "csv":
        click.echo(projection_to_csv_string(result), nl=False)
    else:
        render_projection(Console(), result, inputs.investment_return_rate, inputs.discount_rate)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
