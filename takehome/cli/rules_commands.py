"""Tax rules CLI commands.

Shows and validates the reference-year constants (brackets, standard
deductions, payroll rates, 401(k) limits).
"""

import json

import click
from rich.console import Console

from takehome.sdk.config import ConfigNotFoundError
from takehome.sdk.taxes import (
    ConfigurationError,
    get_available_years,
    load_plan_configuration,
    load_rules_file,
)

from .renderers.paycheck_renderer import render_rules


@click.group()
def rules():
    """Show or validate tax rules.

    The packaged reference year is used unless a replacement rules file
    is set with 'takehome settings set rules_file PATH' or --rules.
    """
    pass


@rules.command("show")
@click.option("--rules", "rules_path", type=click.Path(dir_okay=False), default=None,
              help="Tax rules YAML to show instead of the active rules")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def rules_show(rules_path, output_format):
    """Show the active tax rules."""
    try:
        active = load_plan_configuration(rules_path)
    except (ConfigurationError, ConfigNotFoundError) as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(active.model_dump(mode="json", by_alias=True), indent=2))
        return

    render_rules(Console(), active)


@rules.command("validate")
@click.argument("path", type=click.Path(dir_okay=False))
def rules_validate(path):
    """Validate a tax rules YAML file.

    Checks every field against the schema and that each bracket table is
    ascending and ends in a bracket with no upper bound.

    Example:
        takehome rules validate ~/my-2026-rules.yaml
    """
    try:
        validated = load_rules_file(path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    click.echo(
        f"OK: {path} (federal {validated.federal.year}, "
        f"{validated.regional.name} {validated.regional.year})"
    )


@rules.command("years")
def rules_years():
    """List packaged reference years."""
    for year in get_available_years():
        click.echo(year)
