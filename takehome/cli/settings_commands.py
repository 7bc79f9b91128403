"""Settings CLI commands for takehome.

Manages settings.json (rules file, output format) and profile.yaml
(default planner inputs).
"""

import click
import yaml

from takehome.sdk import (
    InputDefaults,
    ProfileValidationError,
    SETTING_KEYS,
    get_config_dir,
    get_input_defaults,
    get_profile_path,
    get_settings_path,
    load_settings,
    save_profile,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json) and profile (profile.yaml).

    Available settings:
    - rules_file: path to a tax rules YAML replacing the packaged defaults
    - default_output_format: text, json or csv
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and effective planner inputs."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Config directory: {get_config_dir()}")
    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    profile_path = get_profile_path()
    source = str(profile_path) if profile_path.exists() else "built-in defaults"
    try:
        defaults = get_input_defaults()
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    click.echo(f"Planner inputs ({source}):")
    for key, value in defaults.model_dump(mode="json").items():
        click.echo(f"  {key}: {value}")


@settings.command("set")
@click.argument("key", type=click.Choice(list(SETTING_KEYS)))
@click.argument("value")
def settings_set(key, value):
    """Set a setting value.

    Examples:
        takehome settings set rules_file ~/rules/2026.yaml
        takehome settings set default_output_format json
    """
    try:
        saved_to = set_setting(key, value)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}")
    click.echo(f"Saved to: {saved_to}")


@settings.command("unset")
@click.argument("key", type=click.Choice(list(SETTING_KEYS)))
def settings_unset(key):
    """Clear a setting, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key}.")
    else:
        click.echo(f"{key} was not set.")


@settings.command("init-profile")
@click.option("--force", is_flag=True, help="Overwrite an existing profile.yaml")
def settings_init_profile(force):
    """Write profile.yaml with the built-in planner inputs for editing."""
    profile_path = get_profile_path()
    if profile_path.exists() and not force:
        raise click.ClickException(f"Profile already exists: {profile_path} (use --force to overwrite)")

    path = save_profile({"inputs": InputDefaults().model_dump(mode="json")})
    click.echo(f"Wrote {path}")
    click.echo(yaml.dump({"inputs": InputDefaults().model_dump(mode="json")},
                         default_flow_style=False, sort_keys=False), nl=False)
