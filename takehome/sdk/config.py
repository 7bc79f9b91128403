"""Configuration management for takehome.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - rules_file: path to a replacement tax rules YAML (optional)
   - default_output_format: text, json or csv

2. profile.yaml - The user's usual planner inputs
   - inputs: salary, filing status, 401(k) election, match terms,
     pay frequency and projection assumptions
   Any input given on the command line wins over the profile.

Config directory resolution:
1. TAKEHOME_CONFIG_PATH environment variable (if set)
2. ~/.config/takehome/ (XDG_CONFIG_HOME fallback)
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .schemas import PayFrequency
from .taxes.schemas import FilingStatus


APP_NAME = "takehome"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"

SETTING_KEYS = ("rules_file", "default_output_format")
OUTPUT_FORMATS = ("text", "json", "csv")


class ConfigNotFoundError(Exception):
    """Raised when a configured file does not exist."""
    pass


class ProfileValidationError(Exception):
    """Raised when profile.yaml does not match the expected schema."""
    pass


class InputDefaults(BaseModel):
    """Planner inputs used when an option is not given on the command line."""

    model_config = ConfigDict(extra="forbid")

    salary: float = Field(default=100000, ge=0)
    filing_status: FilingStatus = FilingStatus.MFJ
    pay_frequency: PayFrequency = "weekly"
    employee_deferral_rate: float = Field(default=0.06, ge=0)
    employer_match_rate_per_dollar: float = Field(default=0.5, ge=0)
    employer_match_ceiling_rate: float = Field(default=0.06, ge=0)
    number_of_years: int = Field(default=10, ge=0)
    annual_raise_rate: float = Field(default=0.03, ge=0)
    investment_return_rate: float = Field(default=0.07, ge=0)
    discount_rate: float = Field(default=0.04, ge=0)


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. TAKEHOME_CONFIG_PATH environment variable
    2. ~/.config/takehome/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("TAKEHOME_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def get_profile_path() -> Path:
    """Get the path to profile.yaml (may not exist yet)."""
    return get_config_dir() / PROFILE_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Raises:
        KeyError: If key is not a recognised setting
        ValueError: If the value is not valid for the key
    """
    if key not in SETTING_KEYS:
        raise KeyError(f"Unknown setting '{key}' (expected one of: {', '.join(SETTING_KEYS)})")
    if key == "default_output_format" and value not in OUTPUT_FORMATS:
        raise ValueError(f"default_output_format must be one of: {', '.join(OUTPUT_FORMATS)}")
    if key == "rules_file":
        value = str(Path(value).expanduser().resolve())

    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def resolve_rules_path() -> Optional[Path]:
    """Rules file configured in settings.json, if any.

    Raises:
        ConfigNotFoundError: If the setting points at a missing file
    """
    rules_file = get_setting("rules_file")
    if not rules_file:
        return None

    path = Path(rules_file)
    if not path.exists():
        raise ConfigNotFoundError(
            f"Tax rules file not found at configured path: {path}\n\n"
            f"Update with: takehome settings set rules_file /path/to/rules.yaml\n"
            f"Or clear with: takehome settings unset rules_file"
        )
    return path


def load_profile() -> dict:
    """Load profile.yaml (empty dict if it doesn't exist).

    Raises:
        ProfileValidationError: If the file is not valid YAML or not a mapping
    """
    profile_path = get_profile_path()

    if not profile_path.exists():
        return {}

    try:
        with open(profile_path, "r") as f:
            profile = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProfileValidationError(f"Could not parse {profile_path}: {e}") from e

    if not isinstance(profile, dict):
        raise ProfileValidationError(
            f"{profile_path} must be a mapping, got {type(profile).__name__}"
        )
    return profile


def save_profile(profile: dict) -> Path:
    """Save profile.yaml, creating the config directory if needed."""
    path = get_profile_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def get_input_defaults() -> InputDefaults:
    """Built-in planner defaults merged with profile.yaml 'inputs'.

    Raises:
        ProfileValidationError: If the profile's inputs section is invalid
    """
    inputs = load_profile().get("inputs") or {}
    if not isinstance(inputs, dict):
        raise ProfileValidationError(
            f"'inputs' in {get_profile_path()} must be a mapping, got {type(inputs).__name__}"
        )
    try:
        return InputDefaults.model_validate(inputs)
    except ValidationError as e:
        raise ProfileValidationError(f"Invalid inputs in {get_profile_path()}:\n{e}") from e
