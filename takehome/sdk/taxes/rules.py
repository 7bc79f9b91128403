"""Tax rules loading.

Reference-year constants ship as YAML under takehome/tax_rules/YYYY.yaml.
A rules file is validated against TaxRules on load; any problem (missing
file, bad YAML, malformed bracket table) surfaces as ConfigurationError
before a single year is computed.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from .schemas import FilingStatus, TaxRules

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

DEFAULT_YEAR = "2025"


class ConfigurationError(Exception):
    """Raised when tax rules are missing or malformed."""
    pass


def _get_tax_rules_dir() -> Path:
    """Get the packaged tax_rules directory path."""
    return Path(__file__).parent.parent.parent / "tax_rules"  # taxes -> sdk -> takehome


def get_available_years() -> list[int]:
    """Get sorted list of packaged tax rule years (descending)."""
    years = [int(p.stem) for p in _get_tax_rules_dir().glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def parse_tax_rules(data: dict, source: str = "<data>") -> TaxRules:
    """Validate a raw rules mapping into TaxRules.

    Args:
        data: Mapping as read from a rules YAML file
        source: Description of where the data came from (for error messages)

    Raises:
        ConfigurationError: If the mapping does not satisfy the schema
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Tax rules in {source} must be a mapping, got {type(data).__name__}")

    try:
        return TaxRules.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid tax rules in {source}:\n{e}") from e


def load_rules_file(path: Union[str, Path]) -> TaxRules:
    """Load and validate a tax rules YAML file."""
    rules_file = Path(path).expanduser()
    if not rules_file.exists():
        raise ConfigurationError(f"Tax rules file not found: {rules_file}")

    try:
        with open(rules_file, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse {rules_file}: {e}") from e

    logger.debug(f"loaded tax rules from {rules_file}")
    return parse_tax_rules(data, source=str(rules_file))


@lru_cache(maxsize=None)
def load_tax_rules(year: str = DEFAULT_YEAR) -> TaxRules:
    """Load packaged reference rules for a year from tax_rules/YYYY.yaml.

    Results are cached for the process lifetime; TaxRules is immutable.
    """
    config_file = _get_tax_rules_dir() / f"{year}.yaml"
    if not config_file.exists():
        available = ", ".join(str(y) for y in get_available_years())
        raise ConfigurationError(f"No tax rules for year {year} (available: {available})")
    return load_rules_file(config_file)


def load_plan_configuration(path: Optional[Union[str, Path]] = None) -> TaxRules:
    """Resolve the plan configuration to compute with.

    Resolution order:
    1. Explicit path argument
    2. settings.json 'rules_file' (replaces the packaged defaults in full)
    3. Packaged reference rules for DEFAULT_YEAR
    """
    if path:
        return load_rules_file(path)

    from ..config import resolve_rules_path

    settings_path = resolve_rules_path()
    if settings_path:
        logger.warning(f"Using tax rules from settings: {settings_path}")
        return load_rules_file(settings_path)

    return load_tax_rules(DEFAULT_YEAR)


def with_overrides(
    rules: TaxRules,
    status: FilingStatus,
    federal_standard_deduction: Optional[float] = None,
    regional_standard_deduction: Optional[float] = None,
    deferral_limit: Optional[float] = None,
    catch_up: Optional[float] = None,
) -> TaxRules:
    """Return a copy of rules with individual values replaced.

    Standard deduction overrides apply to the given filing status only.
    The result is re-validated, so bad values raise ConfigurationError.
    """
    data = rules.model_dump(by_alias=True)
    key = FilingStatus(status).value

    if federal_standard_deduction is not None:
        data["federal"][key]["standard_deduction"] = federal_standard_deduction
    if regional_standard_deduction is not None:
        data["regional"][key]["standard_deduction"] = regional_standard_deduction
    if deferral_limit is not None:
        data["401k"]["employee_elective_limit"] = deferral_limit
    if catch_up is not None:
        data["401k"]["catch_up"] = catch_up

    return parse_tax_rules(data, source="overrides")
