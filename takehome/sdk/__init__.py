"""takehome SDK - Core functionality for take-home pay and 401(k) projections."""

from .config import (
    get_config_dir,
    get_settings_path,
    get_profile_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    resolve_rules_path,
    load_profile,
    save_profile,
    get_input_defaults,
    InputDefaults,
    ConfigNotFoundError,
    ProfileValidationError,
    SETTING_KEYS,
    OUTPUT_FORMATS,
)

from .taxes import (
    FilingStatus,
    RateBracket,
    TaxRules,
    PlanConfiguration,
    ConfigurationError,
    load_tax_rules,
    load_rules_file,
    load_plan_configuration,
    with_overrides,
    progressive_tax,
    payroll_tax,
)

from .schemas import (
    YearInputs,
    YearResult,
    PaycheckSnapshot,
    ProjectionInputs,
    ProjectionRow,
    ProjectionResult,
)

from .retirement import clamp_deferral, employer_match

from .paycheck import compute_year, paycheck_snapshot, PAY_PERIODS

from .projection import (
    iter_projection,
    project,
    projection_to_csv_string,
    write_projection_csv,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "get_profile_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "resolve_rules_path",
    "load_profile",
    "save_profile",
    "get_input_defaults",
    "InputDefaults",
    "ConfigNotFoundError",
    "ProfileValidationError",
    "SETTING_KEYS",
    "OUTPUT_FORMATS",
    # Tax rules
    "FilingStatus",
    "RateBracket",
    "TaxRules",
    "PlanConfiguration",
    "ConfigurationError",
    "load_tax_rules",
    "load_rules_file",
    "load_plan_configuration",
    "with_overrides",
    "progressive_tax",
    "payroll_tax",
    # Schemas
    "YearInputs",
    "YearResult",
    "PaycheckSnapshot",
    "ProjectionInputs",
    "ProjectionRow",
    "ProjectionResult",
    # Calculations
    "clamp_deferral",
    "employer_match",
    "compute_year",
    "paycheck_snapshot",
    "PAY_PERIODS",
    "iter_projection",
    "project",
    "projection_to_csv_string",
    "write_projection_csv",
]
