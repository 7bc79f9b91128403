"""Unit tests for settings.json and profile.yaml handling."""

import json

import pytest

from takehome.sdk import (
    ConfigNotFoundError,
    FilingStatus,
    ProfileValidationError,
    get_config_dir,
    get_input_defaults,
    get_setting,
    load_plan_configuration,
    load_tax_rules,
    resolve_rules_path,
    save_profile,
    set_setting,
    unset_setting,
)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point TAKEHOME_CONFIG_PATH at an empty temp directory."""
    path = tmp_path / "config"
    monkeypatch.setenv("TAKEHOME_CONFIG_PATH", str(path))
    return path


class TestConfigDir:

    def test_env_var_wins(self, config_dir):
        assert get_config_dir() == config_dir

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("TAKEHOME_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "takehome"


class TestSettings:

    def test_missing_settings_default(self, config_dir):
        assert get_setting("default_output_format", "text") == "text"

    def test_set_and_get(self, config_dir):
        path = set_setting("default_output_format", "json")

        assert get_setting("default_output_format") == "json"
        assert json.loads(path.read_text()) == {"default_output_format": "json"}

    def test_unknown_key(self, config_dir):
        with pytest.raises(KeyError):
            set_setting("colour", "blue")

    def test_bad_output_format(self, config_dir):
        with pytest.raises(ValueError, match="default_output_format"):
            set_setting("default_output_format", "xml")

    def test_unset(self, config_dir):
        set_setting("default_output_format", "csv")

        assert unset_setting("default_output_format") is True
        assert unset_setting("default_output_format") is False
        assert get_setting("default_output_format") is None


class TestRulesFileSetting:

    def test_not_configured(self, config_dir):
        assert resolve_rules_path() is None

    def test_configured_missing_file(self, config_dir, tmp_path):
        set_setting("rules_file", str(tmp_path / "gone.yaml"))
        with pytest.raises(ConfigNotFoundError, match="gone.yaml"):
            resolve_rules_path()

    def test_configured_file_replaces_packaged_rules(self, config_dir, tmp_path):
        import yaml

        data = load_tax_rules("2025").model_dump(by_alias=True)
        data["regional"]["name"] = "Elsewhere"
        rules_path = tmp_path / "custom.yaml"
        rules_path.write_text(yaml.dump(data))
        set_setting("rules_file", str(rules_path))

        assert load_plan_configuration().regional.name == "Elsewhere"


class TestInputDefaults:

    def test_built_in_defaults(self, config_dir):
        defaults = get_input_defaults()

        assert defaults.salary == 100000
        assert defaults.filing_status == FilingStatus.MFJ
        assert defaults.employee_deferral_rate == 0.06
        assert defaults.number_of_years == 10

    def test_profile_overrides(self, config_dir):
        save_profile({"inputs": {"salary": 150000, "filing_status": "single", "pay_frequency": "monthly"}})
        defaults = get_input_defaults()

        assert defaults.salary == 150000
        assert defaults.filing_status == FilingStatus.SINGLE
        assert defaults.pay_frequency == "monthly"
        assert defaults.discount_rate == 0.04

    def test_invalid_profile(self, config_dir):
        save_profile({"inputs": {"salary": -5}})
        with pytest.raises(ProfileValidationError, match="profile.yaml"):
            get_input_defaults()

    def test_unknown_profile_key(self, config_dir):
        save_profile({"inputs": {"bonus": 1000}})
        with pytest.raises(ProfileValidationError):
            get_input_defaults()

    def test_unparseable_profile(self, config_dir):
        config_dir.mkdir()
        (config_dir / "profile.yaml").write_text("inputs: [unclosed\n")
        with pytest.raises(ProfileValidationError, match="Could not parse"):
            get_input_defaults()

    def test_profile_not_a_mapping(self, config_dir):
        config_dir.mkdir()
        (config_dir / "profile.yaml").write_text("- salary\n")
        with pytest.raises(ProfileValidationError, match="must be a mapping"):
            get_input_defaults()

    def test_inputs_not_a_mapping(self, config_dir):
        save_profile({"inputs": [100000]})
        with pytest.raises(ProfileValidationError, match="'inputs'"):
            get_input_defaults()
