"""
Unit Tests for Static Configuration
===================================

Test Coverage
-------------
- Defaults and environment overrides
- Fallback to defaults for invalid values
- Production validation of the date-time layout
"""

import pytest

from eosvalidate.core.config import RFC3339, Config, Environment
from eosvalidate.core.exceptions import ConfigurationError


@pytest.mark.unit
class TestEnvironment:
    """Test Environment parsing."""

    def test_known_value(self):
        assert Environment.from_string("Production") is Environment.PRODUCTION

    def test_unknown_value_defaults_to_development(self):
        assert Environment.from_string("moon") is Environment.DEVELOPMENT


@pytest.mark.unit
class TestConfigLoading:
    """Test Config.load() through Config.reset()."""

    def test_defaults(self, config_env):
        for key in (
            "NAMES_LIST_DELIMITER",
            "NAMES_LIST_MAX_COUNT",
            "EXTENDED_NAMES_LIST_MAX_COUNT",
            "DATE_TIME_LAYOUT",
        ):
            config_env.delenv(key, raising=False)
        Config.reset()

        assert Config.NAMES_LIST_DELIMITER == "|"
        assert Config.NAMES_LIST_MAX_COUNT == 10
        assert Config.EXTENDED_NAMES_LIST_MAX_COUNT == 10
        assert Config.DATE_TIME_LAYOUT == RFC3339
        assert Config.is_testing()

    def test_environment_overrides(self, config_env):
        config_env.setenv("NAMES_LIST_DELIMITER", ",")
        config_env.setenv("NAMES_LIST_MAX_COUNT", "25")
        config_env.setenv("DATE_TIME_LAYOUT", "%Y-%m-%d")
        Config.reset()

        assert Config.NAMES_LIST_DELIMITER == ","
        assert Config.NAMES_LIST_MAX_COUNT == 25
        assert Config.DATE_TIME_LAYOUT == "%Y-%m-%d"
        assert Config.get_metrics().env_vars_loaded["NAMES_LIST_MAX_COUNT"] is True

    @pytest.mark.parametrize("raw", ["lots", "0", "1001"])
    def test_invalid_max_count_uses_default(self, config_env, raw):
        config_env.setenv("NAMES_LIST_MAX_COUNT", raw)
        Config.reset()

        assert Config.NAMES_LIST_MAX_COUNT == 10
        assert "NAMES_LIST_MAX_COUNT" in Config.get_metrics().validation_errors

    def test_empty_delimiter_uses_default(self, config_env):
        config_env.setenv("NAMES_LIST_DELIMITER", "")
        Config.reset()

        assert Config.NAMES_LIST_DELIMITER == "|"

    def test_boolean_parsing(self, config_env):
        config_env.setenv("LOG_JSON", "yes")
        config_env.setenv("DEBUG", "maybe")
        Config.reset()

        assert Config.LOG_JSON is True
        assert Config.DEBUG is False

    def test_invalid_log_level_falls_back(self, config_env):
        config_env.setenv("LOG_LEVEL", "LOUD")
        Config.reset()

        assert Config.LOG_LEVEL == "INFO"

    def test_layout_without_directive_falls_back_outside_production(self, config_env):
        config_env.setenv("DATE_TIME_LAYOUT", "2006-01-02")
        Config.reset()

        assert Config.DATE_TIME_LAYOUT == RFC3339

    def test_layout_without_directive_fails_in_production(self, config_env):
        config_env.setenv("ENVIRONMENT", "production")
        config_env.setenv("DATE_TIME_LAYOUT", "2006-01-02")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.reset()

        assert exc_info.value.key == "DATE_TIME_LAYOUT"

    def test_reload_safe_configs(self, config_env):
        config_env.setenv("NAMES_LIST_MAX_COUNT", "3")
        Config.reload_safe_configs()

        assert Config.NAMES_LIST_MAX_COUNT == 3

    def test_summary(self, config_env):
        Config.reset()
        summary = Config.get_config_summary()

        assert summary["environment"] == "testing"
        assert summary["names_list_delimiter"] == Config.NAMES_LIST_DELIMITER
