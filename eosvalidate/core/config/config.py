"""
Static configuration management for eosvalidate.

Purpose
-------
Provides centralized static configuration loaded from environment variables
with sensible defaults, type validation, and bounds checking. The values here
parameterize the rule registry (list delimiters, list sizes, date-time layout)
and the logging subsystem.

Responsibilities
----------------
- Load configuration from environment variables with .env support
- Provide type-safe access to all static configuration values
- Validate critical settings
- Track configuration loading metrics

Non-Responsibilities
--------------------
- Rule behavior (handled by `eosvalidate.validation.rules`)
- Logging handler setup (handled by `eosvalidate.core.logging`)

Architecture Notes
------------------
- Singleton pattern via class methods (no instantiation)
- Auto-loads on module import via Config.validate()
- Supports safe reload for all rule defaults
- Metrics track which values came from environment vs defaults

Dependencies
------------
- python-dotenv: Environment variable loading
- logging: Basic logging (bootstrap only)

Environment Variables
---------------------
- ENVIRONMENT: Environment type (default: development)
- DEBUG: Debug mode flag (default: False)
- LOG_LEVEL: Logging level (default: INFO)
- LOG_JSON: Force JSON log output (default: on in production only)
- LOG_COLORS: Colored console output in development (default: True)
- NAMES_LIST_DELIMITER: Separator for `eos_names_list` values (default: "|")
- NAMES_LIST_MAX_COUNT: Max elements for `eos_names_list` (default: 10)
- EXTENDED_NAMES_LIST_MAX_COUNT: Max elements for
  `eos_extended_names_list` (default: 10)
- DATE_TIME_LAYOUT: strptime layout for `date_time` (default: RFC3339)
"""

import logging
import os
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from eosvalidate.core.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

RFC3339 = "%Y-%m-%dT%H:%M:%S%z"
RFC3339_MILLI = "%Y-%m-%dT%H:%M:%S.%f%z"


class Environment(Enum):
    """Deployment environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """
        Parse environment string safely with fallback.

        Example
        -------
        >>> Environment.from_string("production") == Environment.PRODUCTION
        True
        >>> Environment.from_string("invalid") == Environment.DEVELOPMENT
        True
        """
        try:
            return cls(value.lower())
        except ValueError:
            # Structured logger is not configured yet at bootstrap
            logging.warning(f"Unknown environment '{value}', defaulting to development")
            return cls.DEVELOPMENT


class _ConfigLoadMetrics:
    """
    Internal metrics tracker for configuration loading.

    Tracks which configuration values came from environment variables
    versus defaults, and any validation errors encountered.
    """

    def __init__(self):
        self.env_vars_loaded: Dict[str, bool] = {}
        self.validation_errors: Dict[str, str] = {}
        self.defaults_used: Dict[str, Any] = {}
        self.last_reload: Optional[str] = None

    def record_env_load(self, key: str, from_env: bool, value: Any, default: Any):
        """Record whether a config value came from environment."""
        self.env_vars_loaded[key] = from_env
        if not from_env:
            self.defaults_used[key] = default

    def record_validation_error(self, key: str, error: str):
        self.validation_errors[key] = error

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration loading summary."""
        return {
            "total_configs": len(self.env_vars_loaded),
            "from_environment": sum(1 for v in self.env_vars_loaded.values() if v),
            "from_defaults": sum(1 for v in self.env_vars_loaded.values() if not v),
            "validation_errors": len(self.validation_errors),
            "defaults_used": list(self.defaults_used.keys()),
            "last_reload": self.last_reload,
        }


class Config:
    """
    Centralized static configuration for eosvalidate.

    Usage
    -----
    >>> Config.NAMES_LIST_DELIMITER
    '|'
    >>> if Config.is_production():
    ...     logger.info("Running in production mode")
    >>> summary = Config.get_config_summary()
    """

    # =========================================================================
    # Internal State
    # =========================================================================

    _metrics: Optional[_ConfigLoadMetrics] = None
    _enable_metrics: bool = True
    _validated: bool = False

    # =========================================================================
    # Environment Configuration
    # =========================================================================

    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: Optional[bool] = None
    LOG_COLORS: bool = True

    # =========================================================================
    # Rule Defaults
    # =========================================================================

    NAMES_LIST_DELIMITER: str = "|"
    NAMES_LIST_MAX_COUNT: int = 10
    EXTENDED_NAMES_LIST_MAX_COUNT: int = 10
    DATE_TIME_LAYOUT: str = RFC3339

    # =========================================================================
    # Helper Methods
    # =========================================================================

    @classmethod
    def _init_metrics(cls):
        if cls._enable_metrics and cls._metrics is None:
            cls._metrics = _ConfigLoadMetrics()

    @classmethod
    def _safe_int(
        cls,
        key: str,
        default: int,
        min_val: Optional[int] = None,
        max_val: Optional[int] = None,
    ) -> int:
        """
        Safely parse integer from environment with validation.

        Parameters
        ----------
        key:
            Environment variable name.
        default:
            Default value if not set or invalid.
        min_val:
            Minimum allowed value (inclusive).
        max_val:
            Maximum allowed value (inclusive).

        Example
        -------
        >>> Config._safe_int("NAMES_LIST_MAX_COUNT", 10, min_val=1, max_val=1000)
        10
        """
        cls._init_metrics()

        raw_value = os.getenv(key)

        if raw_value is None:
            if cls._metrics:
                cls._metrics.record_env_load(key, False, default, default)
            return default

        try:
            value = int(raw_value)
        except ValueError:
            error = f"{key}='{raw_value}' is not a valid integer, using default {default}"
            logging.warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if min_val is not None and value < min_val:
            error = f"{key}={value} is below minimum {min_val}, using default {default}"
            logging.warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if max_val is not None and value > max_val:
            error = f"{key}={value} exceeds maximum {max_val}, using default {default}"
            logging.warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if cls._metrics:
            cls._metrics.record_env_load(key, True, value, default)

        return value

    @classmethod
    def _safe_bool(cls, key: str, default: Optional[bool]) -> Optional[bool]:
        """
        Safely parse boolean from environment.

        Recognizes: true/false, yes/no, 1/0, on/off (case-insensitive).
        """
        cls._init_metrics()

        raw_value = os.getenv(key)

        if raw_value is None:
            if cls._metrics:
                cls._metrics.record_env_load(key, False, default, default)
            return default

        normalized = raw_value.lower().strip()
        true_values = {"true", "yes", "1", "on"}
        false_values = {"false", "no", "0", "off"}

        if normalized in true_values:
            value = True
        elif normalized in false_values:
            value = False
        else:
            error = f"{key}='{raw_value}' is not a valid boolean, using default {default}"
            logging.warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if cls._metrics:
            cls._metrics.record_env_load(key, True, value, default)

        return value

    @classmethod
    def _safe_str(cls, key: str, default: str, allow_empty: bool = True) -> str:
        """
        Safely get string from environment.

        Parameters
        ----------
        key:
            Environment variable name.
        default:
            Default value if not set.
        allow_empty:
            When False an empty value is rejected and the default is used.
        """
        cls._init_metrics()

        value = os.getenv(key, default)
        from_env = key in os.environ

        if not allow_empty and not value:
            error = f"{key} must not be empty, using default {default!r}"
            logging.warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            value = default
            from_env = False

        if cls._metrics:
            cls._metrics.record_env_load(key, from_env, value, default)

        return value

    # =========================================================================
    # Configuration Loading
    # =========================================================================

    @classmethod
    def load(cls) -> None:
        """
        Load all configuration from environment variables with validation.

        Called automatically on module import; call again after changing the
        environment to pick up new values.
        """
        cls._init_metrics()

        # Environment Configuration
        cls.ENVIRONMENT = cls._safe_str("ENVIRONMENT", "development")
        cls.DEBUG = cls._safe_bool("DEBUG", False)
        cls.LOG_LEVEL = cls._safe_str("LOG_LEVEL", "INFO")
        cls.LOG_JSON = cls._safe_bool("LOG_JSON", None)
        cls.LOG_COLORS = cls._safe_bool("LOG_COLORS", True)

        # Rule Defaults
        cls.NAMES_LIST_DELIMITER = cls._safe_str(
            "NAMES_LIST_DELIMITER", "|", allow_empty=False
        )
        cls.NAMES_LIST_MAX_COUNT = cls._safe_int(
            "NAMES_LIST_MAX_COUNT", 10, min_val=1, max_val=1000
        )
        cls.EXTENDED_NAMES_LIST_MAX_COUNT = cls._safe_int(
            "EXTENDED_NAMES_LIST_MAX_COUNT", 10, min_val=1, max_val=1000
        )
        cls.DATE_TIME_LAYOUT = cls._safe_str("DATE_TIME_LAYOUT", RFC3339, allow_empty=False)

        if cls._metrics:
            cls._metrics.last_reload = datetime.now(timezone.utc).isoformat()

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration values.

        Invalid values are logged and replaced by defaults. In production a
        bad date-time layout is fatal.

        Raises
        ------
        ConfigurationError:
            If DATE_TIME_LAYOUT has no strftime directive in production.
        """
        if cls._validated:
            return

        logger = logging.getLogger(__name__)
        cls.load()

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if cls.LOG_LEVEL.upper() not in valid_log_levels:
            logger.warning(f"Invalid LOG_LEVEL '{cls.LOG_LEVEL}', using INFO")
            cls.LOG_LEVEL = "INFO"

        if "%" not in cls.DATE_TIME_LAYOUT:
            error = f"DATE_TIME_LAYOUT={cls.DATE_TIME_LAYOUT!r} has no strptime directive"
            if cls.is_production():
                raise ConfigurationError("DATE_TIME_LAYOUT", error)
            logger.warning(f"{error}, using RFC3339")
            cls.DATE_TIME_LAYOUT = RFC3339

        if cls.is_production() and cls.DEBUG:
            logger.warning("DEBUG mode enabled in production!")

        cls._validated = True

        if cls._metrics and cls._metrics.validation_errors:
            logger.warning(f"Configuration warnings: {cls._metrics.validation_errors}")

    @classmethod
    def reset(cls) -> None:
        """Forget validation state and metrics, then re-validate."""
        cls._validated = False
        cls._metrics = None
        cls.validate()

    # =========================================================================
    # Environment Checks
    # =========================================================================

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENVIRONMENT.lower() == "development"

    @classmethod
    def is_testing(cls) -> bool:
        return cls.ENVIRONMENT.lower() == "testing"

    # =========================================================================
    # Metrics & Summary
    # =========================================================================

    @classmethod
    def get_metrics(cls) -> Optional[_ConfigLoadMetrics]:
        """Get configuration loading metrics."""
        return cls._metrics

    @classmethod
    def get_config_summary(cls) -> Dict[str, Any]:
        """
        Get configuration summary for debugging.

        Example
        -------
        >>> summary = Config.get_config_summary()
        >>> summary["names_list_delimiter"]
        '|'
        """
        return {
            "environment": cls.ENVIRONMENT,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "names_list_delimiter": cls.NAMES_LIST_DELIMITER,
            "names_list_max_count": cls.NAMES_LIST_MAX_COUNT,
            "extended_names_list_max_count": cls.EXTENDED_NAMES_LIST_MAX_COUNT,
            "date_time_layout": cls.DATE_TIME_LAYOUT,
        }

    @classmethod
    def reload_safe_configs(cls) -> None:
        """
        Reload configuration values that can change at runtime.

        Only the log level, debug flag and rule defaults are reloaded. Rules
        already built by `build_rules()` keep the values they were built with.
        """
        logger = logging.getLogger(__name__)
        logger.info("Reloading safe configuration values...")

        cls.LOG_LEVEL = cls._safe_str("LOG_LEVEL", cls.LOG_LEVEL)
        cls.DEBUG = cls._safe_bool("DEBUG", cls.DEBUG)
        cls.NAMES_LIST_DELIMITER = cls._safe_str(
            "NAMES_LIST_DELIMITER", cls.NAMES_LIST_DELIMITER, allow_empty=False
        )
        cls.NAMES_LIST_MAX_COUNT = cls._safe_int(
            "NAMES_LIST_MAX_COUNT", cls.NAMES_LIST_MAX_COUNT, min_val=1, max_val=1000
        )
        cls.EXTENDED_NAMES_LIST_MAX_COUNT = cls._safe_int(
            "EXTENDED_NAMES_LIST_MAX_COUNT",
            cls.EXTENDED_NAMES_LIST_MAX_COUNT,
            min_val=1,
            max_val=1000,
        )
        cls.DATE_TIME_LAYOUT = cls._safe_str(
            "DATE_TIME_LAYOUT", cls.DATE_TIME_LAYOUT, allow_empty=False
        )

        logger.info("Safe configuration values reloaded successfully")


# Auto-validate on import
Config.validate()
