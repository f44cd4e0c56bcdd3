"""
Core infrastructure layer for eosvalidate.

Purpose
-------
Provide a single import surface for the infrastructure the rule catalog
relies on:

- Configuration (Config)
- Logging (structured logging, logger factory)
- Exceptions (EosValidateException hierarchy)

Non-Responsibilities
--------------------
- Rule logic (see `eosvalidate.validation`)
"""

from eosvalidate.core.config import Config
from eosvalidate.core.exceptions import (
    ConfigurationError,
    EosValidateException,
    ErrorSeverity,
    RuleNotFoundError,
    ValidationError,
)
from eosvalidate.core.logging import get_logger

__all__ = [
    "Config",
    "get_logger",
    "ConfigurationError",
    "EosValidateException",
    "ErrorSeverity",
    "RuleNotFoundError",
    "ValidationError",
]
