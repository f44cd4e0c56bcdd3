"""
Exceptions for eosvalidate.

Purpose
-------
Define the structured exception hierarchy shared by the rule catalog, the
rule registry and the CLI.

Design Notes
------------
- All package exceptions inherit from `EosValidateException`.
- Each exception carries:
  - `message`: human-readable description
  - `details`: additional structured context (dict-like)
  - `severity`: `ErrorSeverity` value for logging decisions
  - `error_code`: short, stable identifier for programmatic use
- Rules *return* `ValidationError` instances instead of raising them, so the
  calling framework can aggregate them. `check()` and the CLI raise them.
- `str(ValidationError)` is the bare message ("The amount field must be a
  string") so frameworks can display it unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for logging."""

    DEBUG = "debug"
    INFO = "info"  # Expected (e.g., validation failures)
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class EosValidateException(Exception):
    """
    Base exception for all eosvalidate errors.

    Args:
        message: Human-readable error message
        details: Additional structured data about the error (dict-like)
        severity: Error severity level for logging handlers
        error_code: Optional code for programmatic handling

    Example:
        >>> raise EosValidateException(
        ...     "Rule registration failed",
        ...     {"tag": "eos_name"}
        ... )
    """

    DEFAULT_SEVERITY: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[ErrorSeverity] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message: str = message
        self.details: Dict[str, Any] = details or {}
        self.severity: ErrorSeverity = severity or self.DEFAULT_SEVERITY
        self.error_code: str = error_code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
        }

    def __str__(self) -> str:
        details_str = f" | Details: {self.details}" if self.details else ""
        return f"[{self.error_code}] {self.message}{details_str}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"severity={self.severity.value!r}"
            ")"
        )


class ValidationError(EosValidateException):
    """
    A value failed one of the catalog rules.

    Args:
        field: Name of the field that failed validation. For list rules this
            is the element field, e.g. ``accounts[1]``.
        message: Full, display-ready message.
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(
            message,
            details={"field": field},
            error_code=f"VALIDATION_{field.upper()}",
        )

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.field == other.field and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.field, self.message))


class RuleNotFoundError(EosValidateException):
    """
    Raised when a rule tag is not part of the catalog.

    Args:
        tag: The unknown rule tag
    """

    DEFAULT_SEVERITY = ErrorSeverity.WARNING

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(
            f"Unknown validation rule: {tag}",
            details={"tag": tag},
            error_code="RULE_NOT_FOUND",
        )


class ConfigurationError(EosValidateException):
    """
    Raised when configuration is invalid in a production environment.

    Args:
        key: Configuration key that failed
        reason: Why the value was rejected
    """

    DEFAULT_SEVERITY = ErrorSeverity.CRITICAL

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(
            f"Invalid configuration for {key}: {reason}",
            details={"key": key, "reason": reason},
            error_code=f"CONFIG_{key.upper()}",
        )
