"""
Pytest Configuration and Fixtures for eosvalidate Tests
=======================================================

Purpose
-------
Centralized test fixtures and configuration for the eosvalidate test suite.

Responsibilities
----------------
- Force a testing environment with debug logging
- Provide a config fixture that reloads `Config` from a patched environment
- Provide a helper for calling rules the way a framework does
"""

from __future__ import annotations

import os
from typing import Any, Generator, Optional

import pytest

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Configure pytest environment."""
    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_LEVEL"] = "DEBUG"


# ============================================================================
# CONFIG FIXTURES
# ============================================================================


@pytest.fixture
def config_env(monkeypatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """
    Patch environment variables, then call `Config.reset()` to apply them.

    The original configuration is restored after the test.
    """
    from eosvalidate.core.config import Config

    yield monkeypatch

    monkeypatch.undo()
    Config.reset()


# ============================================================================
# RULE HELPERS
# ============================================================================


@pytest.fixture
def run_rule():
    """Invoke a rule like a framework would and return the error message or None."""

    def _run(
        rule, value: Any, field: str = "test", tag: str = "test_rule", message: str = ""
    ) -> Optional[str]:
        error = rule(field, tag, message, value)
        return None if error is None else str(error)

    return _run
