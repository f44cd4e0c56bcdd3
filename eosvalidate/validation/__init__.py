"""
eosvalidate Validation Package

Purpose
-------
Expose the rule catalog and the tag registry.

This package provides:
- Field rules for EOS names, block numbers, transaction IDs, cursors,
  date-time strings and hexadecimal data (`rules`)
- Tag registration and one-shot checking helpers (`registry`)
- EOS name string types (`types`)

Design Notes
------------
- Re-exports are explicit via __all__ to keep the public API intentional.
- Package is stateless; every rule is a pure function.
"""

from eosvalidate.validation.registry import (
    DEPRECATED_TAGS,
    RULE_TAGS,
    build_rules,
    check,
    get_rule,
    iter_tags,
    register_rules,
    validate,
)
from eosvalidate.validation.rules import (
    RFC3339,
    RFC3339_MILLI,
    Rule,
    cursor_rule,
    date_time_rule_factory,
    eos_block_num_rule,
    eos_extended_name_rule,
    eos_extended_names_list_rule_factory,
    eos_name_rule,
    eos_names_list_rule_factory,
    eos_trx_id_rule,
    hex_row_rule,
    hex_rows_rule,
    hex_rule,
    hex_slice_rule,
)
from eosvalidate.validation.types import (
    AccountName,
    ActionName,
    Name,
    PermissionName,
    ScopeName,
    TableName,
)

__all__ = [
    "Rule",
    "RFC3339",
    "RFC3339_MILLI",
    "RULE_TAGS",
    "DEPRECATED_TAGS",
    "build_rules",
    "register_rules",
    "get_rule",
    "check",
    "validate",
    "iter_tags",
    "eos_block_num_rule",
    "eos_name_rule",
    "eos_extended_name_rule",
    "eos_names_list_rule_factory",
    "eos_extended_names_list_rule_factory",
    "eos_trx_id_rule",
    "cursor_rule",
    "date_time_rule_factory",
    "hex_rule",
    "hex_slice_rule",
    "hex_row_rule",
    "hex_rows_rule",
    "Name",
    "AccountName",
    "PermissionName",
    "ActionName",
    "TableName",
    "ScopeName",
]
