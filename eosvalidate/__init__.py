"""
eosvalidate - field validation rules for EOS-style chain inputs.

Checks names, extended names, block numbers, transaction IDs, pagination
cursors, date-time strings and hexadecimal payloads. Every rule is a pure
function returning ``None`` or a ``ValidationError``.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("eosvalidate")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

from eosvalidate.core.exceptions import RuleNotFoundError, ValidationError
from eosvalidate.validation import (
    DEPRECATED_TAGS,
    RFC3339,
    RFC3339_MILLI,
    RULE_TAGS,
    AccountName,
    ActionName,
    Name,
    PermissionName,
    Rule,
    ScopeName,
    TableName,
    build_rules,
    check,
    cursor_rule,
    date_time_rule_factory,
    eos_block_num_rule,
    eos_extended_name_rule,
    eos_extended_names_list_rule_factory,
    eos_name_rule,
    eos_names_list_rule_factory,
    eos_trx_id_rule,
    get_rule,
    hex_row_rule,
    hex_rows_rule,
    hex_rule,
    hex_slice_rule,
    iter_tags,
    register_rules,
    validate,
)

__all__ = [
    "__version__",
    "Rule",
    "RFC3339",
    "RFC3339_MILLI",
    "RULE_TAGS",
    "DEPRECATED_TAGS",
    "ValidationError",
    "RuleNotFoundError",
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
