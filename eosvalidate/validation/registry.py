"""
Rule registry: tag names for the rule catalog.

A validation framework refers to rules by tag (``"eos_name"``,
``"hex_slice"``, ...). This module builds the tag -> rule mapping, with the
list and date-time factories parameterized from ``Config`` unless told
otherwise, and offers small helpers for callers that do not run a framework.

Usage
-----
    from eosvalidate.validation.registry import register_rules, check

    register_rules(framework.add_custom_rule)

    check("eos_name", "account", "eosio.token")   # raises ValidationError
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from eosvalidate.core.config.config import Config
from eosvalidate.core.exceptions import RuleNotFoundError, ValidationError
from eosvalidate.core.logging.logger import get_logger
from eosvalidate.validation.rules import (
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

logger = get_logger(__name__)

RULE_TAGS = (
    "eos_block_num",
    "eos_name",
    "eos_extended_name",
    "eos_names_list",
    "eos_extended_names_list",
    "eos_trx_id",
    "cursor",
    "date_time",
    "hex",
    "hex_slice",
    "hex_row",
    "hex_rows",
)

DEPRECATED_TAGS = {
    "hex_row": "hex",
    "hex_rows": "hex_slice",
}


def build_rules(
    names_list_delimiter: Optional[str] = None,
    names_list_max_count: Optional[int] = None,
    extended_names_list_max_count: Optional[int] = None,
    date_time_layout: Optional[str] = None,
) -> Dict[str, Rule]:
    """
    Build the tag -> rule mapping.

    Args:
        names_list_delimiter: Separator for both names-list rules
        names_list_max_count: Element limit for ``eos_names_list``
        extended_names_list_max_count: Element limit for ``eos_extended_names_list``
        date_time_layout: strptime layout for ``date_time``

    Any argument left as None is read from ``Config``.
    """
    delimiter = names_list_delimiter if names_list_delimiter is not None else Config.NAMES_LIST_DELIMITER
    names_max = names_list_max_count if names_list_max_count is not None else Config.NAMES_LIST_MAX_COUNT
    extended_max = (
        extended_names_list_max_count
        if extended_names_list_max_count is not None
        else Config.EXTENDED_NAMES_LIST_MAX_COUNT
    )
    layout = date_time_layout if date_time_layout is not None else Config.DATE_TIME_LAYOUT

    return {
        "eos_block_num": eos_block_num_rule,
        "eos_name": eos_name_rule,
        "eos_extended_name": eos_extended_name_rule,
        "eos_names_list": eos_names_list_rule_factory(delimiter, names_max),
        "eos_extended_names_list": eos_extended_names_list_rule_factory(delimiter, extended_max),
        "eos_trx_id": eos_trx_id_rule,
        "cursor": cursor_rule,
        "date_time": date_time_rule_factory(layout),
        "hex": hex_rule,
        "hex_slice": hex_slice_rule,
        "hex_row": hex_row_rule,
        "hex_rows": hex_rows_rule,
    }


def register_rules(
    add_rule: Callable[[str, Rule], Any],
    rules: Optional[Mapping[str, Rule]] = None,
    include_deprecated: bool = True,
) -> List[str]:
    """
    Hand every rule to a framework's registration callback.

    Args:
        add_rule: Called as ``add_rule(tag, rule)`` once per tag
        rules: Mapping to register; defaults to ``build_rules()``
        include_deprecated: Also register ``hex_row`` and ``hex_rows``

    Returns:
        The registered tags, in registration order
    """
    rules = rules if rules is not None else build_rules()

    registered: List[str] = []
    for tag, rule in rules.items():
        if not include_deprecated and tag in DEPRECATED_TAGS:
            continue
        add_rule(tag, rule)
        registered.append(tag)

    logger.debug("Registered validation rules", extra={"tags": registered})
    return registered


def get_rule(tag: str, rules: Optional[Mapping[str, Rule]] = None) -> Rule:
    """
    Look up a rule by tag.

    Raises:
        RuleNotFoundError: If the tag is unknown
    """
    rules = rules if rules is not None else build_rules()
    try:
        return rules[tag]
    except KeyError:
        raise RuleNotFoundError(tag) from None


def check(
    tag: str,
    field: str,
    value: Any,
    message: str = "",
    rules: Optional[Mapping[str, Rule]] = None,
) -> None:
    """
    Run one rule and raise its error.

    Raises:
        RuleNotFoundError: If the tag is unknown
        ValidationError: If the value fails the rule
    """
    error = get_rule(tag, rules)(field, tag, message, value)
    if error is not None:
        raise error


def validate(
    values: Mapping[str, Any],
    schema: Mapping[str, str],
    rules: Optional[Mapping[str, Rule]] = None,
) -> Dict[str, ValidationError]:
    """
    Apply ``schema`` (field -> tag) to ``values`` and collect failures.

    Fields absent from ``values`` are skipped. Tags are resolved before any
    value is checked, so an unknown tag fails the whole call.

    Returns:
        field -> first ValidationError for that field; empty when all pass

    Raises:
        RuleNotFoundError: If the schema names an unknown tag
    """
    rules = rules if rules is not None else build_rules()
    resolved = {field: (tag, get_rule(tag, rules)) for field, tag in schema.items()}

    errors: Dict[str, ValidationError] = {}
    for field, (tag, rule) in resolved.items():
        if field not in values:
            continue
        error = rule(field, tag, "", values[field])
        if error is not None:
            errors[field] = error

    return errors


def iter_tags(include_deprecated: bool = True) -> Iterable[str]:
    for tag in RULE_TAGS:
        if include_deprecated or tag not in DEPRECATED_TAGS:
            yield tag
