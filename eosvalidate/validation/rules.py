"""
EOS Field Validation Rules

Purpose
-------
Provide the catalog of field-level rules used to check request inputs against
the formats of an EOS-style chain: names, extended names, block numbers,
transaction IDs, pagination cursors, date-time strings and hexadecimal data.

Every rule has the signature a validation framework expects for a custom rule:

    rule(field, tag, message, value) -> Optional[ValidationError]

- ``field``: name used in the error message.
- ``tag``: the tag the rule is registered under (only used for logging).
- ``message``: custom message configured in the framework; when non-empty it
  replaces the default message of the returned error.
- ``value``: the raw input.

Rules return ``None`` on success and a ``ValidationError`` on failure. They
never raise for bad input and keep no state.

Rule Families
-------------
- Scalar rules: ``eos_block_num_rule``, ``eos_name_rule``,
  ``eos_extended_name_rule``, ``eos_trx_id_rule``, ``cursor_rule``,
  ``hex_rule``.
- Factories: ``eos_names_list_rule_factory``,
  ``eos_extended_names_list_rule_factory`` (delimited string lists) and
  ``date_time_rule_factory`` (strptime layout).
- List rule: ``hex_slice_rule`` (list of hexadecimal strings).
- Deprecated aliases: ``hex_row_rule``, ``hex_rows_rule``.

Observability
-------------
Every failure is logged at debug level with ``field_name``, ``rule_tag``,
``raw_value`` (repr) and ``reason``.
"""

from __future__ import annotations

import base64
import binascii
import re
import warnings
from datetime import datetime
from typing import Any, Callable, Optional

from eosvalidate.core.config.config import RFC3339, RFC3339_MILLI
from eosvalidate.core.exceptions import ValidationError
from eosvalidate.core.logging.logger import get_logger
from eosvalidate.validation import messages

logger = get_logger(__name__)

Rule = Callable[[str, str, str, Any], Optional[ValidationError]]

__all__ = [
    "Rule",
    "RFC3339",
    "RFC3339_MILLI",
    "TRX_ID_LENGTH",
    "MAX_BLOCK_NUM",
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
]

TRX_ID_LENGTH = 64
MAX_BLOCK_NUM = 2**32 - 1

_BLOCK_NUM_RE = re.compile(r"[0-9]+")
_NAME_RE = re.compile(r"[a-z1-5.]{0,13}")
_SYMBOL_RE = re.compile(r"[0-9]{1,2},[A-Z]{1,7}")
_SYMBOL_CODE_RE = re.compile(r"[A-Z]{1,7}")
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})+")
_CURSOR_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")
_RFC3339_RE = re.compile(
    r"(?P<base>[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?P<fraction>\.[0-9]{1,9})?"
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})"
)


def _validation_error(
    field: str,
    tag: str,
    value: Any,
    message: str,
    default_message: str,
) -> ValidationError:
    """
    Centralized helper to log and build a ValidationError.

    All rule failures go through this function so logging and the custom
    message override behave the same everywhere.
    """
    text = message or default_message
    logger.debug(
        "Rule validation failed",
        extra={
            "field_name": field,
            "rule_tag": tag,
            "raw_value": repr(value),
            "reason": text,
        },
    )
    return ValidationError(field, text)


# =========================================================================
# BLOCK NUMBERS
# =========================================================================


def eos_block_num_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """
    Validate a block number given as a decimal string.

    The value must be an unsigned 32-bit integer written with digits only
    (no sign, no whitespace).
    """
    if not isinstance(value, str):
        return _validation_error(
            field, tag, value, message, messages.MUST_BE_STRING.format(field=field)
        )

    if not _BLOCK_NUM_RE.fullmatch(value) or int(value) > MAX_BLOCK_NUM:
        return _validation_error(
            field, tag, value, message, messages.INVALID_BLOCK_NUM.format(field=field)
        )

    return None


# =========================================================================
# NAMES
# =========================================================================


def _is_eos_name(value: str) -> bool:
    return _NAME_RE.fullmatch(value) is not None


def _is_eos_extended_name(value: str) -> bool:
    return (
        _is_eos_name(value)
        or _SYMBOL_RE.fullmatch(value) is not None
        or _SYMBOL_CODE_RE.fullmatch(value) is not None
    )


def _name_rule(
    field: str,
    tag: str,
    message: str,
    value: Any,
    predicate: Callable[[str], bool],
) -> Optional[ValidationError]:
    # Name, AccountName, PermissionName, ... are str subclasses
    if not isinstance(value, str):
        return _validation_error(
            field, tag, value, message, messages.UNKNOWN_NAME_TYPE.format(field=field)
        )

    if not predicate(value):
        return _validation_error(
            field, tag, value, message, messages.INVALID_NAME.format(field=field)
        )

    return None


def eos_name_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """
    Validate an EOS name: at most 13 characters from ``a-z``, ``1-5`` and ``.``.

    The empty string is a valid name.
    """
    return _name_rule(field, tag, message, value, _is_eos_name)


def eos_extended_name_rule(
    field: str, tag: str, message: str, value: Any
) -> Optional[ValidationError]:
    """
    Validate an EOS name, a symbol (``4,EOS``) or a symbol code (``EOS``).
    """
    return _name_rule(field, tag, message, value, _is_eos_extended_name)


def _names_list_rule_factory(delimiter: str, max_count: int, element_rule: Rule) -> Rule:
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if max_count < 1:
        raise ValueError(f"max_count must be at least 1, got {max_count}")

    def rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
        if not isinstance(value, str):
            return _validation_error(
                field, tag, value, message, messages.MUST_BE_STRING.format(field=field)
            )

        elements = value.split(delimiter) if value else []

        if not elements:
            return _validation_error(
                field,
                tag,
                value,
                message,
                messages.MIN_ELEMENTS.format(field=field, count=1, noun=messages.element_noun(1)),
            )

        if len(elements) > max_count:
            return _validation_error(
                field,
                tag,
                value,
                message,
                messages.MAX_ELEMENTS.format(
                    field=field, count=max_count, noun=messages.element_noun(max_count)
                ),
            )

        for index, element in enumerate(elements):
            error = element_rule(messages.element_field(field, index), tag, message, element)
            if error is not None:
                return error

        return None

    return rule


def eos_names_list_rule_factory(delimiter: str, max_count: int) -> Rule:
    """
    Build a rule for a ``delimiter``-separated list of EOS names.

    The list must hold between 1 and ``max_count`` elements; element errors
    name the element as ``field[index]``.

    Raises:
        ValueError: If ``delimiter`` is empty or ``max_count`` is below 1
    """
    return _names_list_rule_factory(delimiter, max_count, eos_name_rule)


def eos_extended_names_list_rule_factory(delimiter: str, max_count: int) -> Rule:
    """Like ``eos_names_list_rule_factory`` but each element may be an extended name."""
    return _names_list_rule_factory(delimiter, max_count, eos_extended_name_rule)


# =========================================================================
# HEXADECIMAL
# =========================================================================


def hex_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """
    Validate a non-empty, even-length hexadecimal string (either case).
    """
    if not isinstance(value, str):
        return _validation_error(
            field, tag, value, message, messages.MUST_BE_STRING.format(field=field)
        )

    if not _HEX_RE.fullmatch(value):
        return _validation_error(
            field, tag, value, message, messages.INVALID_HEX.format(field=field)
        )

    return None


def hex_slice_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """
    Validate a non-empty list (or tuple) of hexadecimal strings.
    """
    if not isinstance(value, (list, tuple)) or not all(isinstance(row, str) for row in value):
        return _validation_error(
            field, tag, value, message, messages.MUST_BE_STRING_ARRAY.format(field=field)
        )

    if not value:
        return _validation_error(
            field,
            tag,
            value,
            message,
            messages.MIN_ELEMENTS.format(field=field, count=1, noun=messages.element_noun(1)),
        )

    for index, row in enumerate(value):
        error = hex_rule(messages.element_field(field, index), tag, message, row)
        if error is not None:
            return error

    return None


def hex_row_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """Deprecated alias of ``hex_rule``."""
    warnings.warn(
        "hex_row_rule is deprecated, use hex_rule instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return hex_rule(field, tag, message, value)


def hex_rows_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """Deprecated alias of ``hex_slice_rule``."""
    warnings.warn(
        "hex_rows_rule is deprecated, use hex_slice_rule instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return hex_slice_rule(field, tag, message, value)


# =========================================================================
# TRANSACTIONS
# =========================================================================


def eos_trx_id_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """
    Validate a transaction ID: 64 hexadecimal characters.

    The hexadecimal check runs first, so a malformed value reports
    "must be a valid hexadecimal" before any length complaint.
    """
    error = hex_rule(field, tag, message, value)
    if error is not None:
        return error

    if len(value) != TRX_ID_LENGTH:
        return _validation_error(
            field,
            tag,
            value,
            message,
            messages.EXACT_LENGTH.format(field=field, length=TRX_ID_LENGTH),
        )

    return None


# =========================================================================
# CURSORS
# =========================================================================


def cursor_rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
    """
    Validate an opaque pagination cursor.

    An empty cursor means "start from the beginning" and is valid. Anything
    else must be padded URL-safe base64 decoding to a non-empty payload.
    """
    if not isinstance(value, str):
        return _validation_error(
            field, tag, value, message, messages.MUST_BE_STRING.format(field=field)
        )

    if value == "":
        return None

    if len(value) % 4 != 0 or not _CURSOR_RE.fullmatch(value):
        return _validation_error(
            field, tag, value, message, messages.INVALID_CURSOR.format(field=field)
        )

    try:
        payload = base64.b64decode(value, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError):
        return _validation_error(
            field, tag, value, message, messages.INVALID_CURSOR.format(field=field)
        )

    if not payload:
        return _validation_error(
            field, tag, value, message, messages.INVALID_CURSOR.format(field=field)
        )

    return None


# =========================================================================
# DATE TIMES
# =========================================================================


def _parse_rfc3339(value: str, fraction_required: bool) -> datetime:
    """
    Parse an RFC 3339 timestamp.

    Fields must be zero-padded and the offset is ``Z`` or ``+HH:MM``.
    Fractional seconds (up to nanoseconds) are accepted, and required when
    ``fraction_required`` is set.

    Raises:
        ValueError: If the value is not an RFC 3339 timestamp
    """
    match = _RFC3339_RE.fullmatch(value)
    if match is None or (fraction_required and match.group("fraction") is None):
        raise ValueError(f"{value!r} is not an RFC 3339 timestamp")

    # strptime checks calendar ranges; %f only takes microseconds
    return datetime.strptime(match.group("base") + match.group("offset"), RFC3339)


def date_time_rule_factory(layout: str) -> Rule:
    """
    Build a rule accepting strings that ``datetime.strptime`` parses with ``layout``.

    ``RFC3339`` and ``RFC3339_MILLI`` are checked strictly against RFC 3339
    rather than through ``strptime`` alone: two-digit fields, optional
    fractional seconds and a ``Z`` or ``+HH:MM`` offset. The layout is quoted
    verbatim in the error message.
    """
    if layout in (RFC3339, RFC3339_MILLI):
        fraction_required = layout == RFC3339_MILLI

        def parse(value: str) -> datetime:
            return _parse_rfc3339(value, fraction_required)

    else:

        def parse(value: str) -> datetime:
            return datetime.strptime(value, layout)

    def rule(field: str, tag: str, message: str, value: Any) -> Optional[ValidationError]:
        if not isinstance(value, str):
            return _validation_error(
                field, tag, value, message, messages.MUST_BE_STRING.format(field=field)
            )

        try:
            parse(value)
        except ValueError:
            return _validation_error(
                field,
                tag,
                value,
                message,
                messages.INVALID_DATE_TIME.format(field=field, layout=layout),
            )

        return None

    return rule
