"""
Message templates for the rule catalog.

Every template is formatted with ``field`` (the possibly indexed field name)
and, where noted, one extra keyword.
"""

MUST_BE_STRING = "The {field} field must be a string"
MUST_BE_STRING_ARRAY = "The {field} field must be a string array"
UNKNOWN_NAME_TYPE = "The {field} field is not a known type for an EOS name"

INVALID_BLOCK_NUM = "The {field} field must be a valid EOS block num"
INVALID_NAME = "The {field} field must be a valid EOS name"
INVALID_HEX = "The {field} field must be a valid hexadecimal"
INVALID_CURSOR = "The {field} field is not a valid cursor"
INVALID_DATE_TIME = (
    "The {field} field is not a valid date time string according to layout {layout}"
)

EXACT_LENGTH = "The {field} field must have exactly {length} characters"
MIN_ELEMENTS = "The {field} field must have at least {count} {noun}"
MAX_ELEMENTS = "The {field} field must have at most {count} {noun}"


def element_noun(count: int) -> str:
    return "element" if count == 1 else "elements"


def element_field(field: str, index: int) -> str:
    """Field name used for the element at ``index`` of a list value."""
    return f"{field}[{index}]"
