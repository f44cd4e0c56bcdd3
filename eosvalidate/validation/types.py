"""
EOS name types.

Thin ``str`` subclasses mirroring the chain's name flavours so callers can
pass typed values to the name rules. They add no behavior of their own; the
rules accept any ``str``.
"""


class Name(str):
    """A base32 EOS name (up to 13 characters of ``a-z1-5.``)."""


class AccountName(Name):
    pass


class PermissionName(Name):
    pass


class ActionName(Name):
    pass


class TableName(Name):
    pass


class ScopeName(Name):
    pass
