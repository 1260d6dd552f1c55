"""
Exception types raised by datum_enum.

Every error derives from `EnumError` so callers can catch the whole family in
one place. Each concrete error also derives from the builtin exception that
best matches its meaning (`ValueError`, `LookupError`, `AttributeError`,
`IndexError`), which keeps the usual Python idioms such as `hasattr` and
`except LookupError` working as expected.
"""
from __future__ import annotations

from typing import Any, Optional


def _describe(value: Any) -> str:
    try:
        return repr(value)
    except ValueError:
        # ints past the int-to-str digit limit
        return f"<{type(value).__name__} too large to display>"


class EnumError(RuntimeError):
    """Base class for all datum_enum errors."""


class InvalidDefinition(EnumError, ValueError):
    """
    Raised when an enumeration type supplies an unusable Definition Map.

    This is raised on first use of the misconfigured type and is raised again,
    identically, on every later use since nothing is cached for it.
    """

    def __init__(self, enum_cls: type, reason: str):
        self.enum_cls = enum_cls
        self.reason = reason
        super().__init__(f"Invalid definition for enum {enum_cls.__qualname__}: {reason}")


class UnknownMember(EnumError, LookupError):
    """Raised when a lookup by name finds no matching member."""

    def __init__(self, enum_cls: type, name: Any):
        self.enum_cls = enum_cls
        self.name = name
        super().__init__(f"Enum {enum_cls.__qualname__} has no member {_describe(name)}")


class ImmutableField(EnumError, AttributeError):
    """Raised on any attempt to set or remove data on a member."""

    def __init__(self, member: Any, field: str, action: str = "set"):
        self.field = field
        self.action = action
        verb = "remove" if action == "delete" else "set"
        super().__init__(f"Cannot {verb} field {field!r} on enum member {member!r}")


class EmptyEnum(EnumError, IndexError):
    """Raised when a random member is requested from an enum with no members."""

    def __init__(self, enum_cls: type, detail: Optional[str] = None):
        self.enum_cls = enum_cls
        message = f"Enum {enum_cls.__qualname__} has no members"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = [
    "EnumError",
    "InvalidDefinition",
    "UnknownMember",
    "ImmutableField",
    "EmptyEnum",
]
