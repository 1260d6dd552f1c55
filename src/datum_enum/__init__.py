"""
datum_enum provides closed sets of named, immutable constants that carry
structured data.

Each enumeration is a `DataEnum` subclass whose `definitions()` classmethod
returns an ordered mapping from member name to the member's associated data.
The package takes care of loading and validating those definitions once per
class, building member values on demand, comparing them by class and name,
and converting them to and from their durable string form. Members can also be
used directly as field types on Pydantic models.
"""
from .enum import DataEnum, DataEnumMeta
from .errors import (
    EmptyEnum,
    EnumError,
    ImmutableField,
    InvalidDefinition,
    UnknownMember,
)
from .config import EnumSettings, get_settings
from .logging_utils import configure_logging
from .names import canonical_name

__all__ = [
    "DataEnum",
    "DataEnumMeta",
    "EnumError",
    "InvalidDefinition",
    "UnknownMember",
    "ImmutableField",
    "EmptyEnum",
    "EnumSettings",
    "get_settings",
    "configure_logging",
    "canonical_name",
]

__version__ = "0.1.0"
