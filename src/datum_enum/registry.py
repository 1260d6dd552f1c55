"""
This module holds the process-wide Member Cache and the loader that fills it.

Each enumeration type supplies its Definition Map through a `definitions()`
classmethod. The first query against a type calls that supplier exactly once,
validates and normalizes the result, and stores a read-only copy keyed by the
class object. Entries are never refreshed or removed, so every read after the
first one is a plain dictionary lookup without locking.
"""
from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping

from pydantic import TypeAdapter, ValidationError

from .errors import InvalidDefinition, _describe
from .names import canonical_name

LOGGER = logging.getLogger(__name__)

DefinitionMap = Mapping[str, Mapping[str, Any]]

_CACHE: Dict[type, DefinitionMap] = {}
_LOCK = threading.RLock()
_RECORD_ADAPTER: TypeAdapter[Dict[str, Any]] = TypeAdapter(Dict[str, Any])


def _normalize_key(enum_cls: type, key: Any) -> str:
    if key is None:
        raise InvalidDefinition(enum_cls, "member name cannot be None")
    if isinstance(key, str) and not key:
        raise InvalidDefinition(enum_cls, "member name cannot be an empty string")
    name = canonical_name(key)
    if name is None:
        raise InvalidDefinition(
            enum_cls,
            f"member name {_describe(key)} of type {type(key).__name__} is not a usable name",
        )
    return name


def _reserved_fields(enum_cls: type) -> FrozenSet[str]:
    # "name" is allowed; the member name always wins over it
    return frozenset(
        attr for attr in dir(enum_cls) if not attr.startswith("_") and attr != "name"
    )


def _freeze_record(
    enum_cls: type, name: str, record: Any, reserved: FrozenSet[str]
) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise InvalidDefinition(
            enum_cls,
            f"data for member {name!r} must be a mapping, got {type(record).__name__}",
        )
    try:
        validated = _RECORD_ADAPTER.validate_python(record)
    except ValidationError as exc:
        raise InvalidDefinition(
            enum_cls, f"data for member {name!r} must have string field names ({exc.error_count()} errors)"
        ) from exc
    clashes = sorted(reserved.intersection(validated))
    if clashes:
        raise InvalidDefinition(
            enum_cls,
            f"data for member {name!r} uses field names reserved by the enum class: {clashes}",
        )
    return MappingProxyType(validated)


def _build(enum_cls: type, raw: Any) -> DefinitionMap:
    if not isinstance(raw, Mapping):
        raise InvalidDefinition(
            enum_cls, f"definitions() must return a mapping, got {type(raw).__name__}"
        )
    reserved = _reserved_fields(enum_cls)
    members: Dict[str, Mapping[str, Any]] = {}
    for key, record in raw.items():
        name = _normalize_key(enum_cls, key)
        if name in members:
            raise InvalidDefinition(enum_cls, f"member name {name!r} is defined more than once")
        members[name] = _freeze_record(enum_cls, name, record, reserved)
    return MappingProxyType(members)


def ensure_loaded(enum_cls: type) -> None:
    """
    Populates the cache entry for an enumeration type if it is not present.

    The type's `definitions()` supplier is invoked at most once per successful
    load. When validation fails nothing is stored and the error propagates, so
    a later call re-runs the supplier and fails the same way.

    Args:
        enum_cls: The enumeration class to load.

    Raises:
        InvalidDefinition: If the Definition Map is malformed.
    """
    if enum_cls in _CACHE:
        return
    with _LOCK:
        if enum_cls in _CACHE:
            return
        definitions = _build(enum_cls, enum_cls.definitions())
        _CACHE[enum_cls] = definitions
        LOGGER.debug(
            "Loaded enum %s with %d members", enum_cls.__qualname__, len(definitions)
        )


def is_loaded(enum_cls: type) -> bool:
    """Returns True when the type's Definition Map is already cached."""
    return enum_cls in _CACHE


def definition_of(enum_cls: type) -> DefinitionMap:
    """
    Returns the read-only Definition Map for an enumeration type.

    Args:
        enum_cls: The enumeration class.

    Returns:
        A mapping from canonical member name to its read-only data record.
    """
    ensure_loaded(enum_cls)
    return _CACHE[enum_cls]


def record_of(enum_cls: type, name: str) -> Mapping[str, Any]:
    """Returns the data record of one member; raises KeyError when absent."""
    return definition_of(enum_cls)[name]


__all__ = [
    "DefinitionMap",
    "ensure_loaded",
    "is_loaded",
    "definition_of",
    "record_of",
]
