"""
This module defines `DataEnum`, the base class for closed sets of named,
immutable, data-bearing members.

An enumeration type is declared by subclassing `DataEnum` and implementing the
`definitions()` classmethod, which returns an ordered mapping from member name
to that member's associated data::

    class Fruit(DataEnum):
        @classmethod
        def definitions(cls):
            return {
                "apple": {"type": "Orchard"},
                "raspberry": {"type": "Bramble"},
            }

    Fruit.apple.type            # "Orchard"
    Fruit.named("raspberry")    # <Fruit.raspberry>
    Fruit.name_of("pear")       # None

Members are lightweight handles that only store their name. Associated data is
read from the shared cache in `datum_enum.registry`, so two members of the same
class with the same name are equal regardless of how they were obtained, and
members of different classes are never equal.
"""
from __future__ import annotations

import json
import random
from functools import lru_cache
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Type, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from . import registry
from .config import get_settings
from .errors import EmptyEnum, ImmutableField, UnknownMember, _describe
from .names import canonical_name

E = TypeVar("E", bound="DataEnum")


@lru_cache(maxsize=1)
def _shared_random() -> random.Random:
    return random.Random(get_settings().random_seed)


def _restore_member(enum_cls: Type[E], name: str) -> E:
    """Rebuilds a member after unpickling, re-validating its name."""
    return enum_cls.named(name)


class DataEnumMeta(type):
    """
    Metaclass giving enumeration classes lookup and container behavior.

    ``Fruit.apple``, ``Fruit["apple"]`` and ``Fruit("apple")`` all resolve to the
    member named ``apple``. Iterating the class yields its members in
    definition order.
    """

    def __call__(cls, name: Any) -> Any:
        return cls.named(name)

    def __getattr__(cls, attr: str) -> Any:
        if attr.startswith("_"):
            raise AttributeError(f"type object {cls.__qualname__!r} has no attribute {attr!r}")
        if getattr(cls.definitions, "__func__", None) is DataEnum.definitions.__func__:
            raise AttributeError(f"type object {cls.__qualname__!r} has no attribute {attr!r}")
        definitions = registry.definition_of(cls)
        if attr in definitions:
            return cls._construct(attr)
        raise AttributeError(
            f"type object {cls.__qualname__!r} has no attribute or member {attr!r}"
        )

    def __getitem__(cls, name: Any) -> Any:
        return cls.named(name)

    def __iter__(cls) -> Iterator[Any]:
        return iter(cls.members().values())

    def __len__(cls) -> int:
        return len(registry.definition_of(cls))

    def __bool__(cls) -> bool:
        return True

    def __contains__(cls, value: Any) -> bool:
        if type(value) is cls:
            return True
        return cls.has(value)


class DataEnum(metaclass=DataEnumMeta):
    """
    Base class for enumerations whose members carry associated data.

    Subclasses implement `definitions()`. Instances are never created directly;
    every way of obtaining a member validates its name against the cached
    Definition Map first.
    """

    __slots__ = ("_name",)

    @classmethod
    def definitions(cls) -> Mapping[Any, Mapping[str, Any]]:
        """
        Returns the Definition Map for this enumeration.

        Keys are member names (strings, or integers/floats which are converted
        to their canonical string form). Values are mappings holding each
        member's associated data. Called once per class, on first use.

        Subclasses must override this; the base implementation raises
        NotImplementedError.
        """
        raise NotImplementedError(f"{cls.__qualname__} must implement definitions()")

    @classmethod
    def _construct(cls: Type[E], name: str) -> E:
        member = object.__new__(cls)
        object.__setattr__(member, "_name", name)
        return member

    # Lookup / query API

    @classmethod
    def names(cls) -> List[str]:
        """Returns the member names in definition order."""
        return list(registry.definition_of(cls))

    @classmethod
    def members(cls: Type[E]) -> Dict[str, E]:
        """
        Returns every member of this enumeration.

        Returns:
            A dict keyed by member name, in definition order.
        """
        return {name: cls._construct(name) for name in cls.names()}

    @classmethod
    def subset(cls: Type[E], predicate: Callable[[E], Any]) -> Dict[str, E]:
        """
        Returns the members for which `predicate` returns a truthy value.

        The predicate is called once per member in definition order. Surviving
        entries keep their original keys and relative order.
        """
        return {name: member for name, member in cls.members().items() if predicate(member)}

    @classmethod
    def has(cls, name: Any) -> bool:
        """
        Tests whether this enumeration has a member with the given name.

        Integers and floats are converted to their canonical string form first.
        None, booleans and other non name-like values are never members.
        """
        definitions = registry.definition_of(cls)
        canonical = canonical_name(name)
        return canonical is not None and canonical in definitions

    @classmethod
    def named(cls: Type[E], name: Any) -> E:
        """
        Returns the member with the given name.

        Raises:
            UnknownMember: If this enumeration has no such member.
        """
        member = cls.maybe_named(name)
        if member is None:
            raise UnknownMember(cls, name)
        return member

    @classmethod
    def maybe_named(cls: Type[E], name: Any) -> Optional[E]:
        """Like `named`, but returns None instead of raising."""
        if not cls.has(name):
            return None
        return cls._construct(canonical_name(name))

    @classmethod
    def name_of(cls, value: Any) -> Optional[str]:
        """
        Normalizes any acceptable representation of a member to its name.

        This can be used to prepare a value for storage. A member of this class
        yields its name; a string or number naming one of the members yields
        the canonical name. Anything else, including members of a different
        enumeration, yields None.
        """
        if type(value) is cls:
            return value._name
        canonical = canonical_name(value)
        if canonical is not None and cls.has(canonical):
            return canonical
        return None

    @classmethod
    def random_member(cls: Type[E], rng: Optional[random.Random] = None) -> E:
        """
        Picks a member uniformly at random.

        Args:
            rng: Generator to draw from. Defaults to a shared generator seeded
                 from ``DATUM_ENUM_RANDOM_SEED`` when that is set.

        Raises:
            EmptyEnum: If the enumeration defines no members.
        """
        names = cls.names()
        if not names:
            raise EmptyEnum(cls, "cannot pick a random member")
        generator = rng if rng is not None else _shared_random()
        return cls._construct(generator.choice(names))

    @classmethod
    def deserialize(cls: Type[E], name: str) -> E:
        """
        Restores a member from its durable string form.

        Raises:
            UnknownMember: If the name is not (or no longer) a member.
        """
        return cls.named(name)

    # Member value

    @property
    def name(self) -> str:
        return self._name

    @property
    def data(self) -> Mapping[str, Any]:
        """Read-only view of the member's associated data."""
        return registry.record_of(type(self), self._name)

    def get(self, field: str, default: Any = None) -> Any:
        if field == "name":
            return self._name
        return self.data.get(field, default)

    def serialize(self) -> str:
        """Returns the durable form of the member, which is its name."""
        return self._name

    def to_dict(self) -> Dict[str, Any]:
        """
        Exports the member as a dict with ``name`` first, followed by its data
        fields in definition order.
        """
        exported: Dict[str, Any] = {"name": self._name}
        for field, value in self.data.items():
            if field != "name":
                exported[field] = value
        return exported

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def __getattr__(self, field: str) -> Any:
        if field.startswith("_"):
            raise AttributeError(
                f"{type(self).__qualname__!r} object has no attribute {field!r}"
            )
        try:
            return self.data[field]
        except KeyError:
            raise AttributeError(
                f"{type(self).__qualname__} member {self._name!r} has no field {field!r}"
            ) from None

    def __getitem__(self, field: str) -> Any:
        if field == "name":
            return self._name
        return self.data[field]

    def __contains__(self, field: object) -> bool:
        return field == "name" or field in self.data

    def __setattr__(self, field: str, value: Any) -> None:
        raise ImmutableField(self, field)

    def __delattr__(self, field: str) -> None:
        raise ImmutableField(self, field, action="delete")

    def __setitem__(self, field: str, value: Any) -> None:
        raise ImmutableField(self, field)

    def __delitem__(self, field: str) -> None:
        raise ImmutableField(self, field, action="delete")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash((type(self), self._name))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__}.{self._name}>"

    def __reduce__(self):
        return (_restore_member, (type(self), self._name))

    def __copy__(self):
        return type(self)._construct(self._name)

    def __deepcopy__(self, memo: Dict[int, Any]):
        return type(self)._construct(self._name)

    # Pydantic integration

    @classmethod
    def _validate_member(cls: Type[E], value: Any) -> E:
        name = cls.name_of(value)
        if name is None:
            raise ValueError(f"{_describe(value)} is not a member of {cls.__qualname__}")
        return cls._construct(name)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate_member,
            serialization=core_schema.to_string_ser_schema(when_used="always"),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "enum": cls.names()}


__all__ = ["DataEnum", "DataEnumMeta"]
