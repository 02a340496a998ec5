"""Explicit registry of enum column types, keyed by type name.

There is no discovery: the application builds a registry once at
startup and passes it where column types are looked up by name::

    registry = build_registry(OrderStateEnumType, PriorityEnumType)
    registry.get("order_state")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from dbenum.domain.errors import EnumConfigurationError
from dbenum.sqltypes.base import EnumType
from dbenum.sqltypes.day_of_week import DayOfWeekEnumType

logger = logging.getLogger(__name__)

BUILTIN_TYPES: tuple[type[EnumType], ...] = (DayOfWeekEnumType,)


class TypeRegistry:
    """Mapping of type name to :class:`EnumType` subclass.

    INVARIANT: each type name maps to exactly one class.
    """

    def __init__(self) -> None:
        self._types: dict[str, type[EnumType]] = {}

    def register(self, type_cls: type[EnumType]) -> str:
        """Register *type_cls* under its type name and return that name.

        Registering the same class twice is a no-op.

        Raises:
            EnumConfigurationError: If *type_cls* is not an EnumType subclass,
                or its name is already taken by another class.
        """
        if not (isinstance(type_cls, type) and issubclass(type_cls, EnumType)):
            msg = f"{type_cls!r} is not an EnumType subclass"
            raise EnumConfigurationError(msg)

        name = type_cls.type_name()
        existing = self._types.get(name)
        if existing is not None and existing is not type_cls:
            msg = (
                f"Type name {name!r} is already registered to "
                f"{_qualname(existing)}; cannot register {_qualname(type_cls)}"
            )
            raise EnumConfigurationError(msg)

        self._types[name] = type_cls
        logger.debug("Registered enum type %s -> %s", name, _qualname(type_cls))
        return name

    def get(self, name: str) -> type[EnumType]:
        try:
            return self._types[name]
        except KeyError:
            msg = f"Unknown enum type: {name!r}"
            raise EnumConfigurationError(msg) from None

    def names(self) -> list[str]:
        return sorted(self._types)

    def as_mapping(self) -> dict[str, dict[str, str]]:
        """``{type_name: {"class": "module.QualName"}}`` for every entry."""
        return {name: {"class": _qualname(self._types[name])} for name in self.names()}

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._types)


def _qualname(type_cls: type) -> str:
    return f"{type_cls.__module__}.{type_cls.__qualname__}"


def build_registry(
    *type_classes: type[EnumType],
    include_builtins: bool = True,
) -> TypeRegistry:
    """Build a registry holding *type_classes* (and the built-ins by default)."""
    registry = TypeRegistry()
    if include_builtins:
        for type_cls in BUILTIN_TYPES:
            registry.register(type_cls)
    for type_cls in type_classes:
        registry.register(type_cls)
    return registry
