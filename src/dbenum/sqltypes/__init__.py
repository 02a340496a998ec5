"""SQLAlchemy column types backed by Python enums.

Usage::

    from dbenum.sqltypes import DayOfWeek, DayOfWeekEnumType, build_registry

    registry = build_registry()
    registry.get("day_of_week")  # -> DayOfWeekEnumType
"""

from __future__ import annotations

from dbenum.sqltypes.base import EnumType
from dbenum.sqltypes.day_of_week import DayOfWeek, DayOfWeekEnumType
from dbenum.sqltypes.registry import BUILTIN_TYPES, TypeRegistry, build_registry

__all__ = [
    "BUILTIN_TYPES",
    "DayOfWeek",
    "DayOfWeekEnumType",
    "EnumType",
    "TypeRegistry",
    "build_registry",
]
