"""Identifier transforms and column type name resolution.

Type names are derived from the class name of a column type:
``DayOfWeekEnumType`` -> ``day_of_week``. An explicit override always
wins over the derived name.

Known limitation: :func:`to_snake_case` is not acronym-aware. Every
uppercase letter after the first gets its own separator, so ``UserID``
becomes ``user_i_d``.
"""

from __future__ import annotations

import re

_UPPER_NOT_FIRST = re.compile(r"(?<!^)([A-Z])")

# Checked in order; only the first match is stripped.
TYPE_SUFFIXES: tuple[str, ...] = ("EnumType", "Type")


def to_snake_case(identifier: str) -> str:
    """Convert a PascalCase/camelCase identifier to snake_case.

    Examples:
        >>> to_snake_case("DayOfWeek")
        'day_of_week'
        >>> to_snake_case("day_of_week")
        'day_of_week'
    """
    return _UPPER_NOT_FIRST.sub(r"_\1", identifier).lower()


def derive_type_name(class_name: str) -> str:
    """Derive the canonical type name from a column type class name.

    Strips ``EnumType`` if present, otherwise ``Type``, then snake_cases
    the remainder. A name with neither suffix is snake_cased as-is.
    """
    for suffix in TYPE_SUFFIXES:
        if class_name.endswith(suffix):
            class_name = class_name[: -len(suffix)]
            break
    return to_snake_case(class_name)


def resolve_type_name(class_name: str, override: str | None = None) -> str:
    """Return *override* when given, else the name derived from *class_name*."""
    if override:
        return override
    return derive_type_name(class_name)
