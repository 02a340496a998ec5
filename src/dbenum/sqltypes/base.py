"""Abstract column type mapping an enum to its string backing value.

Subclasses only name the enum they store::

    class OrderStateEnumType(EnumType):
        NAME = "order_state"  # optional; derived from the class name otherwise

        @classmethod
        def enum_class(cls) -> type[OrderState]:
            return OrderState

On MySQL the column is a native ``ENUM(...)``; elsewhere it is a
``VARCHAR`` sized to the longest value.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, ClassVar

from sqlalchemy import String
from sqlalchemy.dialects import mysql
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

from dbenum.domain.errors import EnumConfigurationError
from dbenum.domain.naming import resolve_type_name

logger = logging.getLogger(__name__)


class EnumType(TypeDecorator[enum.Enum]):
    """Base class for enum-backed column types."""

    impl = String
    cache_ok = True

    # Explicit type name; wins over the name derived from the class name.
    NAME: ClassVar[str | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # SQLAlchemy only reads cache_ok from each class's own namespace.
        if "cache_ok" not in cls.__dict__:
            cls.cache_ok = True

    @classmethod
    def enum_class(cls) -> type[enum.Enum]:
        """Return the enum class stored in this column."""
        raise NotImplementedError(f"{cls.__name__} must implement enum_class()")

    @classmethod
    def type_name(cls) -> str:
        return resolve_type_name(cls.__name__, cls.NAME)

    @classmethod
    def _checked_enum_class(cls) -> type[enum.Enum]:
        target = cls.enum_class()
        if not (isinstance(target, type) and issubclass(target, enum.Enum)):
            msg = f"{cls.__name__}.enum_class() must return an Enum subclass, got {target!r}"
            raise EnumConfigurationError(msg)
        return target

    @classmethod
    def enum_values(cls) -> list[str]:
        """Backing values of every member, in declaration order."""
        return [str(member.value) for member in cls._checked_enum_class()]

    @classmethod
    def sql_declaration(cls) -> str:
        """MySQL column declaration, e.g. ``ENUM('monday', 'tuesday')``."""
        quoted = ", ".join("'" + value.replace("'", "''") + "'" for value in cls.enum_values())
        return f"ENUM({quoted})"

    def encode(self, value: Any) -> str | None:
        """Enum member to its backing value; anything else maps to None."""
        if isinstance(value, enum.Enum):
            return str(value.value)
        return None

    def decode(self, value: Any) -> enum.Enum | None:
        """Backing value to its enum member; None or unknown values map to None."""
        target = self._checked_enum_class()
        if value is None:
            return None
        try:
            return target(value)
        except ValueError:
            logger.debug("Unknown %s value %r", target.__name__, value)
            return None

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        values = self.enum_values()
        if dialect.name in ("mysql", "mariadb"):
            return dialect.type_descriptor(mysql.ENUM(*values))
        length = max((len(v) for v in values), default=1)
        return dialect.type_descriptor(String(length))

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        return self.encode(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> enum.Enum | None:
        return self.decode(value)
