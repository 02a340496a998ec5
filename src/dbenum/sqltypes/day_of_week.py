"""Built-in days-of-the-week enum and its column type.

Ready to use out of the box::

    day: Mapped[DayOfWeek | None] = mapped_column(DayOfWeekEnumType())

The column type name is ``day_of_week``, derived from the class name.
"""

from __future__ import annotations

from enum import StrEnum

from dbenum.sqltypes.base import EnumType


class DayOfWeek(StrEnum):
    """Days of the week, backed by their lowercase English names."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def weekend_days(cls) -> list[DayOfWeek]:
        return [cls.SATURDAY, cls.SUNDAY]

    @classmethod
    def week_days(cls) -> list[DayOfWeek]:
        return [cls.MONDAY, cls.TUESDAY, cls.WEDNESDAY, cls.THURSDAY, cls.FRIDAY]

    @property
    def is_weekend(self) -> bool:
        return self in DayOfWeek.weekend_days()

    @property
    def is_weekday(self) -> bool:
        return self in DayOfWeek.week_days()

    @property
    def label(self) -> str:
        """Human-readable label (``"Monday"``)."""
        return self.value.capitalize()

    def to_iso_number(self) -> int:
        """ISO-8601 day number (1 = Monday, 7 = Sunday)."""
        return list(DayOfWeek).index(self) + 1

    @classmethod
    def from_iso_number(cls, number: int) -> DayOfWeek | None:
        """Inverse of :meth:`to_iso_number`; None outside 1..7."""
        if 1 <= number <= 7:
            return list(cls)[number - 1]
        return None


# Every member, in declaration order (for choice validation).
ALL: tuple[DayOfWeek, ...] = tuple(DayOfWeek)


class DayOfWeekEnumType(EnumType):
    """Column type for :class:`DayOfWeek`."""

    @classmethod
    def enum_class(cls) -> type[DayOfWeek]:
        return DayOfWeek
