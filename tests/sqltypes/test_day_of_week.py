"""Tests for the built-in DayOfWeek enum."""

import pytest

from dbenum.sqltypes import DayOfWeek
from dbenum.sqltypes.day_of_week import ALL


class TestDayOfWeek:
    def test_values_are_lowercase_names(self) -> None:
        assert [d.value for d in DayOfWeek] == [d.name.lower() for d in DayOfWeek]

    def test_all_in_declaration_order(self) -> None:
        assert ALL == tuple(DayOfWeek)
        assert ALL[0] is DayOfWeek.MONDAY
        assert len(ALL) == 7

    def test_weekend(self) -> None:
        assert DayOfWeek.weekend_days() == [DayOfWeek.SATURDAY, DayOfWeek.SUNDAY]
        assert DayOfWeek.SUNDAY.is_weekend
        assert not DayOfWeek.SUNDAY.is_weekday

    def test_weekdays(self) -> None:
        assert len(DayOfWeek.week_days()) == 5
        assert DayOfWeek.WEDNESDAY.is_weekday

    def test_label(self) -> None:
        assert DayOfWeek.THURSDAY.label == "Thursday"

    @pytest.mark.parametrize(
        "day,number",
        [(DayOfWeek.MONDAY, 1), (DayOfWeek.THURSDAY, 4), (DayOfWeek.SUNDAY, 7)],
    )
    def test_iso_number_round_trip(self, day: DayOfWeek, number: int) -> None:
        assert day.to_iso_number() == number
        assert DayOfWeek.from_iso_number(number) is day

    @pytest.mark.parametrize("number", [0, 8, -1])
    def test_from_iso_number_out_of_range(self, number: int) -> None:
        assert DayOfWeek.from_iso_number(number) is None
