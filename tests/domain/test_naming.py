"""Tests for snake_case conversion and type name resolution."""

import pytest

from dbenum.domain.naming import derive_type_name, resolve_type_name, to_snake_case


class TestToSnakeCase:
    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("DayOfWeek", "day_of_week"),
            ("OrderState", "order_state"),
            ("Status", "status"),
            ("orderState", "order_state"),
            ("Priority2", "priority2"),
            ("", ""),
        ],
    )
    def test_converts(self, identifier: str, expected: str) -> None:
        assert to_snake_case(identifier) == expected

    def test_consecutive_capitals_each_get_separator(self) -> None:
        """Not acronym-aware: every capital after the first is split off."""
        assert to_snake_case("UserID") == "user_i_d"

    @pytest.mark.parametrize("identifier", ["DayOfWeek", "UserID", "already_snake", "X"])
    def test_idempotent(self, identifier: str) -> None:
        once = to_snake_case(identifier)
        assert to_snake_case(once) == once


class TestDeriveTypeName:
    def test_strips_enum_type_suffix(self) -> None:
        assert derive_type_name("DayOfWeekEnumType") == "day_of_week"

    def test_strips_type_suffix(self) -> None:
        assert derive_type_name("StatusType") == "status"

    def test_no_suffix(self) -> None:
        assert derive_type_name("Priority") == "priority"

    def test_strips_only_one_suffix(self) -> None:
        assert derive_type_name("PaymentTypeEnumType") == "payment_type"

    def test_enum_suffix_alone_is_kept(self) -> None:
        assert derive_type_name("StatusEnum") == "status_enum"


class TestResolveTypeName:
    def test_override_wins(self) -> None:
        assert resolve_type_name("DayOfWeekEnumType", "weekday") == "weekday"

    def test_falls_back_to_derived(self) -> None:
        assert resolve_type_name("DayOfWeekEnumType") == "day_of_week"

    def test_empty_override_ignored(self) -> None:
        assert resolve_type_name("StatusType", "") == "status"
