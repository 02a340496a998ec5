"""Tests for the explicit type registry."""

from __future__ import annotations

import enum

import pytest

from dbenum.domain.errors import EnumConfigurationError
from dbenum.sqltypes import DayOfWeekEnumType, EnumType, TypeRegistry, build_registry


class Color(enum.StrEnum):
    RED = "red"


class ColorEnumType(EnumType):
    @classmethod
    def enum_class(cls) -> type[Color]:
        return Color


class ImpostorType(EnumType):
    NAME = "day_of_week"

    @classmethod
    def enum_class(cls) -> type[Color]:
        return Color


class TestTypeRegistry:
    def test_register_returns_name(self) -> None:
        registry = TypeRegistry()
        assert registry.register(ColorEnumType) == "color"
        assert registry.get("color") is ColorEnumType
        assert "color" in registry
        assert len(registry) == 1

    def test_register_same_class_twice(self) -> None:
        registry = TypeRegistry()
        registry.register(ColorEnumType)
        registry.register(ColorEnumType)
        assert registry.names() == ["color"]

    def test_name_clash_rejected(self) -> None:
        registry = build_registry()
        with pytest.raises(EnumConfigurationError, match="already registered"):
            registry.register(ImpostorType)
        assert registry.get("day_of_week") is DayOfWeekEnumType

    def test_non_enum_type_rejected(self) -> None:
        with pytest.raises(EnumConfigurationError):
            TypeRegistry().register(dict)  # type: ignore[arg-type]

    def test_unknown_name(self) -> None:
        with pytest.raises(EnumConfigurationError, match="Unknown enum type"):
            TypeRegistry().get("nope")

    def test_iterates_sorted_names(self) -> None:
        registry = build_registry(ColorEnumType)
        assert list(registry) == ["color", "day_of_week"]

    def test_as_mapping(self) -> None:
        mapping = build_registry(ColorEnumType).as_mapping()
        assert mapping["day_of_week"] == {
            "class": "dbenum.sqltypes.day_of_week.DayOfWeekEnumType"
        }
        assert mapping["color"]["class"].endswith("ColorEnumType")


class TestBuildRegistry:
    def test_builtins_included_by_default(self) -> None:
        assert build_registry().names() == ["day_of_week"]

    def test_without_builtins(self) -> None:
        assert len(build_registry(include_builtins=False)) == 0

    def test_independent_instances(self) -> None:
        first = build_registry(ColorEnumType)
        second = build_registry()
        assert "color" in first
        assert "color" not in second
