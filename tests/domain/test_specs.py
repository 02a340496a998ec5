"""Tests for EnumSpec, TypeSpec, and GeneratedArtifact."""

from pathlib import Path

import pytest

from dbenum.domain.specs import EnumSpec, GeneratedArtifact, TypeSpec


def _order_state() -> EnumSpec:
    return EnumSpec(
        name="OrderState",
        namespace="app.enums",
        cases={"NEW": "new", "PAID": "paid", "SHIPPED": "shipped"},
    )


class TestEnumSpec:
    def test_module_names(self) -> None:
        spec = _order_state()
        assert spec.module == "order_state"
        assert spec.qualified_module == "app.enums.order_state"

    def test_preserves_case_order(self) -> None:
        spec = EnumSpec(name="Z", namespace="app", cases={"B": "b", "A": "a"})
        assert list(spec.cases) == ["B", "A"]

    def test_rejects_empty_cases(self) -> None:
        with pytest.raises(ValueError):
            EnumSpec(name="Empty", namespace="app", cases={})

    def test_rejects_bad_case_name(self) -> None:
        with pytest.raises(ValueError):
            EnumSpec(name="Bad", namespace="app", cases={"lower": "x"})

    def test_rejects_duplicate_values(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            EnumSpec(name="Dup", namespace="app", cases={"A": "x", "B": "x"})

    def test_rejects_bad_enum_name(self) -> None:
        with pytest.raises(ValueError):
            EnumSpec(name="bad", namespace="app", cases={"A": "a"})

    def test_frozen(self) -> None:
        spec = _order_state()
        with pytest.raises(Exception):
            spec.name = "Other"  # type: ignore[misc]


class TestTypeSpec:
    def test_for_enum_derives_type_name(self) -> None:
        type_spec = TypeSpec.for_enum(_order_state(), "app.types")
        assert type_spec.type_name == "order_state"
        assert type_spec.enum_name == "OrderState"
        assert type_spec.enum_namespace == "app.enums"
        assert type_spec.type_namespace == "app.types"

    def test_derived_names(self) -> None:
        type_spec = TypeSpec.for_enum(_order_state(), "app.types")
        assert type_spec.class_name == "OrderStateEnumType"
        assert type_spec.module == "order_state_enum_type"
        assert type_spec.enum_module == "order_state"
        assert type_spec.qualified_module == "app.types.order_state_enum_type"


class TestGeneratedArtifact:
    def test_immutable(self) -> None:
        artifact = GeneratedArtifact(kind="enum", path=Path("x.py"), content="")
        with pytest.raises(Exception):
            artifact.content = "changed"  # type: ignore[misc]

    def test_kind_restricted(self) -> None:
        with pytest.raises(ValueError):
            GeneratedArtifact(kind="other", path=Path("x.py"), content="")  # type: ignore[arg-type]
