"""Value objects flowing through the scaffold pipeline.

EnumSpec and TypeSpec are built per invocation and never persisted.
GeneratedArtifact is write-once output of the renderer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Self

from pydantic import BaseModel, model_validator

from dbenum.domain.cases import validate_case_name, validate_enum_name
from dbenum.domain.errors import NoCasesError, ScaffoldValidationError
from dbenum.domain.naming import derive_type_name, to_snake_case

TYPE_CLASS_SUFFIX = "EnumType"


class EnumSpec(BaseModel):
    """An enum to generate: class name, namespace, and ordered cases.

    Attributes:
        name: Enum class name (``OrderState``).
        namespace: Dotted package the enum module lives in (``app.enums``).
        cases: Case name to backing value, in declaration order.
    """

    model_config = {"frozen": True}

    name: str
    namespace: str
    cases: dict[str, str]

    @model_validator(mode="after")
    def _check_invariants(self) -> Self:
        validate_enum_name(self.name)
        if not self.cases:
            msg = "At least one case is required."
            raise NoCasesError(msg)
        for case_name in self.cases:
            validate_case_name(case_name)
        if len(set(self.cases.values())) != len(self.cases):
            msg = "Case values must be unique."
            raise ScaffoldValidationError(msg)
        return self

    @property
    def module(self) -> str:
        """Module name of the generated enum (``order_state``)."""
        return to_snake_case(self.name)

    @property
    def qualified_module(self) -> str:
        return f"{self.namespace}.{self.module}"


class TypeSpec(BaseModel):
    """A column type to generate for an enum.

    ``type_name`` is always derived from ``enum_name``; use
    :meth:`for_enum` rather than passing it by hand.
    """

    model_config = {"frozen": True}

    type_namespace: str
    enum_namespace: str
    enum_name: str
    type_name: str

    @classmethod
    def for_enum(cls, enum_spec: EnumSpec, type_namespace: str) -> TypeSpec:
        class_name = f"{enum_spec.name}{TYPE_CLASS_SUFFIX}"
        return cls(
            type_namespace=type_namespace,
            enum_namespace=enum_spec.namespace,
            enum_name=enum_spec.name,
            type_name=derive_type_name(class_name),
        )

    @property
    def class_name(self) -> str:
        return f"{self.enum_name}{TYPE_CLASS_SUFFIX}"

    @property
    def enum_module(self) -> str:
        return to_snake_case(self.enum_name)

    @property
    def module(self) -> str:
        """Module name of the generated column type (``order_state_enum_type``)."""
        return to_snake_case(self.class_name)

    @property
    def qualified_module(self) -> str:
        return f"{self.type_namespace}.{self.module}"


class GeneratedArtifact(BaseModel):
    """One rendered file, ready to be written."""

    model_config = {"frozen": True}

    kind: Literal["enum", "type"]
    path: Path
    content: str
