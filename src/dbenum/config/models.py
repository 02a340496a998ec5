"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``dbenum.toml`` only holds
overrides. A project without a config file uses the ``app`` package
under ``src/``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """[scaffold] section.

    Attributes:
        base_namespace: Package used to default the two namespaces below.
        enum_namespace: Package for generated enums (``<base>.enums`` when unset).
        type_namespace: Package for generated column types (``<base>.types`` when unset).
        namespace_roots: Namespace prefix to project-relative directory.
        runtime_module: Module generated column types import ``EnumType`` from.
    """

    model_config = {"frozen": True}

    base_namespace: str = "app"
    enum_namespace: str | None = None
    type_namespace: str | None = None
    namespace_roots: dict[str, str] = Field(default_factory=lambda: {"app": "src/app"})
    runtime_module: str = "dbenum.sqltypes"

    @property
    def default_enum_namespace(self) -> str:
        return self.enum_namespace or f"{self.base_namespace}.enums"

    @property
    def default_type_namespace(self) -> str:
        return self.type_namespace or f"{self.base_namespace}.types"
