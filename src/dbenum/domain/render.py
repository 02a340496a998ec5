"""Render enum and column type modules from their specs.

Rendering is deterministic: the same spec always yields byte-identical
text, so generated modules can be compared against golden files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dbenum.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from jinja2 import Environment

    from dbenum.domain.specs import EnumSpec, TypeSpec

TEMPLATE_GROUP = "scaffold"
ENUM_TEMPLATE = "enum.py.j2"
TYPE_TEMPLATE = "type.py.j2"
DEFAULT_RUNTIME_MODULE = "dbenum.sqltypes"


def _env(env: Environment | None) -> Environment:
    return env if env is not None else build_template_environment(TEMPLATE_GROUP)


def render_enum(spec: EnumSpec, *, env: Environment | None = None) -> str:
    """Render the enum module: one member per case, then a trailing ``ALL`` tuple."""
    return _env(env).get_template(ENUM_TEMPLATE).render(spec=spec)


def render_type(
    spec: TypeSpec,
    *,
    runtime_module: str = DEFAULT_RUNTIME_MODULE,
    env: Environment | None = None,
) -> str:
    """Render the column type module bound to ``spec.enum_name``."""
    template = _env(env).get_template(TYPE_TEMPLATE)
    return template.render(spec=spec, runtime_module=runtime_module)


def render_usage(enum_spec: EnumSpec, type_spec: TypeSpec) -> list[str]:
    """Lines showing how to map and register the generated type."""
    return [
        f"from {enum_spec.qualified_module} import {enum_spec.name}",
        f"from {type_spec.qualified_module} import {type_spec.class_name}",
        "from sqlalchemy.orm import Mapped, mapped_column",
        "",
        f"    status: Mapped[{enum_spec.name} | None] = mapped_column({type_spec.class_name}())",
        "",
        "Register it with the type registry at startup:",
        "",
        "from dbenum.sqltypes import build_registry",
        f"registry = build_registry({type_spec.class_name})",
        f"registry.get({type_spec.type_name!r})",
    ]
