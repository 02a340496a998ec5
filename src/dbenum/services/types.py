"""TypeCatalogService — build the type registry and report its contents."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable

from dbenum.domain.errors import EnumConfigurationError
from dbenum.services.result import ServiceError, ServiceResult
from dbenum.sqltypes import EnumType, TypeRegistry, build_registry

logger = logging.getLogger(__name__)


def import_type(reference: str) -> type[EnumType]:
    """Import a column type from a ``package.module:ClassName`` reference.

    Raises:
        EnumConfigurationError: If the reference is malformed, cannot be
            imported, or does not name an EnumType subclass.
    """
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        msg = f"Invalid type reference {reference!r}: expected 'package.module:ClassName'"
        raise EnumConfigurationError(msg)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import {module_name!r}: {exc}"
        raise EnumConfigurationError(msg) from exc

    type_cls = getattr(module, attr, None)
    if not (isinstance(type_cls, type) and issubclass(type_cls, EnumType)):
        msg = f"{reference!r} is not an EnumType subclass"
        raise EnumConfigurationError(msg)
    return type_cls


class TypeCatalogService:
    """Registers column types explicitly and lists what is registered."""

    def __init__(self, registry: TypeRegistry | None = None) -> None:
        self._registry = registry if registry is not None else build_registry()

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def list_types(self, references: Iterable[str] = ()) -> ServiceResult:
        """Register every ``module:Class`` in *references*, then list the registry."""
        try:
            for reference in references:
                self._registry.register(import_type(reference))
        except EnumConfigurationError as exc:
            logger.debug("Type registration failed", exc_info=True)
            return ServiceResult(
                ok=False,
                op="list_types",
                error=ServiceError(code="CONFIGURATION_ERROR", message=str(exc)),
            )

        mapping = self._registry.as_mapping()
        items = [{"name": name, "class": entry["class"]} for name, entry in mapping.items()]
        return ServiceResult(
            ok=True,
            op="list_types",
            data={"count": len(items), "items": items},
        )
