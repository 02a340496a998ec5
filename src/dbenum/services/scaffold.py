"""ScaffoldService — generate an enum module and its column type module.

Pipeline: VALIDATE → RENDER → CONFIRM → WRITE → RESPOND

All validation happens before the first write. Writes are not
transactional: if the type module fails to write, the enum module that
was already written stays on disk and the failure names the artifact.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from dbenum.config.models import ScaffoldConfig
from dbenum.domain.cases import (
    build_cases,
    parse_cases,
    validate_case_name,
    validate_case_value,
    validate_enum_name,
    validate_namespace,
)
from dbenum.domain.errors import NoCasesError, ScaffoldValidationError
from dbenum.domain.render import TEMPLATE_GROUP, render_enum, render_type, render_usage
from dbenum.domain.specs import EnumSpec, GeneratedArtifact, TypeSpec
from dbenum.infrastructure.filesystem import module_path, namespace_to_path, write_artifact
from dbenum.infrastructure.templates import build_template_environment
from dbenum.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

OP_MAKE_ENUM = "make_enum"


@dataclass(frozen=True)
class ScaffoldPlan:
    """Everything needed to write one enum/type pair."""

    enum_spec: EnumSpec
    type_spec: TypeSpec
    enum_artifact: GeneratedArtifact
    type_artifact: GeneratedArtifact

    @property
    def artifacts(self) -> tuple[GeneratedArtifact, GeneratedArtifact]:
        return (self.enum_artifact, self.type_artifact)


class ScaffoldService:
    """Plans and writes generated enum/type module pairs under a project root."""

    def __init__(self, project_root: Path, config: ScaffoldConfig | None = None) -> None:
        self._root = project_root
        self._config = config or ScaffoldConfig()
        self._env = build_template_environment(TEMPLATE_GROUP, project_root=project_root)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def plan(
        self,
        enum_name: str,
        cases: Mapping[str, str],
        *,
        enum_namespace: str | None = None,
        type_namespace: str | None = None,
    ) -> ScaffoldPlan:
        """Validate input and render both modules without touching disk.

        Blank namespaces fall back to the configured defaults.

        Raises:
            ScaffoldValidationError: On any invalid name, namespace, or case.
        """
        enum_name = validate_enum_name(enum_name)
        cases = build_cases(
            (validate_case_name(name), validate_case_value(value)) for name, value in cases.items()
        )

        enum_ns = validate_namespace(
            (enum_namespace or "").strip() or self._config.default_enum_namespace
        )
        type_ns = validate_namespace(
            (type_namespace or "").strip() or self._config.default_type_namespace
        )

        enum_spec = EnumSpec(name=enum_name, namespace=enum_ns, cases=cases)
        type_spec = TypeSpec.for_enum(enum_spec, type_ns)

        roots = self._config.namespace_roots
        try:
            enum_dir = namespace_to_path(self._root, enum_ns, roots)
            type_dir = namespace_to_path(self._root, type_ns, roots)
        except ValueError as exc:
            raise ScaffoldValidationError(str(exc)) from exc

        return ScaffoldPlan(
            enum_spec=enum_spec,
            type_spec=type_spec,
            enum_artifact=GeneratedArtifact(
                kind="enum",
                path=module_path(enum_dir, enum_spec.module),
                content=render_enum(enum_spec, env=self._env),
            ),
            type_artifact=GeneratedArtifact(
                kind="type",
                path=module_path(type_dir, type_spec.module),
                content=render_type(
                    type_spec,
                    runtime_module=self._config.runtime_module,
                    env=self._env,
                ),
            ),
        )

    def write(self, plan: ScaffoldPlan) -> ServiceResult:
        """Write both modules, enum first. No rollback on partial failure."""
        created: list[str] = []
        for artifact in plan.artifacts:
            shown = self.display(artifact.path)
            try:
                write_artifact(artifact)
            except (OSError, UnicodeError) as exc:
                logger.warning("Failed to write %s module %s: %s", artifact.kind, shown, exc)
                return ServiceResult(
                    ok=False,
                    op=OP_MAKE_ENUM,
                    error=ServiceError(
                        code="WRITE_FAILED",
                        message=f"Error creating {artifact.kind} module {shown}: {exc}",
                        detail={"artifact": artifact.kind, "path": shown, "created": created},
                    ),
                )
            created.append(shown)
            logger.debug("Created %s module %s", artifact.kind, shown)

        enum_spec, type_spec = plan.enum_spec, plan.type_spec
        return ServiceResult(
            ok=True,
            op=OP_MAKE_ENUM,
            data={
                "enum": f"{enum_spec.qualified_module}.{enum_spec.name}",
                "type": f"{type_spec.qualified_module}.{type_spec.class_name}",
                "type_name": type_spec.type_name,
                "cases": list(enum_spec.cases),
                "created": created,
                "usage": render_usage(enum_spec, type_spec),
            },
        )

    def make_enum(
        self,
        enum_name: str,
        case_lines: Iterable[str],
        *,
        enum_namespace: str | None = None,
        type_namespace: str | None = None,
        confirm: Callable[[ScaffoldPlan], bool] | None = None,
    ) -> ServiceResult:
        """Run the whole pipeline: parse, plan, confirm, write.

        *confirm* receives the plan before anything is written; returning
        False cancels the run cleanly. Without *confirm* the plan is written.
        """
        try:
            cases = parse_cases(case_lines)
            plan = self.plan(
                enum_name,
                cases,
                enum_namespace=enum_namespace,
                type_namespace=type_namespace,
            )
        except NoCasesError as exc:
            return _failure("NO_CASES", str(exc))
        except ScaffoldValidationError as exc:
            return _failure("VALIDATION_ERROR", str(exc))

        if confirm is not None and not confirm(plan):
            logger.debug("Scaffold of %s cancelled", plan.enum_spec.name)
            return ServiceResult(
                ok=True,
                op=OP_MAKE_ENUM,
                data={"cancelled": True, "created": []},
                warnings=["Cancelled."],
            )

        return self.write(plan)

    def display(self, path: Path) -> str:
        """*path* relative to the project root when possible."""
        try:
            return path.relative_to(self._root).as_posix()
        except ValueError:
            return str(path)


def _failure(code: str, message: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP_MAKE_ENUM,
        error=ServiceError(code=code, message=message),
    )
