"""Filesystem operations for generated modules.

Namespaces map to directories through a configurable prefix table
(``{"app": "src/app"}`` by default). Whatever is left of the namespace
after the prefix becomes nested directories.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from dbenum.domain.specs import GeneratedArtifact

NAMESPACE_SEPARATOR = "."
MODULE_SUFFIX = ".py"


def namespace_to_path(
    project_root: Path,
    namespace: str,
    roots: Mapping[str, str],
) -> Path:
    """Resolve the directory holding modules of *namespace*.

    The longest matching prefix in *roots* is replaced by its directory;
    unmatched namespaces map straight onto directories under the root.

    Examples:
        ``app.enums`` with ``{"app": "src/app"}`` -> ``<root>/src/app/enums``
    """
    relative = namespace.replace(NAMESPACE_SEPARATOR, "/")
    for prefix in sorted(roots, key=len, reverse=True):
        if namespace == prefix:
            relative = roots[prefix]
            break
        if namespace.startswith(prefix + NAMESPACE_SEPARATOR):
            rest = namespace[len(prefix) + 1 :].replace(NAMESPACE_SEPARATOR, "/")
            relative = f"{roots[prefix].rstrip('/')}/{rest}"
            break

    result = project_root / relative
    if not result.resolve().is_relative_to(project_root.resolve()):
        msg = f"Namespace {namespace!r} resolves outside the project: {result}"
        raise ValueError(msg)
    return result


def module_path(directory: Path, module: str) -> Path:
    return directory / f"{module}{MODULE_SUFFIX}"


def write_artifact(artifact: GeneratedArtifact) -> Path:
    """Write *artifact* to disk, creating parent directories as needed."""
    artifact.path.parent.mkdir(parents=True, exist_ok=True)
    artifact.path.write_text(artifact.content, encoding="utf-8")
    return artifact.path
