"""Shared Jinja2 template loading with per-project override support."""

from __future__ import annotations

import json
from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

OVERRIDE_DIR = Path(".dbenum") / "templates"


def py_string(value: str) -> str:
    """Render *value* as a double-quoted Python string literal."""
    return json.dumps(value, ensure_ascii=False)


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with project overrides before packaged defaults.

    Overrides are loaded from ``.dbenum/templates/`` inside the project.
    Both a namespaced directory (``.dbenum/templates/scaffold/``) and the
    shared root are searched.
    """
    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("dbenum", f"templates/{group}"))
    env = Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["py_string"] = py_string
    return env
