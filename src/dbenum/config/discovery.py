"""Locate ``dbenum.toml`` for the current invocation.

Lookup order: ``--config`` (resolved by the caller), ``DBENUM_CONFIG``,
then the first ``dbenum.toml`` in the start directory or any parent.
The directory holding the file becomes the project root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "dbenum.toml"
CONFIG_ENV_VAR = "DBENUM_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None when there is none.

    A ``DBENUM_CONFIG`` pointing at a missing file disables the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
