"""Shared pytest fixtures for dbenum tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from dbenum.config.models import ScaffoldConfig
from dbenum.services.scaffold import ScaffoldService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory, isolated from any real dbenum.toml."""
    monkeypatch.delenv("DBENUM_CONFIG", raising=False)
    (tmp_path / "dbenum.toml").write_text("")
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI resolves paths inside it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def scaffold(project_root: Path) -> ScaffoldService:
    """ScaffoldService with default configuration rooted at the temp project."""
    return ScaffoldService(project_root, ScaffoldConfig())


@pytest.fixture
def sqlite_engine() -> Generator[Engine]:
    """In-memory SQLite engine."""
    engine = create_engine("sqlite:///:memory:")
    try:
        yield engine
    finally:
        engine.dispose()
