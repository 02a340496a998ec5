"""Tests for DbEnumSettings: priority chain and TOML loading."""

from pathlib import Path

import click
import pytest

from dbenum.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from dbenum.config.settings import DbEnumSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("DBENUM_VERBOSE", raising=False)
    monkeypatch.delenv("DBENUM_SCAFFOLD__BASE_NAMESPACE", raising=False)


def _write_config(root: Path, body: str) -> Path:
    path = root / CONFIG_FILENAME
    path.write_text(body, encoding="utf-8")
    return path


class TestDefaults:
    def test_no_config(self, tmp_path: Path) -> None:
        settings = DbEnumSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.scaffold.default_enum_namespace == "app.enums"


class TestTomlSource:
    def test_root_from_config_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write_config(tmp_path, '[scaffold]\nbase_namespace = "shop"\n')
        nested = tmp_path / "src"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = DbEnumSettings.from_cli()
        assert settings.config_path == path.resolve()
        assert settings.project_root == tmp_path.resolve()
        assert settings.scaffold.base_namespace == "shop"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = tmp_path / "other.toml"
        path.write_text('[scaffold]\ntype_namespace = "shop.db"\n', encoding="utf-8")
        settings = DbEnumSettings.from_cli(config_path=str(path))
        assert settings.config_path == path
        assert settings.project_root == tmp_path
        assert settings.scaffold.default_type_namespace == "shop.db"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[scaffold\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DbEnumSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(tmp_path, '[scaffold]\nbase_namespace = "shop"\n')
        monkeypatch.setenv("DBENUM_SCAFFOLD__BASE_NAMESPACE", "store")
        settings = DbEnumSettings.from_cli(project_root=tmp_path)
        assert settings.scaffold.base_namespace == "store"

    def test_cli_flag_overrides_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DBENUM_VERBOSE", "false")
        settings = DbEnumSettings.from_cli(project_root=tmp_path, verbose=True)
        assert settings.verbose is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DbEnumSettings.from_cli(project_root=tmp_path)
        with pytest.raises(ValueError):
            settings.quiet = True  # type: ignore[misc]
