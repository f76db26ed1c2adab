"""CLI and entrypoint tests."""

from __future__ import annotations

import runpy
from datetime import timedelta
from pathlib import Path

import pytest
from conftest import BASE_TIME, set_mtime
from typer.testing import CliRunner

from ccp.cli import app
from ccp.config import Config
from ccp.services.container import PickerServices


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    for name in ("alpha", "beta"):
        project = home / "code" / name
        project.mkdir(parents=True)
        (project / "main.py").write_text("x", encoding="utf-8")
    set_mtime(home / "code" / "alpha" / "main.py", BASE_TIME - timedelta(days=1))
    set_mtime(home / "code" / "beta" / "main.py", BASE_TIME)
    (home / "code" / "beta" / "CLAUDE.md").write_text("x", encoding="utf-8")
    set_mtime(home / "code" / "beta" / "CLAUDE.md", BASE_TIME)

    docs = home / "notes"
    docs.mkdir()
    (docs / "Alpha.md").write_text("x", encoding="utf-8")

    path = tmp_path / "config.toml"
    path.write_text(
        f'scan_dirs = ["{home / "code"}"]\nexclude = []\n\n[obsidian]\ndocs_path = "{docs}"\n',
        encoding="utf-8",
    )
    return path


def test_cli_pick_invokes_run_app(monkeypatch, config_file: Path) -> None:
    called: dict[str, object] = {}

    def fake_run_app(config: Config) -> None:
        called["config"] = config

    monkeypatch.setattr("ccp.ui.app.run_app", fake_run_app)
    result = CliRunner().invoke(app, ["--config", str(config_file)])
    assert result.exit_code == 0
    assert isinstance(called["config"], Config)


def test_cli_list(config_file: Path) -> None:
    result = CliRunner().invoke(app, ["list", "--config", str(config_file)])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert "beta" in lines[0] and "claude.md" in lines[0]
    assert "alpha" in lines[1] and "doc" in lines[1]


def test_cli_list_query(config_file: Path) -> None:
    result = CliRunner().invoke(app, ["list", "--config", str(config_file), "-q", "alp"])
    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 1

    result = CliRunner().invoke(app, ["list", "--config", str(config_file), "-q", "zzz"])
    assert result.output.strip() == "No matching projects."


def test_cli_doc(config_file: Path) -> None:
    result = CliRunner().invoke(app, ["doc", "alpha", "--config", str(config_file)])
    assert result.exit_code == 0
    assert result.output.strip().endswith("Alpha.md")

    result = CliRunner().invoke(app, ["doc", "gamma", "--config", str(config_file)])
    assert result.exit_code == 1


def test_cli_bad_config(tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("nope = [", encoding="utf-8")
    result = CliRunner().invoke(app, ["list", "--config", str(bad)])
    assert result.exit_code == 1


def test_container_builds_sorted_index(tmp_path: Path) -> None:
    for name in ("one", "two"):
        (tmp_path / "Documents" / "app" / name).mkdir(parents=True)
    set_mtime(tmp_path / "Documents" / "app" / "one", BASE_TIME)
    set_mtime(tmp_path / "Documents" / "app" / "two", BASE_TIME - timedelta(hours=1))

    services = PickerServices.create(Config(home=tmp_path, obsidian=None))
    index = services.build_index()
    assert [r.name for r in index.records] == ["one", "two"]


def test_python_module_entrypoint_invokes_cli_app(monkeypatch) -> None:
    called = {"count": 0}

    def fake_app() -> None:
        called["count"] += 1

    monkeypatch.setattr("ccp.cli.app", fake_app)
    runpy.run_module("ccp.__main__", run_name="__main__")
    assert called["count"] == 1
