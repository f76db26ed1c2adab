"""Tests for intent execution."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from conftest import FakeDocFinder
from result import Err, Ok

from ccp.config import ObsidianConfig
from ccp.models.selection import Open, OpenDoc, Quit, RevealInFinder
from ccp.services.launcher import Launcher, obsidian_uri


@pytest.fixture
def popen_calls(monkeypatch) -> list[list[str]]:
    calls: list[list[str]] = []
    monkeypatch.setattr(
        "ccp.services.launcher.subprocess.Popen",
        lambda args, **_kwargs: calls.append(args),
    )
    return calls


def test_obsidian_uri() -> None:
    obsidian = ObsidianConfig(vault="NV", file_prefix="Personal/App/")
    uri = obsidian_uri(obsidian, Path("/docs/Daily Digest.md"))
    assert uri == "obsidian://open?vault=NV&file=Personal%2FApp%2FDaily%20Digest"


def test_reveal_uses_platform_opener(tmp_path: Path, monkeypatch, popen_calls) -> None:
    monkeypatch.setattr("ccp.services.launcher.sys.platform", "darwin")
    assert Launcher().launch(RevealInFinder(path=tmp_path)) == Ok(f"Revealed {tmp_path.name}")
    monkeypatch.setattr("ccp.services.launcher.sys.platform", "linux")
    Launcher().reveal(tmp_path)
    assert popen_calls == [["open", str(tmp_path)], ["xdg-open", str(tmp_path)]]


def test_reveal_missing_path(tmp_path: Path, popen_calls) -> None:
    result = Launcher().reveal(tmp_path / "gone")
    assert isinstance(result, Err)
    assert popen_calls == []


def test_spawn_failure_is_err(tmp_path: Path, monkeypatch) -> None:
    def fail(*_args: object, **_kwargs: object) -> None:
        raise FileNotFoundError("xdg-open")

    monkeypatch.setattr("ccp.services.launcher.subprocess.Popen", fail)
    result = Launcher().reveal(tmp_path)
    assert isinstance(result, Err)
    assert "xdg-open" in result.err_value


def test_open_doc(tmp_path: Path, monkeypatch, popen_calls) -> None:
    monkeypatch.setattr("ccp.services.launcher.sys.platform", "darwin")
    finder = FakeDocFinder({"daily-digest": tmp_path / "Daily Digest.md"})
    launcher = Launcher(finder, ObsidianConfig(vault="NV", file_prefix=""))

    assert isinstance(launcher.launch(OpenDoc(name="daily-digest")), Ok)
    assert popen_calls == [["open", "obsidian://open?vault=NV&file=Daily%20Digest"]]

    missing = launcher.open_doc("other")
    assert isinstance(missing, Err)
    assert missing.err_value == "No doc found for other"


def test_open_doc_without_config() -> None:
    assert isinstance(Launcher().open_doc("x"), Err)


class TestOpenProject:
    def test_runs_claude_continue(self, tmp_path: Path, monkeypatch) -> None:
        calls: list[tuple[list[str], Path]] = []
        monkeypatch.setattr("ccp.services.launcher.shutil.which", lambda name: f"/bin/{name}")
        monkeypatch.setattr(
            "ccp.services.launcher.subprocess.run",
            lambda args, cwd: calls.append((args, cwd)) or SimpleNamespace(returncode=0),
        )
        result = Launcher().launch(Open(path=tmp_path))
        assert isinstance(result, Ok)
        assert calls == [(["/bin/claude", "--continue"], tmp_path)]

    def test_non_zero_exit(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr("ccp.services.launcher.shutil.which", lambda name: f"/bin/{name}")
        monkeypatch.setattr(
            "ccp.services.launcher.subprocess.run",
            lambda args, cwd: SimpleNamespace(returncode=3),
        )
        assert Launcher().open_project(tmp_path) == Err("Claude exited with status 3")

    def test_missing_claude(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr("ccp.services.launcher.shutil.which", lambda name: None)
        assert Launcher().open_project(tmp_path) == Err("claude not found on PATH")

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert isinstance(Launcher().open_project(tmp_path / "gone"), Err)


def test_quit_is_not_launchable() -> None:
    assert isinstance(Launcher().launch(Quit()), Err)
