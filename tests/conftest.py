"""Shared fixtures for ccp tests."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from ccp.models.projects import ConfigLabel, GitInfo, GitStatus, ProjectRecord

BASE_TIME = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

RecordFactory = Callable[..., ProjectRecord]


class FakeStatusProvider:
    """StatusProvider keyed by directory name."""

    def __init__(self, infos: dict[str, GitInfo] | None = None) -> None:
        self.infos = infos or {}
        self.calls: list[Path] = []

    def read(self, path: Path) -> GitInfo:
        self.calls.append(path)
        return self.infos.get(path.name, GitInfo())


class FakeLabelProvider:
    def __init__(self, labels: dict[str, list[ConfigLabel]] | None = None) -> None:
        self.labels = labels or {}

    def scan(self, path: Path) -> list[ConfigLabel]:
        return list(self.labels.get(path.name, []))


class FakeDocFinder:
    def __init__(self, docs: dict[str, Path] | None = None) -> None:
        self.docs = docs or {}

    def match(self, project_name: str) -> Path | None:
        return self.docs.get(project_name)


@pytest.fixture
def make_record() -> RecordFactory:
    """Build records whose age is given in hours before BASE_TIME."""

    def _make(
        name: str,
        hours_ago: float | None = 0,
        group: str = "app",
        status: GitStatus | None = None,
        labels: tuple[ConfigLabel, ...] = (),
    ) -> ProjectRecord:
        modified = None if hours_ago is None else BASE_TIME - timedelta(hours=hours_ago)
        return ProjectRecord(
            name=name,
            path=Path("/projects") / group / name,
            group=group,
            git_status=status or GitStatus.not_a_repo(),
            last_modified=modified,
            config_labels=labels,
        )

    return _make


@pytest.fixture
def git_available() -> str:
    git = shutil.which("git")
    if git is None:
        pytest.skip("git is not installed")
    return git


@pytest.fixture
def make_repo(git_available: str) -> Callable[[Path, str, datetime], Path]:
    """Initialise a repository with one commit at a fixed time."""

    def _make(path: Path, branch: str = "main", when: datetime = BASE_TIME) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        env = {
            **os.environ,
            "GIT_AUTHOR_DATE": when.isoformat(),
            "GIT_COMMITTER_DATE": when.isoformat(),
        }

        def git(*args: str) -> None:
            subprocess.run(
                [git_available, "-C", str(path), "-c", "user.name=Test", "-c", "user.email=t@example.com", *args],
                check=True,
                capture_output=True,
                env=env,
            )

        git("init", "-q", "-b", branch)
        (path / "README.md").write_text("hello\n", encoding="utf-8")
        git("add", "README.md")
        git("commit", "-q", "-m", "initial")
        return path

    return _make


def set_mtime(path: Path, when: datetime) -> None:
    stamp = when.timestamp()
    os.utime(path, (stamp, stamp))
