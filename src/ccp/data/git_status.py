"""Read git branch, dirty flag and last-commit time by shelling out to ``git``."""

from __future__ import annotations

import logging
import subprocess
from datetime import UTC, datetime
from pathlib import Path

from ccp.models.projects import GitInfo, GitStatus

logger = logging.getLogger(__name__)


class GitError(Exception):
    """A git invocation failed or produced unusable output."""


class GitStatusReader:
    """StatusProvider backed by the git CLI.

    Every failure (git missing, corrupt repo, timeout, unexpected output)
    degrades to ``NotARepo`` so a single bad directory never aborts a scan.
    """

    def __init__(self, git: str = "git", timeout: float = 2.0) -> None:
        self._git = git
        self._timeout = timeout

    def read(self, path: Path) -> GitInfo:
        if not (path / ".git").exists():
            return GitInfo()
        try:
            branch = self._branch(path)
            dirty = bool(self._run(path, "status", "--porcelain").strip())
            last_commit = self._last_commit(path)
        except GitError as exc:
            logger.debug("Treating %s as non-repo: %s", path, exc)
            return GitInfo()

        status = GitStatus.dirty(branch) if dirty else GitStatus.clean(branch)
        return GitInfo(status=status, last_commit=last_commit)

    def _branch(self, path: Path) -> str:
        branch = self._run(path, "branch", "--show-current").strip()
        if branch:
            return branch
        # Detached HEAD: show the abbreviated commit instead.
        return self._run(path, "rev-parse", "--short", "HEAD").strip()

    def _last_commit(self, path: Path) -> datetime | None:
        try:
            raw = self._run(path, "log", "-1", "--format=%ct").strip()
        except GitError:
            # Fresh repository without commits.
            return None
        if not raw:
            return None
        try:
            return datetime.fromtimestamp(int(raw), tz=UTC)
        except (ValueError, OverflowError) as exc:
            raise GitError(f"unexpected commit timestamp {raw!r}") from exc

    def _run(self, path: Path, *args: str) -> str:
        try:
            proc = subprocess.run(
                [self._git, "-C", str(path), *args],
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError, ValueError) as exc:
            raise GitError(str(exc)) from exc
        if proc.returncode != 0:
            raise GitError(f"git {' '.join(args)} exited {proc.returncode}: {proc.stderr.strip()}")
        return proc.stdout
