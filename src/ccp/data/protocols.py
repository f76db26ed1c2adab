"""Protocol definitions for filesystem and git collaborators."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ccp.models.projects import ConfigLabel, GitInfo


class StatusProvider(Protocol):
    """Reads branch, dirtiness and last-commit time for a directory."""

    def read(self, path: Path) -> GitInfo: ...


class LabelProvider(Protocol):
    """Detects Claude Code artifacts in a directory."""

    def scan(self, path: Path) -> list[ConfigLabel]: ...


class DocFinder(Protocol):
    """Finds the note that documents a project."""

    def match(self, project_name: str) -> Path | None: ...
