"""Project-level models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class GitState(StrEnum):
    NOT_A_REPO = "not_a_repo"
    CLEAN = "clean"
    DIRTY = "dirty"


class GitStatus(BaseModel):
    """Git state of a project directory."""

    model_config = ConfigDict(frozen=True)

    state: GitState = GitState.NOT_A_REPO
    branch: str = ""

    @classmethod
    def not_a_repo(cls) -> GitStatus:
        return cls()

    @classmethod
    def clean(cls, branch: str) -> GitStatus:
        return cls(state=GitState.CLEAN, branch=branch)

    @classmethod
    def dirty(cls, branch: str) -> GitStatus:
        return cls(state=GitState.DIRTY, branch=branch)

    @property
    def is_repo(self) -> bool:
        return self.state is not GitState.NOT_A_REPO

    @property
    def display(self) -> str:
        """Branch with a trailing ``*`` when dirty; empty for non-repos."""
        if not self.is_repo:
            return ""
        return f"{self.branch}*" if self.state is GitState.DIRTY else self.branch


class GitInfo(BaseModel):
    """Result of reading a directory's git metadata."""

    model_config = ConfigDict(frozen=True)

    status: GitStatus = Field(default_factory=GitStatus.not_a_repo)
    last_commit: datetime | None = None


class LabelKind(StrEnum):
    CLAUDE_MD = "claude_md"
    SKILLS = "skills"
    MCP = "mcp"


class ConfigLabel(BaseModel):
    """A detected Claude Code artifact in a project directory."""

    model_config = ConfigDict(frozen=True)

    kind: LabelKind
    count: int = 0

    @classmethod
    def claude_md(cls) -> ConfigLabel:
        return cls(kind=LabelKind.CLAUDE_MD)

    @classmethod
    def skills(cls, count: int) -> ConfigLabel:
        return cls(kind=LabelKind.SKILLS, count=count)

    @classmethod
    def mcp(cls, count: int) -> ConfigLabel:
        return cls(kind=LabelKind.MCP, count=count)

    @property
    def display(self) -> str:
        if self.kind is LabelKind.CLAUDE_MD:
            return "claude.md"
        return f"{self.count}{self.kind.value}"


class ProjectRecord(BaseModel):
    """One scanned project directory with derived git/config metadata."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path
    group: str = ""
    git_status: GitStatus = Field(default_factory=GitStatus.not_a_repo)
    last_modified: datetime | None = None
    config_labels: tuple[ConfigLabel, ...] = ()
    has_doc: bool = False


class DisplayRow(BaseModel):
    """Render-ready view of a project record."""

    model_config = ConfigDict(frozen=True)

    group: str
    name: str
    branch: str = ""
    config_labels: tuple[str, ...] = ()
    has_doc: bool = False
    relative_last_modified: str = ""
