"""Pydantic models for ccp."""

from ccp.models.projects import (
    ConfigLabel,
    DisplayRow,
    GitInfo,
    GitState,
    GitStatus,
    LabelKind,
    ProjectRecord,
)
from ccp.models.selection import (
    Intent,
    Key,
    KeyEvent,
    Mode,
    Open,
    OpenDoc,
    Quit,
    Refresh,
    RevealInFinder,
    SelectionState,
)

__all__ = [
    "ConfigLabel",
    "DisplayRow",
    "GitInfo",
    "GitState",
    "GitStatus",
    "Intent",
    "Key",
    "KeyEvent",
    "LabelKind",
    "Mode",
    "Open",
    "OpenDoc",
    "ProjectRecord",
    "Quit",
    "Refresh",
    "RevealInFinder",
    "SelectionState",
]
