"""Selection state machine models: state, key events and intents."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Mode(StrEnum):
    BROWSING = "browsing"
    SEARCHING = "searching"


class SelectionState(BaseModel):
    """Cursor, query and mode of the picker. Replaced, never mutated."""

    model_config = ConfigDict(frozen=True)

    cursor: int = 0
    query: str = ""
    mode: Mode = Mode.BROWSING


class Key(StrEnum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    CHAR = "char"


class KeyEvent(BaseModel):
    """A terminal key press, reduced to what the picker cares about."""

    model_config = ConfigDict(frozen=True)

    key: Key
    char: str = ""

    @classmethod
    def of(cls, char: str) -> KeyEvent:
        return cls(key=Key.CHAR, char=char)


class Open(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["open"] = "open"
    path: Path


class RevealInFinder(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["reveal"] = "reveal"
    path: Path


class OpenDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["open_doc"] = "open_doc"
    name: str


class Quit(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["quit"] = "quit"


class Refresh(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["refresh"] = "refresh"


Intent = Open | RevealInFinder | OpenDoc | Quit | Refresh
