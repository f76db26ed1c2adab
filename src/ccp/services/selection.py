"""Selection state machine: cursor, search query and mode.

``SelectionController.handle`` is pure. It takes the current ``SelectionState``
and one ``KeyEvent`` and returns the next state plus at most one intent for
the caller to execute. Nothing here touches the terminal, the filesystem or
subprocesses.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ccp.models.projects import DisplayRow, ProjectRecord
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
from ccp.services.index import FilterResult, ProjectIndex
from ccp.services.rows import display_rows


@dataclass(frozen=True, slots=True)
class Step:
    state: SelectionState
    intent: Intent | None = None


@dataclass(frozen=True, slots=True)
class RenderFrame:
    """Everything a draw target needs for one frame."""

    rows: list[DisplayRow]
    cursor: int | None
    query: str
    mode: Mode
    total: int


class SelectionController:
    """Maps key events to state transitions and action intents."""

    def __init__(self, index: ProjectIndex) -> None:
        self._index = index

    @property
    def index(self) -> ProjectIndex:
        return self._index

    def replace_index(self, index: ProjectIndex, state: SelectionState) -> SelectionState:
        """Swap in a rebuilt index and reclamp ``state`` against it."""
        self._index = index
        return self.reclamp(state)

    def view(self, state: SelectionState) -> FilterResult:
        return self._index.filter(state.query)

    def selected(self, state: SelectionState) -> ProjectRecord | None:
        view = self.view(state)
        if view.is_empty or not 0 <= state.cursor < len(view):
            return None
        return view.matches[state.cursor]

    def reclamp(self, state: SelectionState) -> SelectionState:
        """Reset the cursor to 0 when it falls outside the current view."""
        if state.cursor < 0 or state.cursor >= len(self.view(state)):
            return state.model_copy(update={"cursor": 0})
        return state

    def render(self, state: SelectionState, now: datetime | None = None) -> RenderFrame:
        view = self.view(state)
        return RenderFrame(
            rows=display_rows(view.matches, now),
            cursor=None if view.is_empty else state.cursor,
            query=state.query,
            mode=state.mode,
            total=len(self._index),
        )

    def handle(self, state: SelectionState, event: KeyEvent) -> Step:
        if state.mode is Mode.SEARCHING:
            return self._handle_searching(state, event)
        return self._handle_browsing(state, event)

    def _handle_browsing(self, state: SelectionState, event: KeyEvent) -> Step:
        key, char = event.key, event.char
        if key is Key.UP or (key is Key.CHAR and char == "k"):
            return Step(self._move(state, -1))
        if key is Key.DOWN or (key is Key.CHAR and char == "j"):
            return Step(self._move(state, 1))
        if key is Key.ENTER:
            return self._emit(state, lambda p: Open(path=p.path))
        if key is Key.ESCAPE:
            return Step(SelectionState())
        if key is not Key.CHAR:
            return Step(state)

        if char == "/":
            return Step(state.model_copy(update={"mode": Mode.SEARCHING}))
        if char == "f":
            return self._emit(state, lambda p: RevealInFinder(path=p.path))
        if char == "d":
            return self._emit(state, lambda p: OpenDoc(name=p.name))
        if char == "q":
            return Step(state, Quit())
        if char == "r":
            return Step(state, Refresh())
        return Step(state)

    def _handle_searching(self, state: SelectionState, event: KeyEvent) -> Step:
        key = event.key
        if key is Key.UP:
            return Step(self._move(state, -1))
        if key is Key.DOWN:
            return Step(self._move(state, 1))
        if key is Key.ENTER:
            return self._emit(state, lambda p: Open(path=p.path))
        if key is Key.ESCAPE:
            return Step(SelectionState())
        if key is Key.BACKSPACE:
            edited = state.model_copy(update={"query": state.query[:-1]})
            return Step(self.reclamp(edited))
        if key is Key.CHAR and event.char:
            edited = state.model_copy(update={"query": state.query + event.char})
            return Step(self.reclamp(edited))
        return Step(state)

    def _move(self, state: SelectionState, delta: int) -> SelectionState:
        size = len(self.view(state))
        if size == 0:
            return state.model_copy(update={"cursor": 0})
        cursor = min(max(state.cursor + delta, 0), size - 1)
        return state.model_copy(update={"cursor": cursor})

    def _emit(
        self, state: SelectionState, build: Callable[[ProjectRecord], Intent]
    ) -> Step:
        project = self.selected(state)
        if project is None:
            return Step(state)
        return Step(state, build(project))
