"""Textual application bootstrap: project list, key routing, run_app()."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from result import Ok
from textual import events
from textual.app import App, ComposeResult, SuspendNotSupported
from textual.binding import Binding
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from ccp.models.projects import DisplayRow
from ccp.models.selection import (
    Intent,
    Key,
    KeyEvent,
    Open,
    Quit,
    Refresh,
    SelectionState,
)
from ccp.services.container import PickerServices
from ccp.services.index import ProjectIndex
from ccp.services.selection import SelectionController
from ccp.ui.theme import APP_CSS, render_footer, render_header, render_row

if TYPE_CHECKING:
    from ccp.config import Config

logger = logging.getLogger(__name__)

STATUS_SECONDS = 4.0

_NAMED_KEYS = {
    "up": Key.UP,
    "down": Key.DOWN,
    "enter": Key.ENTER,
    "escape": Key.ESCAPE,
    "backspace": Key.BACKSPACE,
}


def to_key_event(event: events.Key) -> KeyEvent | None:
    """Reduce a Textual key press to the picker's key vocabulary."""
    named = _NAMED_KEYS.get(event.key)
    if named is not None:
        return KeyEvent(key=named)
    if event.is_printable and event.character:
        return KeyEvent.of(event.character)
    return None


class ProjectList(OptionList, inherit_bindings=False):
    """Project rows. Key routing is done in ``PickerApp.on_key``."""


class PickerApp(App[None]):
    """Interactive project picker."""

    CSS = APP_CSS
    TITLE = "Claude Code Projects"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("f5", "rescan", "Refresh", show=False),
    ]

    def __init__(self, services: PickerServices) -> None:
        super().__init__()
        self._services = services
        self._controller = SelectionController(ProjectIndex.empty())
        self.state = SelectionState()
        self._status = ""
        self._status_timer = None
        self._rows: list[DisplayRow] | None = None
        self._generation = 0

    def compose(self) -> ComposeResult:
        yield Static(id="header")
        yield ProjectList(id="project-list")
        yield Static(id="footer")

    def on_mount(self) -> None:
        self.refresh_projects()
        self.query_one("#project-list", ProjectList).focus()

    # -- Data ---------------------------------------------------------------

    def action_rescan(self) -> None:
        self.refresh_projects()

    def refresh_projects(self) -> None:
        """Re-scan all roots and replace the index wholesale."""
        index = self._services.build_index()
        self.state = self._controller.replace_index(index, self.state)
        self._redraw()

    # -- Key routing --------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        key_event = to_key_event(event)
        if key_event is None:
            return
        event.stop()
        event.prevent_default()

        step = self._controller.handle(self.state, key_event)
        self.state = step.state
        self._redraw()
        if step.intent is not None:
            self._dispatch(step.intent)

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        # Highlights queued before the last rebuild refer to a list that is gone.
        if event.option_id is None or not event.option_id.startswith(f"{self._generation}:"):
            return
        if event.option_index != self.state.cursor:
            self.state = self.state.model_copy(update={"cursor": event.option_index})

    def _dispatch(self, intent: Intent) -> None:
        if isinstance(intent, Quit):
            self.exit()
            return
        if isinstance(intent, Refresh):
            self.refresh_projects()
            self._set_status(f"Rescanned {len(self._controller.index)} projects")
            return

        if isinstance(intent, Open):
            try:
                with self.suspend():
                    result = self._services.launcher.launch(intent)
            except SuspendNotSupported as exc:
                logger.warning("Cannot suspend to launch claude: %s", exc)
                self._set_status("Cannot suspend in this environment")
                return
        else:
            result = self._services.launcher.launch(intent)

        if isinstance(result, Ok):
            self._set_status(result.ok_value)
        else:
            logger.info("Launch failed: %s", result.err_value)
            self._set_status(result.err_value)

    # -- Rendering ----------------------------------------------------------

    def _redraw(self) -> None:
        frame = self._controller.render(self.state)
        self.query_one("#header", Static).update(
            render_header(frame.mode, frame.query, len(frame.rows), frame.total)
        )

        project_list = self.query_one("#project-list", ProjectList)
        if frame.rows != self._rows:
            self._rows = frame.rows
            self._generation += 1
            project_list.clear_options()
            project_list.add_options(
                [
                    Option(render_row(row), id=f"{self._generation}:{position}")
                    for position, row in enumerate(frame.rows)
                ]
            )
        project_list.highlighted = frame.cursor

        self._update_footer()

    def _update_footer(self) -> None:
        self.query_one("#footer", Static).update(render_footer(self.state.mode, self._status))

    def _set_status(self, message: str) -> None:
        self._status = message
        self._update_footer()
        if self._status_timer is not None:
            self._status_timer.stop()
        self._status_timer = self.set_timer(STATUS_SECONDS, self._clear_status)

    def _clear_status(self) -> None:
        self._status = ""
        self._status_timer = None
        self._update_footer()


def run_app(config: Config) -> None:
    """Entry point: scan projects, then run the picker until the user quits."""
    from textual.logging import TextualHandler

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        handlers=[TextualHandler()],
    )
    services = PickerServices.create(config)
    PickerApp(services).run()
