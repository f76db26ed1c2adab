"""Styling for the Textual UI: CSS, colors, row and header rendering."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from ccp.models.projects import DisplayRow
from ccp.models.selection import Mode

COLORS = {
    "accent": "cyan",
    "dim": "bright_black",
    "name": "white",
    "branch": "magenta",
    "doc": "green",
    "query": "yellow",
}

APP_CSS = """
Screen {
    background: $surface;
}

#header {
    dock: top;
    height: 3;
    padding: 1 1 0 1;
    border-bottom: solid $primary-darken-2;
}

#project-list {
    height: 1fr;
    border: none;
    padding: 1 1 0 1;
}

#project-list > .option-list--option-highlighted {
    background: $primary-darken-2;
    color: cyan;
    text-style: bold;
}

#footer {
    dock: bottom;
    height: 2;
    padding: 0 1;
    border-top: solid $primary-darken-2;
}
"""

BROWSING_HINTS = (
    ("↑↓/jk", "navigate"),
    ("enter", "open claude"),
    ("f", "finder"),
    ("d", "docs"),
    ("/", "search"),
    ("r", "refresh"),
    ("q", "quit"),
)

SEARCHING_HINTS = (
    ("esc", "clear"),
    ("enter", "open"),
    ("↑↓", "navigate"),
)


def render_row(row: DisplayRow) -> Table:
    """One list entry: project details on the left, age on the right."""
    left = Text()
    left.append(f"{row.group:>10} ", style=COLORS["dim"])
    left.append(row.name, style=COLORS["name"])
    if row.branch:
        left.append(f"  {row.branch}", style=COLORS["branch"])
    if row.config_labels:
        left.append(f"  {' '.join(row.config_labels)}", style=COLORS["dim"])
    if row.has_doc:
        left.append(" doc", style=COLORS["doc"])

    grid = Table.grid(expand=True)
    grid.add_column(ratio=1, no_wrap=True, overflow="ellipsis")
    grid.add_column(justify="right", no_wrap=True)
    grid.add_row(left, Text(row.relative_last_modified, style=COLORS["dim"]))
    return grid


def render_header(mode: Mode, query: str, shown: int, total: int) -> Text:
    text = Text()
    if mode is Mode.SEARCHING:
        text.append(" / ", style=f"bold {COLORS['query']}")
        text.append(query, style=COLORS["name"])
        text.append("▌", style=COLORS["query"])
        text.append(f"  {shown}/{total}", style=COLORS["dim"])
        return text
    text.append(" Claude Code Projects", style=f"bold {COLORS['accent']}")
    text.append(f"  {total} projects", style=COLORS["dim"])
    return text


def render_footer(mode: Mode, status: str = "") -> Text:
    text = Text()
    if status:
        text.append(f" {status}", style=f"bold {COLORS['doc']}")
        return text
    hints = SEARCHING_HINTS if mode is Mode.SEARCHING else BROWSING_HINTS
    for key, label in hints:
        text.append(f" {key} ", style=COLORS["accent"])
        text.append(f"{label} ", style=COLORS["dim"])
    return text
