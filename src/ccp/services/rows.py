"""Turn project records into render-ready rows."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from ccp.models.projects import DisplayRow, ProjectRecord

UNKNOWN_TIME = "—"


def format_relative_time(moment: datetime | None, now: datetime | None = None) -> str:
    """Format a timestamp as relative time (e.g. '2h ago', '3d ago')."""
    if moment is None:
        return UNKNOWN_TIME
    now = now or datetime.now(tz=UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)

    seconds = int((now - moment).total_seconds())
    if seconds < 0:
        return UNKNOWN_TIME
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 30:
        return f"{days}d ago"
    if days < 365:
        return f"{days // 30}mo ago"
    return f"{days // 365}y ago"


def display_row(record: ProjectRecord, now: datetime | None = None) -> DisplayRow:
    return DisplayRow(
        group=record.group,
        name=record.name,
        branch=record.git_status.display,
        config_labels=tuple(label.display for label in record.config_labels),
        has_doc=record.has_doc,
        relative_last_modified=format_relative_time(record.last_modified, now),
    )


def display_rows(records: Iterable[ProjectRecord], now: datetime | None = None) -> list[DisplayRow]:
    now = now or datetime.now(tz=UTC)
    return [display_row(record, now) for record in records]


def row_text(row: DisplayRow) -> str:
    """Plain one-line rendering used by the ``list`` command."""
    parts = [f"{row.group:>10}", row.name]
    if row.branch:
        parts.append(row.branch)
    if row.config_labels:
        parts.append(" ".join(row.config_labels))
    if row.has_doc:
        parts.append("doc")
    parts.append(row.relative_last_modified)
    return "  ".join(parts)
