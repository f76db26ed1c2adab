"""Discover project directories under the configured scan roots."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from pathlib import Path

from ccp.config import ScanRoot
from ccp.data.protocols import DocFinder, LabelProvider, StatusProvider
from ccp.models.projects import ProjectRecord

logger = logging.getLogger(__name__)

_JUNK_NAMES = frozenset({".DS_Store"})


class ProjectScanner:
    """Builds one ProjectRecord per child directory of each scan root.

    The result is unsorted; ordering belongs to ``ProjectIndex``.
    """

    def __init__(
        self,
        status_provider: StatusProvider,
        label_provider: LabelProvider,
        doc_finder: DocFinder | None = None,
    ) -> None:
        self._status = status_provider
        self._labels = label_provider
        self._docs = doc_finder

    def scan(
        self,
        roots: Sequence[ScanRoot | Path],
        excludes: Iterable[str] = (),
    ) -> list[ProjectRecord]:
        excluded = set(excludes)
        records: list[ProjectRecord] = []
        seen: set[Path] = set()
        for root in roots:
            scan_root = root if isinstance(root, ScanRoot) else ScanRoot(path=root, group=root.name)
            for child in _project_dirs(scan_root.path, excluded):
                if child in seen:
                    continue
                record = self._build_record(child, scan_root.group)
                if record is None:
                    continue
                seen.add(child)
                records.append(record)
        logger.info("Scanned %d projects in %d roots", len(records), len(roots))
        return records

    def _build_record(self, path: Path, group: str) -> ProjectRecord | None:
        try:
            git = self._status.read(path)
            labels = self._labels.scan(path)
            last_modified = git.last_commit if git.status.is_repo else None
            if last_modified is None:
                last_modified = newest_child_mtime(path)
            has_doc = self._docs is not None and self._docs.match(path.name) is not None
        except OSError as exc:
            logger.warning("Skipping unreadable project %s: %s", path, exc)
            return None

        return ProjectRecord(
            name=path.name,
            path=path,
            group=group,
            git_status=git.status,
            last_modified=last_modified,
            config_labels=tuple(labels),
            has_doc=has_doc,
        )


def newest_child_mtime(path: Path) -> datetime:
    """Newest mtime among visible direct children, else the directory's own mtime.

    Raises OSError when ``path`` itself cannot be listed or stat'ed.
    """
    newest: float | None = None
    for entry in path.iterdir():
        if _is_hidden(entry.name):
            continue
        try:
            mtime = entry.stat().st_mtime
        except OSError:
            continue
        if newest is None or mtime > newest:
            newest = mtime
    if newest is None:
        newest = path.stat().st_mtime
    return datetime.fromtimestamp(newest, tz=UTC)


def _project_dirs(root: Path, excluded: set[str]) -> list[Path]:
    try:
        entries = sorted(root.iterdir())
    except FileNotFoundError:
        logger.info("Scan directory not found: %s", root)
        return []
    except OSError as exc:
        logger.warning("Cannot list scan directory %s: %s", root, exc)
        return []

    dirs: list[Path] = []
    for entry in entries:
        if _is_hidden(entry.name) or entry.name in excluded:
            continue
        try:
            if entry.is_dir():
                dirs.append(entry)
        except OSError:
            continue
    return dirs


def _is_hidden(name: str) -> bool:
    return name.startswith(".") or name in _JUNK_NAMES
