"""Match projects to their markdown notes (e.g. an Obsidian folder)."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# Share of tokens two names must have in common (intersection over union).
MIN_OVERLAP = 0.5

_SEPARATORS = re.compile(r"[\W_]+")


def normalize(name: str) -> str:
    """Lower-case, turn punctuation/hyphens/underscores into spaces, collapse whitespace."""
    return " ".join(_SEPARATORS.sub(" ", name.lower()).split())


def overlap(left: str, right: str) -> float:
    """Similarity of two normalized names in ``[0, 1]``.

    Names that are equal once spaces are removed score 1.0, so
    ``daily-digest`` matches ``Daily Digest`` as well as ``DailyDigest``.
    """
    if not left or not right:
        return 0.0
    if left.replace(" ", "") == right.replace(" ", ""):
        return 1.0
    a, b = set(left.split()), set(right.split())
    return len(a & b) / len(a | b)


class DocMatcher:
    """DocFinder over the markdown files directly inside ``doc_root``."""

    def __init__(self, doc_root: Path | None, min_overlap: float = MIN_OVERLAP) -> None:
        self._root = doc_root
        self._min_overlap = min_overlap
        self._stems: dict[Path, str] | None = None

    @property
    def doc_root(self) -> Path | None:
        return self._root

    def match(self, project_name: str) -> Path | None:
        target = normalize(project_name)
        best: Path | None = None
        best_score = 0.0
        for path, stem in self._documents().items():
            score = overlap(target, stem)
            if score > best_score:
                best, best_score = path, score
        if best is None or best_score < self._min_overlap:
            return None
        return best

    def reload(self) -> None:
        """Forget the cached folder listing."""
        self._stems = None

    def _documents(self) -> dict[Path, str]:
        if self._stems is None:
            self._stems = _list_documents(self._root)
        return self._stems


def _list_documents(root: Path | None) -> dict[Path, str]:
    if root is None:
        return {}
    try:
        entries = sorted(root.iterdir())
    except OSError as exc:
        logger.info("Doc folder unavailable %s: %s", root, exc)
        return {}
    return {
        entry: normalize(entry.stem)
        for entry in entries
        if entry.suffix.lower() == ".md" and _is_file(entry)
    }


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False
