"""Sorted, immutable collection of scanned projects with fuzzy filtering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ccp.models.projects import ProjectRecord
from ccp.services.fuzzy import MatchScore, normalize_query, score


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Filtered view of the index.

    ``is_filtered`` is False only when no query was applied, so "no query" and
    "query with zero matches" stay distinguishable.
    """

    query: str
    matches: tuple[ProjectRecord, ...]

    @property
    def is_filtered(self) -> bool:
        return bool(normalize_query(self.query))

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def __len__(self) -> int:
        return len(self.matches)


def _recency_key(record: ProjectRecord) -> tuple[int, float, str, str]:
    modified: datetime | None = record.last_modified
    if modified is None:
        return (1, 0.0, record.name, str(record.path))
    return (0, -modified.timestamp(), record.name, str(record.path))


class ProjectIndex:
    """Projects sorted by ``last_modified`` descending, ties by ``name`` ascending.

    Records without a timestamp sort last. The index is never mutated; a
    refresh builds a new one.
    """

    def __init__(self, records: tuple[ProjectRecord, ...]) -> None:
        self._records = records
        self._last: FilterResult | None = None

    @classmethod
    def build(cls, records: Iterable[ProjectRecord]) -> ProjectIndex:
        return cls(tuple(sorted(records, key=_recency_key)))

    @classmethod
    def empty(cls) -> ProjectIndex:
        return cls(())

    @property
    def records(self) -> tuple[ProjectRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def filter(self, query: str) -> FilterResult:
        """Records matching ``query`` best-first; the full index for an empty query."""
        if self._last is not None and self._last.query == query:
            return self._last

        needle = normalize_query(query)
        if not needle:
            result = FilterResult(query=query, matches=self._records)
        else:
            ranked: list[tuple[tuple[int, int, float, int], int, ProjectRecord]] = []
            for position, record in enumerate(self._records):
                key = _rank(needle, record)
                if key is not None:
                    ranked.append((key, position, record))
            ranked.sort(key=lambda item: (item[0], item[1]))
            result = FilterResult(query=query, matches=tuple(r for _, _, r in ranked))

        self._last = result
        return result


def _rank(needle: str, record: ProjectRecord) -> tuple[int, int, float, int] | None:
    """Name matches outrank group-only matches."""
    name_score = score(needle, record.name)
    if name_score is not None:
        return (0, *name_score.sort_key)
    group_score: MatchScore | None = score(needle, record.group) if record.group else None
    if group_score is not None:
        return (1, *group_score.sort_key)
    return None
