"""Subsequence scoring for the project filter.

A query matches a text when its characters appear in order (case-insensitive).
Matches are ranked by, in order of priority:

1. ``contiguous``: the query occurs as a substring.
2. ``density``: ``len(query) / span`` where ``span`` is the width of the tightest
   window containing the match; 1.0 for substrings.
3. ``first``: index of the first matched character; earlier is better.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchScore:
    contiguous: bool
    density: float
    first: int

    @property
    def sort_key(self) -> tuple[int, float, int]:
        """Ascending sort key; best matches sort first."""
        return (0 if self.contiguous else 1, -self.density, self.first)


def normalize_query(query: str) -> str:
    return "".join(query.lower().split())


def score(needle: str, text: str) -> MatchScore | None:
    """Score ``needle`` (already normalized) against ``text``; None when it does not match."""
    if not needle:
        return MatchScore(contiguous=True, density=1.0, first=0)
    haystack = text.lower()

    position = haystack.find(needle)
    if position >= 0:
        return MatchScore(contiguous=True, density=1.0, first=position)

    best: tuple[int, int] | None = None
    start = haystack.find(needle[0])
    while start >= 0:
        end = _match_end(needle, haystack, start)
        if end is None:
            # No later start can match either.
            break
        span = end - start + 1
        if best is None or span < best[1]:
            best = (start, span)
        start = haystack.find(needle[0], start + 1)

    if best is None:
        return None
    first, span = best
    return MatchScore(contiguous=False, density=len(needle) / span, first=first)


def _match_end(needle: str, haystack: str, start: int) -> int | None:
    """Index of the last character of a greedy match beginning at ``start``."""
    pos = start
    for char in needle[1:]:
        pos = haystack.find(char, pos + 1)
        if pos < 0:
            return None
    return pos
