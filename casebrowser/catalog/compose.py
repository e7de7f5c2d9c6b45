"""Compose the filtered, ordered view from the active result source.

``compose`` is a pure function of (source, filters, sort mode). Callers
re-run it whenever any of the three changes; the view is never patched.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from casebrowser.catalog.facets import labels_match
from casebrowser.catalog.records import Record, ScoredRecord

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LOWEST_YEAR = -math.inf


class SortMode(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"


@dataclass(frozen=True)
class Filters:
    """Active facet constraints. ``None`` or "" means unconstrained."""

    year: str | None = None
    policy_area: str | None = None

    def accepts(self, record: Record) -> bool:
        ok_year = not self.year or str(record.year) == str(self.year)
        ok_policy = not self.policy_area or labels_match(record.policy_area, self.policy_area)
        return ok_year and ok_policy


@dataclass(frozen=True)
class Baseline:
    records: tuple[Record, ...] = ()


@dataclass(frozen=True)
class SearchResults:
    records: tuple[ScoredRecord, ...]
    query: str


ResultSource = Baseline | SearchResults


def is_search_mode(source: ResultSource) -> bool:
    return isinstance(source, SearchResults)


def parse_year(value: object) -> float:
    """Leading integer of a year value, or -inf when there is none."""
    if isinstance(value, int):
        return float(value)
    match = _LEADING_INT.match(str(value or ""))
    if match is None:
        return _LOWEST_YEAR
    return float(int(match.group(1)))


def _score_key(record: Record) -> float:
    score = getattr(record, "score", None)
    if score is None:
        return math.inf
    try:
        value = float(score)
    except (TypeError, ValueError):
        return math.inf
    if math.isnan(value):
        return math.inf
    return -value


def compose(
    source: ResultSource,
    filters: Filters | None = None,
    sort_mode: SortMode | str = SortMode.NEWEST,
) -> list[Record]:
    """Return the filtered, ordered view of the active source.

    Search results are ordered by descending score (ties keep input order,
    missing scores last) and ignore ``sort_mode``. Baseline records are
    ordered by integer year, newest or oldest first; years without a
    leading integer sort as the lowest value.
    """
    active_filters = filters or Filters()
    candidates: Sequence[Record] = source.records
    kept = [record for record in candidates if active_filters.accepts(record)]

    if isinstance(source, SearchResults):
        # sorted() is stable, so equal scores keep their backend order
        return sorted(kept, key=_score_key)

    mode = SortMode(sort_mode)
    if mode is SortMode.NEWEST:
        return sorted(kept, key=lambda r: -parse_year(r.year))
    return sorted(kept, key=lambda r: parse_year(r.year))
