"""Case-insensitive substring search with exact-name-first ordering."""
from __future__ import annotations

from typing import Any, Iterable

from backend.app.content.types import RankedMatches, Record

NAME_FIELD = "Name"
DESCRIPTION_FIELD = "Description"
IDENTIFIER_FIELD = "ScriptId"


def _lower_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value.lower()
    return None


def matches_query(record: Record, query_lower: str) -> bool:
    name = _lower_str(record.get(NAME_FIELD))
    if name is not None and query_lower in name:
        return True
    description = _lower_str(record.get(DESCRIPTION_FIELD))
    if description is not None and query_lower in description:
        return True
    identifier = record.get(IDENTIFIER_FIELD)
    # falsy identifiers (0, "") never match, like a missing field
    if identifier and query_lower in str(identifier):
        return True
    return False


def is_exact_match(record: Record, query_lower: str) -> bool:
    return _lower_str(record.get(NAME_FIELD)) == query_lower


def partition_exact(records: Iterable[Record], query_lower: str) -> list[Record]:
    """Exact name matches first, everything else after; scan order kept within each group."""
    exact: list[Record] = []
    partial: list[Record] = []
    for record in records:
        (exact if is_exact_match(record, query_lower) else partial).append(record)
    return exact + partial


def filter_matches(query: str, candidates: Iterable[Record]) -> list[Record]:
    query_lower = query.lower()
    return [r for r in candidates if isinstance(r, dict) and matches_query(r, query_lower)]


def rank(query: str, candidates: Iterable[Record], limit: int | None = None) -> RankedMatches:
    """Scan all candidates, partition exact-first, then cap to ``limit``.

    ``total`` always reports the uncapped match count.
    """
    ordered = partition_exact(filter_matches(query, candidates), query.lower())
    capped = ordered if limit is None else ordered[: max(0, limit)]
    return RankedMatches(results=tuple(capped), total=len(ordered))
