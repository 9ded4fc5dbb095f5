from __future__ import annotations

from typing import Any, Iterable

from backend.app.content.types import Record

SERIES_FIELD = "AdvSeriesId"
ORDER_FIELD = "OrderId"
IDENTITY_FIELD = "Id"
DEFAULT_SIBLING_LIMIT = 10


def _order_key(record: Record) -> tuple[int, float]:
    value: Any = record.get(ORDER_FIELD)
    if isinstance(value, bool) or value is None:
        return (1, 0.0)
    try:
        return (0, float(value))
    except (TypeError, ValueError):
        return (1, 0.0)


def resolve_siblings(
    records: Iterable[Record],
    current: Record,
    limit: int | None = DEFAULT_SIBLING_LIMIT,
) -> list[Record]:
    """Other stories in the current record's series, ascending by OrderId.

    Records without a usable OrderId sort after the ordered ones. The cap
    applies to the sorted list.
    """
    series_id = current.get(SERIES_FIELD)
    if not series_id:
        return []
    current_id = current.get(IDENTITY_FIELD)
    siblings = [
        r
        for r in records
        if isinstance(r, dict) and r.get(SERIES_FIELD) == series_id and r.get(IDENTITY_FIELD) != current_id
    ]
    siblings.sort(key=_order_key)
    if limit is None:
        return siblings
    return siblings[: max(0, limit)]


class SeriesResolver:
    def __init__(self, limit: int = DEFAULT_SIBLING_LIMIT) -> None:
        self.limit = limit

    def get_siblings(self, records: Iterable[Record], current: Record) -> list[Record]:
        return resolve_siblings(records, current, limit=self.limit)
