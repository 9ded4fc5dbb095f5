from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from backend.app.config import DEFAULT_TABLE_DESCRIPTION, TABLE_DESCRIPTIONS
from backend.app.content.loader import (
    ScriptNotFoundError,
    TableNotFoundError,
    load_table_file,
    read_script_file,
    table_path,
)
from backend.app.content.types import Record, TableInfo
from shared.config import masterdata_dir, plain_script_dir, table_page_size

logger = logging.getLogger(__name__)


def describe_table(name: str) -> str:
    for keywords, description in TABLE_DESCRIPTIONS:
        if any(k in name for k in keywords):
            return description
    return DEFAULT_TABLE_DESCRIPTION


def _row_matches(row: Any, needle: str) -> bool:
    if not isinstance(row, dict):
        return bool(row) and needle in str(row).lower()
    for value in row.values():
        if not value:
            continue
        if needle in str(value).lower():
            return True
    return False


class MasterdataRepository:
    """Read-through access to masterdata tables and plain script files.

    Nothing is cached: every call re-reads from disk. Directories default to
    the env-configured locations and are resolved on each call.
    """

    def __init__(self, masterdata_root: Path | str | None = None, script_root: Path | str | None = None) -> None:
        self._masterdata_root = Path(masterdata_root) if masterdata_root else None
        self._script_root = Path(script_root) if script_root else None

    @property
    def masterdata_root(self) -> Path:
        return self._masterdata_root or masterdata_dir()

    @property
    def script_root(self) -> Path:
        return self._script_root or plain_script_dir()

    def read_table(self, table_name: str) -> list[Record]:
        """Load a table or raise TableNotFoundError."""
        return load_table_file(table_path(self.masterdata_root, table_name))

    def load_table(self, table_name: str) -> list[Record] | None:
        """Load a table; None when it is missing or unreadable."""
        try:
            return self.read_table(table_name)
        except TableNotFoundError as e:
            logger.warning("Table %s unavailable: %s", table_name, e)
            return None

    def load_script_text(self, script_id: Any) -> str | None:
        try:
            return read_script_file(self.script_root, script_id)
        except ScriptNotFoundError as e:
            logger.warning("Script %s unavailable: %s", script_id, e)
            return None

    def list_tables(self) -> list[TableInfo]:
        root = self.masterdata_root
        if not root.exists() or not root.is_dir():
            logger.warning("Masterdata directory missing: %s", root)
            return []
        tables: list[TableInfo] = []
        for fp in root.glob("*.yaml"):
            if not fp.is_file():
                continue
            name = fp.stem
            try:
                record_count = len(load_table_file(fp))
            except TableNotFoundError:
                record_count = 0
            tables.append(TableInfo(name=name, description=describe_table(name), record_count=record_count))
        tables.sort(key=lambda t: t.name.lower())
        return tables

    def get_table_page(
        self,
        table_name: str,
        limit: int | None = None,
        offset: int = 0,
        search: str | None = None,
    ) -> dict[str, Any]:
        """Filter/paginate one table. Raises TableNotFoundError for missing tables."""
        data = self.read_table(table_name)
        limit = table_page_size() if limit is None else max(0, limit)
        offset = max(0, offset)

        filtered = data
        if search:
            needle = search.lower()
            filtered = [row for row in data if _row_matches(row, needle)]

        first = data[0] if data else None
        columns = list(first.keys()) if isinstance(first, dict) else []

        return {
            "data": filtered[offset : offset + limit],
            "total": len(filtered),
            "columns": columns,
            "tableName": table_name,
            "limit": limit,
            "offset": offset,
            "search": search or None,
        }
