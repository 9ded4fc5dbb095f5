"""Shared configuration constants used by the backend and the CLI."""
from __future__ import annotations

import os
from pathlib import Path


def _env_flag(name: str, default: bool = False) -> bool:
    """Read boolean env flag."""
    val = os.environ.get(name, "").strip().lower()
    if not val:
        return default
    return val in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    """Read int env; falls back to default when unset/invalid."""
    val = os.environ.get(name, "").strip()
    if not val:
        return default
    try:
        return int(val)
    except ValueError:
        return default


# Project root: resolve relative to this file's location
_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def tool_root() -> Path:
    """Root of the extraction tool's working directory (masterdata/, cache/)."""
    raw = os.environ.get("STORYDASH_TOOL_PATH", "").strip()
    if not raw:
        return _PROJECT_ROOT / "data" / "sometool"
    p = Path(raw)
    return p if p.is_absolute() else _PROJECT_ROOT / p


def masterdata_dir() -> Path:
    raw = os.environ.get("STORYDASH_MASTERDATA_DIR", "").strip()
    return Path(raw) if raw else tool_root() / "masterdata"


def plain_script_dir() -> Path:
    """Directory holding decoded story scripts (story_main_<ScriptId>.txt)."""
    raw = os.environ.get("STORYDASH_PLAIN_DIR", "").strip()
    return Path(raw) if raw else tool_root() / "cache" / "plain"


def search_limit() -> int:
    return _env_int("STORYDASH_SEARCH_LIMIT", 50)


def related_limit() -> int:
    return _env_int("STORYDASH_RELATED_LIMIT", 10)


def table_page_size() -> int:
    return _env_int("STORYDASH_TABLE_PAGE_SIZE", 100)
