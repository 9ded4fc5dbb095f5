from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from backend.app.config import SCRIPT_FILE_TEMPLATE
from backend.app.content.types import Record

logger = logging.getLogger(__name__)

# single path component, no leading dot
_TABLE_NAME_RE = re.compile(r"^[\w\-][\w.\-]*$")
_SCRIPT_ID_RE = re.compile(r"^[\w\-][\w.\-]*$")


class TableNotFoundError(FileNotFoundError):
    """Table file is missing, unreadable, or not a list of records."""


class ScriptNotFoundError(FileNotFoundError):
    """Script text file is missing or unreadable."""


class _MasterdataLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans: only true/false, so a ``No:`` column stays a string."""


_MasterdataLoader.yaml_implicit_resolvers = {
    first: [r for r in resolvers if r[0] != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_MasterdataLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _load_yaml(path: Path) -> Any:
    return yaml.load(path.read_text(encoding="utf-8"), Loader=_MasterdataLoader)


def _stringify_keys(row: Any) -> Any:
    # column names are strings on the wire; `1:` or `null:` keys would not be
    if isinstance(row, dict):
        return {str(k): v for k, v in row.items()}
    return row


def table_path(root: Path, table_name: str) -> Path:
    if not _TABLE_NAME_RE.match(table_name or ""):
        raise TableNotFoundError(f"Invalid table name: {table_name!r}")
    return root / f"{table_name}.yaml"


def load_table_file(path: Path) -> list[Record]:
    """Read a whole table file; the top-level document must be a sequence."""
    try:
        data = _load_yaml(path)
    except (OSError, UnicodeDecodeError) as e:
        raise TableNotFoundError(f"Table not readable: {path.name}: {e}") from e
    except yaml.YAMLError as e:
        raise TableNotFoundError(f"Table not parseable: {path.name}: {e}") from e
    if not isinstance(data, list):
        raise TableNotFoundError(f"Invalid data format in {path.name}: expected a list of records")
    return [_stringify_keys(row) for row in data]


def script_path(root: Path, script_id: Any) -> Path:
    script_key = str(script_id)
    if not _SCRIPT_ID_RE.match(script_key):
        raise ScriptNotFoundError(f"Invalid script id: {script_key!r}")
    return root / SCRIPT_FILE_TEMPLATE.format(script_id=script_key)


def read_script_file(root: Path, script_id: Any) -> str:
    path = script_path(root, script_id)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptNotFoundError(f"Story text file not found: {path.name}") from e
