"""``storydash tables`` - list masterdata tables."""
from __future__ import annotations

from backend.app.content.repository import MasterdataRepository


def register(subparsers) -> None:
    p = subparsers.add_parser("tables", help="List masterdata tables with record counts")
    p.add_argument("--masterdata", type=str, help="Masterdata directory (default: from env)")
    p.set_defaults(func=run)


def run(args) -> int:
    repo = MasterdataRepository(args.masterdata)
    tables = repo.list_tables()
    if not tables:
        print(f"  No tables found in {repo.masterdata_root}")
        return 1
    width = max(len(t.name) for t in tables)
    for t in tables:
        print(f"  {t.name:<{width}}  {t.record_count:>6}  {t.description}")
    return 0
