"""``storydash parse`` - parse a local script file without touching masterdata."""
from __future__ import annotations

from pathlib import Path

from backend.app.content.assembler import parse_script
from storydash.commands._output import print_json


def register(subparsers) -> None:
    p = subparsers.add_parser("parse", help="Parse a story script file and print dialogue/actions")
    p.add_argument("path", help="Path to a story_main_*.txt file")
    p.set_defaults(func=run)


def run(args) -> int:
    path = Path(args.path)
    if not path.is_file():
        print(f"  ERROR: Script file not found: {path}")
        return 1
    print_json(parse_script(path.read_text(encoding="utf-8")).to_dict())
    return 0
