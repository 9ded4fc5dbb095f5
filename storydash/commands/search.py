"""``storydash search`` - search the story tables from the command line."""
from __future__ import annotations

from backend.app.content.repository import MasterdataRepository
from backend.app.content.resolvers import StoryLookup
from shared.config import search_limit
from storydash.commands._output import print_json


def register(subparsers) -> None:
    p = subparsers.add_parser("search", help="Search stories by name, description or script id")
    p.add_argument("text", nargs="?", help="Search query text")
    p.add_argument("--query", type=str, help="Search query (alternative to positional)")
    p.add_argument("--limit", type=int, default=None, help="Max results (default: STORYDASH_SEARCH_LIMIT or 50)")
    p.add_argument("--masterdata", type=str, help="Masterdata directory (default: from env)")
    p.set_defaults(func=run)


def run(args) -> int:
    query_text = args.text or args.query
    if not query_text:
        print("  ERROR: No query text provided")
        print("  Usage: storydash search \"your search text\"")
        print("     or: storydash search --query \"your search text\"")
        return 1

    lookup = StoryLookup(MasterdataRepository(args.masterdata))
    limit = search_limit() if args.limit is None else args.limit
    print_json(lookup.search_stories(query_text, limit=limit))
    return 0
