"""``storydash story`` - look up a story and print its parsed script."""
from __future__ import annotations

from backend.app.content.repository import MasterdataRepository
from backend.app.content.resolvers import StoryLookup
from storydash.commands._output import print_json


def register(subparsers) -> None:
    p = subparsers.add_parser("story", help="Look up a story by Id or ScriptId")
    p.add_argument("story_id", help="Story Id or ScriptId")
    p.add_argument("--masterdata", type=str, help="Masterdata directory (default: from env)")
    p.add_argument("--scripts", type=str, help="Plain script directory (default: from env)")
    p.add_argument("--raw", action="store_true", help="Include raw script text in the output")
    p.set_defaults(func=run)


def run(args) -> int:
    lookup = StoryLookup(MasterdataRepository(args.masterdata, args.scripts))
    result = lookup.lookup_story_by_id(args.story_id)
    if not result["found"]:
        print(f"  ERROR: {result['error']}: {args.story_id}")
        return 1
    if not args.raw:
        result["storyText"].pop("rawContent", None)
    print_json(result)
    return 0
