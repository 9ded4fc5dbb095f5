"""App config: story table names, script file naming, env-backed limits.

Filesystem locations come from shared.config and are resolved per call so
that env overrides (STORYDASH_TOOL_PATH etc.) apply without a restart.
"""
from __future__ import annotations

import logging

from shared.config import (
    masterdata_dir,
    plain_script_dir,
    related_limit,
    search_limit,
    table_page_size,
    tool_root,
)

logger = logging.getLogger(__name__)

# Origin table for id lookup and sibling resolution
STORY_TABLE = "AdvDatas"

# Tables searched by free-text query, in result concatenation order
SEARCHABLE_STORY_TABLES: tuple[str, ...] = ("AdvDatas", "AdvStoryDigestMovies")

STORY_TYPES: dict[str, str] = {
    "AdvDatas": "Adventure Story",
    "AdvStoryDigestMovies": "Story Digest Movie",
}
UNKNOWN_STORY_TYPE = "Unknown"

SCRIPT_FILE_TEMPLATE = "story_main_{script_id}.txt"

# Keyword -> description for the table listing; first hit wins.
TABLE_DESCRIPTIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("Adv",), "Adventure/Story data"),
    (("Story",), "Story content"),
    (("Character",), "Character information"),
    (("Music", "Live"), "Music and Live data"),
    (("Card",), "Card game data"),
    (("Mission",), "Mission and quest data"),
)
DEFAULT_TABLE_DESCRIPTION = "Game data"


def story_type_for(table: str) -> str:
    return STORY_TYPES.get(table, UNKNOWN_STORY_TYPE)


def log_resolved_paths() -> None:
    """Log resolved data locations at startup."""
    logger.info(
        "Story data paths: tool=%s masterdata=%s plain=%s (search_limit=%d related_limit=%d page_size=%d)",
        tool_root(),
        masterdata_dir(),
        plain_script_dir(),
        search_limit(),
        related_limit(),
        table_page_size(),
    )
