from __future__ import annotations

import logging
from typing import Any

from backend.app.config import SCRIPT_FILE_TEMPLATE, SEARCHABLE_STORY_TABLES, STORY_TABLE, story_type_for
from backend.app.content.assembler import parse_script
from backend.app.content.ranker import rank
from backend.app.content.repository import MasterdataRepository
from backend.app.content.resolvers.series_resolver import IDENTITY_FIELD, SeriesResolver
from backend.app.content.types import Record
from shared.config import related_limit, search_limit

logger = logging.getLogger(__name__)

SCRIPT_FIELD = "ScriptId"


def _field_equals(record: Record, field: str, identifier: str) -> bool:
    value = record.get(field)
    if value is None:
        return False
    return str(value) == identifier


def find_story(records: list[Record], identifier: str) -> Record | None:
    """First record whose Id or ScriptId string-equals the identifier.

    A record lacking either field is simply not matched on that field.
    """
    for record in records:
        if not isinstance(record, dict):
            continue
        if _field_equals(record, IDENTITY_FIELD, identifier) or _field_equals(record, SCRIPT_FIELD, identifier):
            return record
    return None


class StoryLookup:
    """Story lookup by id and free-text search over the story tables."""

    def __init__(
        self,
        repository: MasterdataRepository,
        *,
        story_table: str = STORY_TABLE,
        search_tables: tuple[str, ...] = SEARCHABLE_STORY_TABLES,
        sibling_limit: int | None = None,
    ) -> None:
        self.repository = repository
        self.story_table = story_table
        self.search_tables = search_tables
        self.series = SeriesResolver(limit=related_limit() if sibling_limit is None else sibling_limit)

    def load_story_text(self, script_id: Any) -> dict[str, Any]:
        raw = self.repository.load_script_text(script_id)
        if raw is None:
            filename = SCRIPT_FILE_TEMPLATE.format(script_id=script_id)
            return {"found": False, "error": f"Story text file not found: {filename}"}
        return {"found": True, "content": parse_script(raw).to_dict(), "rawContent": raw}

    def lookup_story_by_id(self, identifier: str) -> dict[str, Any]:
        identifier = str(identifier)
        records = self.repository.load_table(self.story_table)
        story = find_story(records, identifier) if records else None
        if story is None:
            logger.info("Story %s not found in %s", identifier, self.story_table)
            return {"found": False, "error": "Story not found", "storyId": identifier}

        script_id = story.get(SCRIPT_FIELD) or story.get(IDENTITY_FIELD)
        return {
            "found": True,
            "story": story,
            "storyType": story_type_for(self.story_table),
            "storyText": self.load_story_text(script_id),
            "relatedStories": self.series.get_siblings(records, story),
        }

    def search_stories(self, query: str, limit: int | None = None) -> dict[str, Any]:
        limit = search_limit() if limit is None else limit
        candidates: list[Record] = []
        for table in self.search_tables:
            records = self.repository.load_table(table)
            if records is None:
                continue
            story_type = story_type_for(table)
            candidates.extend({"table": table, **row, "storyType": story_type} for row in records if isinstance(row, dict))

        ranked = rank(query, candidates, limit=limit)
        return {"results": list(ranked.results), "total": ranked.total, "query": query}
