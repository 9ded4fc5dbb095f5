"""
FastAPI endpoints for browsing masterdata tables and reading stories.
Every request re-reads the underlying files.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from backend.app.content.loader import TableNotFoundError
from backend.app.content.repository import MasterdataRepository
from backend.app.content.resolvers import StoryLookup
from backend.app.models.story import (
    StoryLookupResponse,
    StorySearchResponse,
    TableListResponse,
    TablePageResponse,
)
from shared.config import search_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/database", tags=["database"])


def get_repository() -> MasterdataRepository:
    return MasterdataRepository()


def get_story_lookup(repository: MasterdataRepository = Depends(get_repository)) -> StoryLookup:
    return StoryLookup(repository)


@router.get("/list", response_model=TableListResponse)
def list_tables(repository: MasterdataRepository = Depends(get_repository)):
    """List masterdata tables with record counts."""
    return {"databases": [t.to_dict() for t in repository.list_tables()]}


@router.get("/table/{table_name}", response_model=TablePageResponse)
def get_table(
    table_name: str,
    limit: Optional[int] = Query(None, ge=0),
    offset: int = Query(0, ge=0),
    search: Optional[str] = None,
    repository: MasterdataRepository = Depends(get_repository),
):
    """
    Return one page of a table.
    Optionally filter rows by a case-insensitive substring over all values.
    """
    try:
        return repository.get_table_page(table_name, limit=limit, offset=offset, search=search)
    except TableNotFoundError as e:
        logger.warning("Table request failed for %s: %s", table_name, e)
        raise HTTPException(status_code=404, detail=f"Table '{table_name}' not found")


@router.get("/stories/search", response_model=StorySearchResponse)
def search_stories(
    q: str = Query(..., description="Free-text query"),
    limit: Optional[int] = Query(None, ge=0),
    lookup: StoryLookup = Depends(get_story_lookup),
):
    """Search story tables; exact name matches first."""
    return lookup.search_stories(q, limit=search_limit() if limit is None else limit)


@router.get("/stories/{story_id}", response_model=StoryLookupResponse)
def get_story(story_id: str, lookup: StoryLookup = Depends(get_story_lookup)):
    """Look up a story by Id or ScriptId and parse its script."""
    return lookup.lookup_story_by_id(story_id)
