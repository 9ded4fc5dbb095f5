"""
Response models for the masterdata/story endpoints.
Record rows are passed through as plain dicts; their columns vary per table.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class TableSummary(BaseModel):
    """One masterdata table in the listing."""
    name: str = Field(..., description="Table name (file stem)")
    type: str = Field("yaml", description="Storage format")
    description: str = Field(..., description="Keyword-derived table description")
    recordCount: int = Field(0, ge=0, description="Number of records (0 when unreadable)")


class TableListResponse(BaseModel):
    databases: List[TableSummary] = Field(default_factory=list)


class TablePageResponse(BaseModel):
    """A filtered, paginated slice of one table."""
    data: List[Any] = Field(default_factory=list, description="Rows; usually mappings, scalars pass through")
    total: int = Field(0, ge=0, description="Match count before pagination")
    columns: List[str] = Field(default_factory=list, description="Columns of the first record")
    tableName: str
    limit: int
    offset: int
    search: Optional[str] = None


class DialogueLine(BaseModel):
    character: str
    voiceFile: str
    text: str


class StoryMetadata(BaseModel):
    characters: List[str] = Field(default_factory=list, description="Unique speakers")
    backgroundMusic: List[str] = Field(default_factory=list, description="BGM tracks in play order")
    backgrounds: List[str] = Field(default_factory=list, description="Backgrounds in display order")


class StoryContentModel(BaseModel):
    dialogue: List[DialogueLine] = Field(default_factory=list)
    actions: List[Dict[str, str]] = Field(default_factory=list, description="Non-dialogue events in line order")
    metadata: StoryMetadata = Field(default_factory=StoryMetadata)


class StoryText(BaseModel):
    """Parsed script, or the reason it is unavailable."""
    found: bool
    content: Optional[StoryContentModel] = None
    rawContent: Optional[str] = None
    error: Optional[str] = None


class StoryLookupResponse(BaseModel):
    found: bool
    story: Optional[Dict[str, Any]] = None
    storyType: Optional[str] = None
    storyText: Optional[StoryText] = None
    relatedStories: Optional[List[Dict[str, Any]]] = None
    error: Optional[str] = None
    storyId: Optional[str] = None


class StorySearchResponse(BaseModel):
    results: List[Dict[str, Any]] = Field(default_factory=list, description="Ranked matches (capped)")
    total: int = Field(0, ge=0, description="Match count before the cap")
    query: str
