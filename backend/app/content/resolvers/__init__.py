from backend.app.content.resolvers.series_resolver import SeriesResolver, resolve_siblings
from backend.app.content.resolvers.story_resolver import StoryLookup, find_story

__all__ = ["SeriesResolver", "StoryLookup", "find_story", "resolve_siblings"]
