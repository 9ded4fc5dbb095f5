from __future__ import annotations

from typing import Iterable

from backend.app.content.tokenizer import ScriptTokenizer
from backend.app.content.types import (
    Background,
    BackgroundMusic,
    Dialogue,
    ScriptEvent,
    StoryContent,
)


def assemble(events: Iterable[ScriptEvent]) -> StoryContent:
    """Fold tokenized events into a StoryContent in a single forward pass."""
    content = StoryContent()
    meta = content.metadata
    for event in events:
        if isinstance(event, Dialogue):
            content.dialogue.append(event)
            meta.characters.setdefault(event.character, None)
            continue
        if isinstance(event, BackgroundMusic):
            meta.background_music.append(event.track)
        elif isinstance(event, Background):
            meta.backgrounds.append(event.name)
        content.actions.append(event)
    return content


def parse_script(text: str) -> StoryContent:
    return assemble(ScriptTokenizer(text))
