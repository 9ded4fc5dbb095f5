from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Record = dict[str, Any]

EVENT_DIALOGUE = "dialogue"
EVENT_BGM = "bgm"
EVENT_BACKGROUND = "background"
EVENT_CHARACTER = "character"
EVENT_OTHER = "other"


@dataclass(frozen=True)
class Dialogue:
    character: str
    voice_file: str
    text: str
    kind: str = field(default=EVENT_DIALOGUE, init=False)

    def to_dict(self) -> dict[str, str]:
        return {"character": self.character, "voiceFile": self.voice_file, "text": self.text}


@dataclass(frozen=True)
class BackgroundMusic:
    action: str
    track: str
    kind: str = field(default=EVENT_BGM, init=False)

    def to_dict(self) -> dict[str, str]:
        return {"type": self.kind, "action": self.action, "value": self.track}


@dataclass(frozen=True)
class Background:
    name: str
    kind: str = field(default=EVENT_BACKGROUND, init=False)

    def to_dict(self) -> dict[str, str]:
        return {"type": self.kind, "value": self.name}


@dataclass(frozen=True)
class CharacterAction:
    action: str
    details: str
    kind: str = field(default=EVENT_CHARACTER, init=False)

    def to_dict(self) -> dict[str, str]:
        return {"type": self.kind, "action": self.action, "details": self.details}


@dataclass(frozen=True)
class Other:
    content: str
    kind: str = field(default=EVENT_OTHER, init=False)

    def to_dict(self) -> dict[str, str]:
        return {"type": self.kind, "content": self.content}


ScriptEvent = Union[Dialogue, BackgroundMusic, Background, CharacterAction, Other]
ActionEvent = Union[BackgroundMusic, Background, CharacterAction, Other]


@dataclass
class StoryMetadata:
    # characters: set semantics; dict keeps first-seen order for stable output
    characters: dict[str, None] = field(default_factory=dict)
    background_music: list[str] = field(default_factory=list)
    backgrounds: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "characters": list(self.characters),
            "backgroundMusic": list(self.background_music),
            "backgrounds": list(self.backgrounds),
        }


@dataclass
class StoryContent:
    dialogue: list[Dialogue] = field(default_factory=list)
    actions: list[ActionEvent] = field(default_factory=list)
    metadata: StoryMetadata = field(default_factory=StoryMetadata)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dialogue": [d.to_dict() for d in self.dialogue],
            "actions": [a.to_dict() for a in self.actions],
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class TableInfo:
    name: str
    type: str = "yaml"
    description: str = "Game data"
    record_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "recordCount": self.record_count,
        }


@dataclass(frozen=True)
class RankedMatches:
    results: tuple[Record, ...] = ()
    total: int = 0
