"""Line classifier for story script markup (story_main_*.txt).

Each non-comment line is tried against an ordered list of directive
matchers; the first hit produces the event. Bracketed lines no matcher
claims become ``Other`` events, and bare text is dropped.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from backend.app.content.types import (
    Background,
    BackgroundMusic,
    CharacterAction,
    Dialogue,
    Other,
    ScriptEvent,
)

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class DirectiveMatcher:
    name: str
    pattern: re.Pattern[str]
    build: Callable[..., ScriptEvent]

    def match(self, line: str) -> ScriptEvent | None:
        m = self.pattern.search(line)
        if not m:
            return None
        return self.build(*(g.strip() for g in m.groups()))


# Priority order matters: first match wins.
DIRECTIVE_MATCHERS: tuple[DirectiveMatcher, ...] = (
    DirectiveMatcher(
        "dialogue",
        re.compile(r"\[メッセージ表示\s+(.+?)\s+(.+?)\s+(.+?)\]"),
        lambda character, voice_file, text: Dialogue(character=character, voice_file=voice_file, text=text),
    ),
    DirectiveMatcher(
        "bgm",
        re.compile(r"\[BGM(.+?再生)\s+(.+?)\]"),
        lambda action, track: BackgroundMusic(action=action, track=track),
    ),
    DirectiveMatcher(
        "background",
        re.compile(r"\[背景表示\s+(.+?)\]"),
        lambda name: Background(name=name),
    ),
    DirectiveMatcher(
        "character",
        re.compile(r"\[キャラ(.+?)\s+(.+?)\]"),
        lambda action, details: CharacterAction(action=action, details=details),
    ),
)


def classify_line(line: str, matchers: Iterable[DirectiveMatcher] = DIRECTIVE_MATCHERS) -> ScriptEvent | None:
    """Classify a single raw line. Returns None for lines that yield no event."""
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(COMMENT_PREFIX):
        return None
    for matcher in matchers:
        event = matcher.match(trimmed)
        if event is not None:
            return event
    if trimmed.startswith("[") and trimmed.endswith("]"):
        return Other(content=trimmed)
    return None


def tokenize(text: str) -> Iterator[ScriptEvent]:
    """Yield script events in line order."""
    for line in text.split("\n"):
        event = classify_line(line)
        if event is not None:
            yield event


class ScriptTokenizer:
    """Re-iterable view over the events of one script text."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[ScriptEvent]:
        return tokenize(self.text)
