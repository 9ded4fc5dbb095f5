from __future__ import annotations

from pathlib import Path

from backend.app.content.repository import MasterdataRepository
from backend.app.content.resolvers import StoryLookup, find_story


def _lookup(tool_dir: Path) -> StoryLookup:
    repo = MasterdataRepository(tool_dir / "masterdata", tool_dir / "cache" / "plain")
    return StoryLookup(repo)


def test_lookup_by_id_returns_parsed_script_and_siblings(tool_dir: Path) -> None:
    result = _lookup(tool_dir).lookup_story_by_id("1001")
    assert result["found"] is True
    assert result["story"]["Name"] == "Opening Day"
    assert result["storyType"] == "Adventure Story"
    text = result["storyText"]
    assert text["found"] is True
    assert len(text["content"]["dialogue"]) == 3
    assert text["content"]["metadata"]["characters"] == ["Alice", "Bob"]
    assert "[背景表示 classroom]" in text["rawContent"]
    assert [s["Id"] for s in result["relatedStories"]] == [1002, 1003]


def test_missing_script_still_resolves_siblings(tool_dir: Path) -> None:
    result = _lookup(tool_dir).lookup_story_by_id("1002")
    assert result["found"] is True
    assert result["storyText"]["found"] is False
    assert "story_main_1002.txt" in result["storyText"]["error"]
    assert [s["Id"] for s in result["relatedStories"]] == [1001, 1003]


def test_record_without_script_id_matches_on_id(tool_dir: Path) -> None:
    result = _lookup(tool_dir).lookup_story_by_id("3001")
    assert result["found"] is True
    assert result["relatedStories"] == []
    assert "story_main_3001.txt" in result["storyText"]["error"]


def test_unknown_id_is_not_found(tool_dir: Path) -> None:
    result = _lookup(tool_dir).lookup_story_by_id("9999")
    assert result == {"found": False, "error": "Story not found", "storyId": "9999"}


def test_missing_table_is_not_found(tmp_path: Path) -> None:
    lookup = StoryLookup(MasterdataRepository(tmp_path / "nope", tmp_path / "nope"))
    assert lookup.lookup_story_by_id("1001")["found"] is False


def test_find_story_compares_as_strings_first_match_wins() -> None:
    records = [
        {"Id": 5, "ScriptId": "abc"},
        {"Id": "abc", "ScriptId": 7},
        {"Name": "no identity"},
    ]
    assert find_story(records, "abc") is records[0]
    assert find_story(records, "7") is records[1]
    assert find_story(records, "None") is None


def test_search_partitions_across_tables(tool_dir: Path) -> None:
    result = _lookup(tool_dir).search_stories("festival")
    assert result["total"] == 3
    assert result["query"] == "festival"
    assert [(r["table"], r["Id"]) for r in result["results"]] == [
        ("AdvDatas", 2001),
        ("AdvStoryDigestMovies", 1),
        ("AdvDatas", 1003),
    ]
    assert result["results"][1]["storyType"] == "Story Digest Movie"


def test_search_limit_keeps_total(tool_dir: Path) -> None:
    result = _lookup(tool_dir).search_stories("festival", limit=1)
    assert result["total"] == 3
    assert len(result["results"]) == 1
    assert result["results"][0]["Id"] == 2001


def test_search_by_script_id(tool_dir: Path) -> None:
    result = _lookup(tool_dir).search_stories("9002")
    assert [r["Name"] for r in result["results"]] == ["School Days Digest"]


def test_search_skips_missing_tables(tool_dir: Path) -> None:
    (tool_dir / "masterdata" / "AdvStoryDigestMovies.yaml").unlink()
    result = _lookup(tool_dir).search_stories("festival")
    assert result["total"] == 2
    assert all(r["table"] == "AdvDatas" for r in result["results"])


def test_lookup_by_id_or_script_id_reads_script_file(tool_dir: Path) -> None:
    lookup = _lookup(tool_dir)
    for identifier in ("4001", "5001"):
        result = lookup.lookup_story_by_id(identifier)
        assert result["found"] is True
        assert result["story"]["Name"] == "Night Walk"
        text = result["storyText"]
        assert text["found"] is True
        assert "riverside" in text["rawContent"]
        assert text["content"]["metadata"]["characters"] == ["Mika"]
        assert text["content"]["metadata"]["backgrounds"] == ["riverside"]
        assert result["relatedStories"] == []
