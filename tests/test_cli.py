"""Smoke tests for the storydash CLI wrapper.

Run with: python -m pytest tests/test_cli.py -v
"""
from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]

ADV_DATAS_YAML = """
- Id: 11
  ScriptId: 11
  Name: Rainy Morning
  AdvSeriesId: 3
  OrderId: 1
- Id: 12
  ScriptId: 12
  Name: Clear Skies
  AdvSeriesId: 3
  OrderId: 2
"""

SCRIPT = "[背景表示 street]\n[メッセージ表示 Mika v_11 It's raining]\n"


def _run_cli(*args: str, tool: Path | None = None, timeout: int = 30) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONIOENCODING"] = "utf-8"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(_ROOT), env.get("PYTHONPATH", "")]))
    if tool is not None:
        env["STORYDASH_TOOL_PATH"] = str(tool)
        env.pop("STORYDASH_MASTERDATA_DIR", None)
        env.pop("STORYDASH_PLAIN_DIR", None)
    return subprocess.run(
        [sys.executable, "-m", "storydash", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=timeout,
        env=env,
        cwd=str(_ROOT),
    )


@pytest.fixture
def tool(tmp_path: Path) -> Path:
    (tmp_path / "masterdata").mkdir()
    (tmp_path / "cache" / "plain").mkdir(parents=True)
    (tmp_path / "masterdata" / "AdvDatas.yaml").write_text(ADV_DATAS_YAML, encoding="utf-8")
    (tmp_path / "cache" / "plain" / "story_main_11.txt").write_text(SCRIPT, encoding="utf-8")
    return tmp_path


class TestCLIHelp:
    """Verify that all subcommands register and print help without errors."""

    def test_main_help(self):
        result = _run_cli("--help")
        assert result.returncode == 0
        for command in ("story", "search", "tables", "parse"):
            assert command in result.stdout

    def test_search_help(self):
        result = _run_cli("search", "--help")
        assert result.returncode == 0
        assert "--limit" in result.stdout


class TestCommands:
    def test_story_prints_parsed_script(self, tool):
        result = _run_cli("story", "11", tool=tool)
        assert result.returncode == 0, result.stderr
        body = json.loads(result.stdout)
        assert body["found"] is True
        assert body["storyText"]["content"]["metadata"]["characters"] == ["Mika"]
        assert "rawContent" not in body["storyText"]
        assert [s["Id"] for s in body["relatedStories"]] == [12]

    def test_story_not_found(self, tool):
        result = _run_cli("story", "999", tool=tool)
        assert result.returncode == 1
        assert "Story not found" in result.stdout

    def test_search(self, tool):
        result = _run_cli("search", "skies", tool=tool)
        assert result.returncode == 0
        body = json.loads(result.stdout)
        assert body["total"] == 1
        assert body["results"][0]["storyType"] == "Adventure Story"

    def test_search_requires_query(self, tool):
        result = _run_cli("search", tool=tool)
        assert result.returncode == 1
        assert "ERROR" in result.stdout

    def test_tables(self, tool):
        result = _run_cli("tables", tool=tool)
        assert result.returncode == 0
        assert "AdvDatas" in result.stdout

    def test_parse_file(self, tool):
        path = tool / "cache" / "plain" / "story_main_11.txt"
        result = _run_cli("parse", str(path))
        assert result.returncode == 0
        body = json.loads(result.stdout)
        assert body["actions"] == [{"type": "background", "value": "street"}]

    def test_parse_missing_file(self, tmp_path):
        result = _run_cli("parse", str(tmp_path / "missing.txt"))
        assert result.returncode == 1
        assert "not found" in result.stdout.lower()
