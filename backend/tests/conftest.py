"""Pytest setup: sample masterdata/script tree for story tests."""
from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

ADV_DATAS_YAML = """
- Id: 1001
  ScriptId: 1001
  Name: Opening Day
  Description: The first day at school
  AdvSeriesId: 10
  OrderId: 1
- Id: 1003
  ScriptId: 1003
  Name: After School
  Description: Club activities before the festival
  AdvSeriesId: 10
  OrderId: 3
- Id: 1002
  ScriptId: 1002
  Name: Lunch Break
  Description: A quiet lunch on the roof
  AdvSeriesId: 10
  OrderId: 2
- Id: 2001
  ScriptId: 2001
  Name: Festival
  Description: Preparing the stage
  AdvSeriesId: 20
  OrderId: 1
- Id: 3001
  Name: Lost Script
  Description: Record without a ScriptId
- Id: 4001
  ScriptId: 5001
  Name: Night Walk
  Description: Stars over the river
  No: 7
  Hidden: no
"""

DIGEST_YAML = """
- Id: 1
  ScriptId: 9001
  Name: festival
  Description: Digest of the festival arc
- Id: 2
  ScriptId: 9002
  Name: School Days Digest
  Description: Recap
"""

CHARACTERS_YAML = """
- Id: 1
  Name: Alice
- Id: 2
  Name: Bob
"""

SCRIPT_1001 = """# opening
[背景表示 classroom]
[BGMループ再生 bgm_daily]
[メッセージ表示 Alice voice_001 Hello there]
[キャラ登場 Alice left]
[メッセージ表示 Bob voice_002 Morning!]
[メッセージ表示 Alice voice_003 Ready?]
[フェードアウト 1.0]
stray narration line
"""

SCRIPT_5001 = """[背景表示 riverside]
[メッセージ表示 Mika voice_101 Look at the stars]
"""


@pytest.fixture
def tool_dir(tmp_path: Path) -> Path:
    masterdata = tmp_path / "masterdata"
    plain = tmp_path / "cache" / "plain"
    masterdata.mkdir(parents=True)
    plain.mkdir(parents=True)
    (masterdata / "AdvDatas.yaml").write_text(ADV_DATAS_YAML, encoding="utf-8")
    (masterdata / "AdvStoryDigestMovies.yaml").write_text(DIGEST_YAML, encoding="utf-8")
    (masterdata / "Characters.yaml").write_text(CHARACTERS_YAML, encoding="utf-8")
    (masterdata / "Broken.yaml").write_text("just: a mapping\n", encoding="utf-8")
    (plain / "story_main_1001.txt").write_text(SCRIPT_1001, encoding="utf-8")
    (plain / "story_main_5001.txt").write_text(SCRIPT_5001, encoding="utf-8")
    return tmp_path


@pytest.fixture
def tool_env(tool_dir: Path):
    """Point STORYDASH_* env at the sample tree for the duration of a test."""
    env = {
        "STORYDASH_TOOL_PATH": str(tool_dir),
        "STORYDASH_MASTERDATA_DIR": "",
        "STORYDASH_PLAIN_DIR": "",
    }
    with patch.dict(os.environ, env, clear=False):
        yield tool_dir


@pytest.fixture
def script_text() -> str:
    return SCRIPT_1001
