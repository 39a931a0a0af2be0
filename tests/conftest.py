import os
import sys
import pytest

# Ensure scenario modules can be imported
sys.path.append(os.getcwd())

HEADER = ["ID", "TEXT", "TEXT_ID", "USER", "NEXT", "CONDITION", "SCRIPT"]
FIELDS = ["id", "text", "text_id", "user", "next", "condition", "script"]


def _build_script(rows: list[dict], header: list[str] = HEADER) -> str:
    lines = ["\t".join(header)]
    for row in rows:
        lines.append("\t".join(row.get(name, "") for name in FIELDS))
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_script():
    """
    Build script text from row dicts.

    Keys are the lowercase slot/named column names (id, text, user, next,
    condition, script); missing keys are empty cells.
    """
    return _build_script


@pytest.fixture
def sample_rows():
    """Two real topics after the "start" sentinel."""
    return [
        {"id": "START"},
        {"id": "Intro", "next": "Intro;Shop"},
        {"id": "Q1", "text": "Hello there!"},
        {"user": "Hi!", "next": "Intro.Q2"},
        {"text": "Nice to meet you."},
        {"user": "Go away.", "script": "$mood = angry"},
        {"text": "Rude."},
        {"text": "Very rude."},
        {"id": "Q2", "text": "Anything else?"},
        {"user": "No."},
        {"id": "Shop"},
        {"id": "Q1", "text": "What do you want?", "condition": "gold > 10",
         "script": "enter: $visited_shop = true"},
        {"user": "A sword."},
        {"id": "Q1.sub", "text": "Are you sure?"},
        {"user": "Yes."},
        {},
    ]


@pytest.fixture
def sample_script(make_script, sample_rows):
    return make_script(sample_rows)


@pytest.fixture
def parser():
    """Fresh ScriptParser for each test."""
    from scenario.dialog.parser import ScriptParser
    return ScriptParser()
