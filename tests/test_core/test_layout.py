import pytest

from scenario.core.errors import LayoutError
from scenario.core.layout import find_column_count, resolve_layout
from scenario.core.schema import ColumnSchema


def test_resolve_layout():
    cells = ["ID", "TEXT", "USER", "NEXT", "CONDITION", "SCRIPT", "START"]
    layout = resolve_layout(cells)

    assert layout.column_count == 6
    assert layout.index_next == 3
    assert layout.index_condition == 4
    assert layout.index_script == 5


def test_start_marker_matches_substring():
    cells = ["ID", "TEXT", "TEXT_ID", "USER", "NEXT", "CONDITION", "SCRIPT", "[START]"]
    assert find_column_count(cells) == 7


def test_missing_start_marker():
    cells = ["ID", "TEXT", "TEXT_ID", "USER", "NEXT", "CONDITION", "SCRIPT"]
    with pytest.raises(LayoutError, match="START"):
        resolve_layout(cells)


def test_missing_named_column():
    cells = ["ID", "TEXT", "TEXT_ID", "USER", "NEXT", "SCRIPT", "START"]
    with pytest.raises(LayoutError, match="CONDITION"):
        resolve_layout(cells)


def test_named_column_after_start_is_not_found():
    cells = ["ID", "TEXT", "TEXT_ID", "USER", "NEXT", "CONDITION", "START", "SCRIPT"]
    with pytest.raises(LayoutError, match="SCRIPT"):
        resolve_layout(cells)


def test_named_column_at_offset_zero_is_found():
    schema = ColumnSchema(id_column=1, text_column=2, text_id_column=3, user_column=4)
    cells = ["NEXT", "ID", "TEXT", "TEXT_ID", "USER", "CONDITION", "SCRIPT", "START"]
    layout = resolve_layout(cells, schema)

    assert layout.index_next == 0
    assert layout.index_condition == 5


def test_first_match_wins():
    cells = ["ID", "TEXT", "TEXT_ID", "USER", "NEXT", "CONDITION", "SCRIPT", "NEXT", "START"]
    assert resolve_layout(cells).index_next == 4


def test_header_narrower_than_slots():
    with pytest.raises(LayoutError):
        resolve_layout(["NEXT", "CONDITION", "START"])


def test_custom_keys():
    schema = ColumnSchema(next_key="GOTO", condition_key="IF", script_key="DO")
    cells = ["ID", "TEXT", "TEXT_ID", "USER", "DO", "IF", "GOTO", "START"]
    layout = resolve_layout(cells, schema)

    assert (layout.index_next, layout.index_condition, layout.index_script) == (6, 5, 4)
