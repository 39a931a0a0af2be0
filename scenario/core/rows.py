"""
Row classifier - tags every data row of the grid with its kind.

The kind of a row is inferred from which of the ID, TEXT and USER slot
cells are filled:

    ID     | TEXT   | USER   |
    -------+--------+--------+---------
    topic  |        |        | TOPIC
    q1     | quest? |        | QUESTION
           |        | answer | ANSWER
           | coment |        | COMMENT

Any other combination is IGNORED.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Sequence

from scenario.core.layout import ColumnLayout
from scenario.core.schema import ColumnSchema, DEFAULT_SCHEMA


class RowKind(Enum):
    """Kind of a script row."""
    TOPIC = auto()
    QUESTION = auto()
    ANSWER = auto()
    COMMENT = auto()
    IGNORED = auto()


_KINDS = {
    (True, False, False): RowKind.TOPIC,
    (True, True, False): RowKind.QUESTION,
    (False, False, True): RowKind.ANSWER,
    (False, True, False): RowKind.COMMENT,
}


@dataclass(frozen=True)
class ClassifiedRow:
    """
    A normalized, classified data row.

    Slot values are stripped, and empty when the cell holds only blank
    characters. Named column values are kept verbatim.
    """
    row: int            # Row number in the grid (header is row 0)
    offset: int         # Index of the row's first cell
    kind: RowKind
    id: str = ""
    text: str = ""
    user: str = ""
    next: str = ""
    condition: str = ""
    script: str = ""


def is_not_space_only(cell: str, blank_chars: str = DEFAULT_SCHEMA.blank_chars) -> bool:
    """True if the cell holds a character other than spaces, line breaks, tabs or quotes."""
    return any(char not in blank_chars for char in cell)


def classify(id_present: bool, text_present: bool, user_present: bool) -> RowKind:
    """Map slot presence flags to a row kind."""
    return _KINDS.get((id_present, text_present, user_present), RowKind.IGNORED)


def _slot(cell: str, schema: ColumnSchema) -> str:
    return cell.strip() if is_not_space_only(cell, schema.blank_chars) else ""


def iter_row_offsets(cell_count: int, layout: ColumnLayout) -> Iterator[int]:
    """Yield the first cell index of every complete data row."""
    offset = layout.column_count
    while offset + layout.column_count <= cell_count:
        yield offset
        offset += layout.column_count


def classify_row(
    cells: Sequence[str],
    offset: int,
    layout: ColumnLayout,
    schema: ColumnSchema = DEFAULT_SCHEMA,
) -> ClassifiedRow:
    """Classify the row starting at ``offset``. Does not modify ``cells``."""
    id_ = _slot(cells[offset + schema.id_column], schema)
    text = _slot(cells[offset + schema.text_column], schema)
    user = _slot(cells[offset + schema.user_column], schema)

    return ClassifiedRow(
        row=offset // layout.column_count,
        offset=offset,
        kind=classify(bool(id_), bool(text), bool(user)),
        id=id_,
        text=text,
        user=user,
        next=cells[offset + layout.index_next],
        condition=cells[offset + layout.index_condition],
        script=cells[offset + layout.index_script],
    )


def classify_rows(
    cells: Sequence[str],
    layout: ColumnLayout,
    schema: ColumnSchema = DEFAULT_SCHEMA,
) -> list[ClassifiedRow]:
    """Classify every complete data row, in grid order."""
    return [
        classify_row(cells, offset, layout, schema)
        for offset in iter_row_offsets(len(cells), layout)
    ]


def count_topics(rows: Sequence[ClassifiedRow]) -> int:
    """Count topic-marker rows, including the leading "start" sentinel."""
    return sum(1 for row in rows if row.kind is RowKind.TOPIC)
