"""
Column schema for dialogue scripts.

Two independent sets of columns describe a script row:

- Slot columns sit at the same fixed position in every row
  (ID, TEXT, TEXT_ID, USER).
- Named columns are located by exact header match anywhere before the
  START marker (NEXT, CONDITION, SCRIPT).

Usage:
    schema = ColumnSchema(next_key="GOTO")
    parser = ScriptParser(schema=schema)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, model_validator


class ColumnSchema(BaseModel):
    """
    Immutable description of a script's column layout.

    Attributes:
        id_column: Slot of the line identifier / topic name
        text_column: Slot of the spoken text (questions and comments)
        text_id_column: Slot of the text identifier (not used for classification)
        user_column: Slot of the player answer text
        next_key: Header name of the NEXT column
        condition_key: Header name of the CONDITION column
        script_key: Header name of the SCRIPT column
        start_marker: Substring marking the end of the header row
        blank_chars: Characters that do not make a cell count as present
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )

    id_column: int = 0
    text_column: int = 1
    text_id_column: int = 2
    user_column: int = 3

    next_key: str = "NEXT"
    condition_key: str = "CONDITION"
    script_key: str = "SCRIPT"

    start_marker: str = "START"
    blank_chars: str = " \n\r\t\""

    @model_validator(mode='after')
    def check_columns(self) -> ColumnSchema:
        slots = self.slot_columns
        if any(index < 0 for index in slots):
            raise ValueError(f"Slot columns must be non-negative: {slots}")
        if len(set(slots)) != len(slots):
            raise ValueError(f"Slot columns must be distinct: {slots}")

        keys = self.named_keys
        if any(not key for key in keys):
            raise ValueError("Named column keys must not be empty")
        if len(set(keys)) != len(keys):
            raise ValueError(f"Named column keys must be distinct: {keys}")

        if not self.start_marker:
            raise ValueError("Start marker must not be empty")
        return self

    @property
    def slot_columns(self) -> tuple[int, int, int, int]:
        return (self.id_column, self.text_column, self.text_id_column, self.user_column)

    @property
    def named_keys(self) -> tuple[str, str, str]:
        return (self.next_key, self.condition_key, self.script_key)


DEFAULT_SCHEMA = ColumnSchema()


def load_schema(path: str | Path) -> ColumnSchema:
    """Load a column schema from a JSON file. Missing fields keep their defaults."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        return ColumnSchema.model_validate_json(f.read())
