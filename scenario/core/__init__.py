"""
Core parsing pipeline - raw text to classified rows.

Provides:
- Cell tokenizer
- Column schema and layout resolver
- Row classifier
- Error types
"""

from scenario.core.cells import tokenize_cells
from scenario.core.errors import (
    ScriptError,
    LayoutError,
    StructuralError,
    SourceUnavailableError,
    ScriptNotFoundError,
    ScriptReadError,
)
from scenario.core.layout import ColumnLayout, find_column_count, resolve_layout
from scenario.core.rows import (
    RowKind,
    ClassifiedRow,
    classify,
    classify_row,
    classify_rows,
    count_topics,
    is_not_space_only,
)
from scenario.core.schema import ColumnSchema, DEFAULT_SCHEMA, load_schema

__all__ = [
    # Tokenizer
    "tokenize_cells",
    # Errors
    "ScriptError",
    "LayoutError",
    "StructuralError",
    "SourceUnavailableError",
    "ScriptNotFoundError",
    "ScriptReadError",
    # Layout
    "ColumnLayout",
    "ColumnSchema",
    "DEFAULT_SCHEMA",
    "find_column_count",
    "load_schema",
    "resolve_layout",
    # Rows
    "RowKind",
    "ClassifiedRow",
    "classify",
    "classify_row",
    "classify_rows",
    "count_topics",
    "is_not_space_only",
]
