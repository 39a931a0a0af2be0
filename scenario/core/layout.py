"""
Column resolver - finds the row width and the named column offsets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from scenario.core.errors import LayoutError
from scenario.core.schema import ColumnSchema, DEFAULT_SCHEMA

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnLayout:
    """Resolved layout of a script grid."""
    column_count: int
    index_next: int
    index_condition: int
    index_script: int


def find_column_count(cells: Sequence[str], schema: ColumnSchema = DEFAULT_SCHEMA) -> int:
    """Return the index of the first cell containing the start marker."""
    for index, cell in enumerate(cells):
        if schema.start_marker in cell:
            return index

    logger.error(f"No {schema.start_marker} cell found in {len(cells)} cells")
    raise LayoutError(f"No {schema.start_marker} cell found in script header")


def resolve_layout(cells: Sequence[str], schema: ColumnSchema = DEFAULT_SCHEMA) -> ColumnLayout:
    """
    Resolve the column layout from the header row.

    Raises:
        LayoutError: If the start marker is missing, the header is too
            narrow for the slot columns, or a named column is missing.
    """
    column_count = find_column_count(cells, schema)

    widest_slot = max(schema.slot_columns)
    if column_count <= widest_slot:
        logger.error(f"Header has {column_count} columns, slot columns need {widest_slot + 1}")
        raise LayoutError(
            f"Header has {column_count} columns but slot columns need at least {widest_slot + 1}"
        )

    found: dict[str, Optional[int]] = {key: None for key in schema.named_keys}
    for index in range(column_count):
        cell = cells[index]
        if cell in found and found[cell] is None:
            found[cell] = index

    missing = [key for key, index in found.items() if index is None]
    if missing:
        logger.error(f"Named columns not found: {', '.join(missing)} ({column_count} columns)")
        raise LayoutError(f"Named columns not found in header: {', '.join(missing)}")

    layout = ColumnLayout(
        column_count=column_count,
        index_next=found[schema.next_key],
        index_condition=found[schema.condition_key],
        index_script=found[schema.script_key],
    )
    logger.debug(f"Resolved layout: {layout}")
    return layout
