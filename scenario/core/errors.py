"""
Errors raised while acquiring or parsing a dialogue script.

The tokenizer and the row classifier never raise. Only layout resolution,
the graph builder and script acquisition can fail, and any failure aborts
the whole load (no partial graph is returned).
"""

from __future__ import annotations


class ScriptError(Exception):
    """Base class for dialogue script parse failures."""


class LayoutError(ScriptError, ValueError):
    """The header row does not describe a usable column layout."""


class StructuralError(ScriptError, ValueError):
    """
    A row appears where the dialogue structure does not allow it.

    Attributes:
        row: Zero-based row number in the cell grid (row 0 is the header)
        column: Zero-based column of the offending cell
        text: Content of the offending cell
    """

    def __init__(self, message: str, row: int, column: int, text: str = ""):
        self.row = row
        self.column = column
        self.text = text
        super().__init__(f"{message} (row {row}, column {column}): {text!r}")


class SourceUnavailableError(OSError):
    """The raw script text could not be acquired."""


class ScriptNotFoundError(SourceUnavailableError):
    """The script resource does not exist."""


class ScriptReadError(SourceUnavailableError):
    """The script resource exists but reading it failed."""
