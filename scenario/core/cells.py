"""
Cell tokenizer - splits raw script text into a flat list of cells.

Tabs and newlines separate cells. Double quotes wrap content that may
contain separators; the quotes themselves are dropped. Carriage returns
outside quotes are ignored.
"""

from __future__ import annotations

QUOTE = '"'
SEPARATORS = frozenset('\t\n')


def tokenize_cells(text: str) -> list[str]:
    """
    Split script text into cells.

    Never fails. An unterminated quote keeps everything up to the end of
    the input inside the current cell. The last cell is always emitted,
    even when empty.
    """
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in text:
        if in_quotes:
            if char == QUOTE:
                in_quotes = False
            else:
                current.append(char)
        elif char == QUOTE:
            in_quotes = True
        elif char == '\r':
            continue
        elif char in SEPARATORS:
            cells.append(''.join(current))
            current = []
        else:
            current.append(char)

    cells.append(''.join(current))
    return cells
