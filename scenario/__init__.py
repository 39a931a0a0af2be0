"""
Scenario

Parses designer-authored, tab separated dialogue scripts into a graph of
topics, questions, answers and comments.

Quick Start:
    from scenario import ScriptParser

    parser = ScriptParser()
    result = parser.parse_file("game/data/CSV/intro.txt")

    for topic in result.topics:
        for block in topic.blocks:
            print(block.question.full_name, block.question.text)
"""

__version__ = "0.1.0"
__author__ = "Developer"

from scenario.core import (
    ColumnSchema,
    DEFAULT_SCHEMA,
    load_schema,
    ScriptError,
    LayoutError,
    StructuralError,
    SourceUnavailableError,
    ScriptNotFoundError,
    ScriptReadError,
)
from scenario.dialog import (
    ScriptParser,
    ParseResult,
    Topic,
    DialogueBlock,
    Question,
    Answer,
    Comment,
    compile_script_file,
)
from scenario.resources import (
    FileScriptSource,
    BundledScriptSource,
    HttpScriptSource,
    load_script_text,
)

__all__ = [
    # Parsing
    "ScriptParser",
    "compile_script_file",
    "ColumnSchema",
    "DEFAULT_SCHEMA",
    "load_schema",
    # Graph
    "ParseResult",
    "Topic",
    "DialogueBlock",
    "Question",
    "Answer",
    "Comment",
    # Sources
    "FileScriptSource",
    "BundledScriptSource",
    "HttpScriptSource",
    "load_script_text",
    # Errors
    "ScriptError",
    "LayoutError",
    "StructuralError",
    "SourceUnavailableError",
    "ScriptNotFoundError",
    "ScriptReadError",
]
