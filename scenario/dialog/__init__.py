"""
Dialog module - dialogue graph built from tabular scripts.

Provides:
- Question / Answer / Comment lines and dialogue blocks
- Topics
- Graph builder
- Script parser and JSON export
- Variable effect extraction
"""

from scenario.dialog.lines import (
    Question,
    Answer,
    Comment,
    DialogueBlock,
    DialogueLine,
    line_kind,
)
from scenario.dialog.topic import Topic
from scenario.dialog.result import ParseResult
from scenario.dialog.effects import (
    VariableAssignment,
    ScriptEffects,
    EffectExtractor,
    extract_effects,
    no_effects,
)
from scenario.dialog.builder import DialogueGraphBuilder
from scenario.dialog.parser import ScriptParser, compile_script_file

__all__ = [
    "Question",
    "Answer",
    "Comment",
    "DialogueBlock",
    "DialogueLine",
    "line_kind",
    "Topic",
    "ParseResult",
    "VariableAssignment",
    "ScriptEffects",
    "EffectExtractor",
    "extract_effects",
    "no_effects",
    "DialogueGraphBuilder",
    "ScriptParser",
    "compile_script_file",
]
