"""
Script parser - converts tabular dialogue scripts to a dialogue graph.

Scripts are spreadsheet exports: tab separated cells, one row per line,
double quotes around cells that contain tabs or newlines.

```
ID	TEXT	TEXT_ID	USER	NEXT	CONDITION	SCRIPT
START
Intro
Q1	Hello there!
			Hi!	Intro.Q2
		Nice to meet you.
```

Every row carries as many cells as the header (trailing empty cells
included). The header ends at the first cell containing START. Rows are then
classified by which of ID / TEXT / USER are filled and assembled into
Topics, DialogueBlocks, Questions, Answers and Comments.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from scenario.core.cells import tokenize_cells
from scenario.core.layout import ColumnLayout, resolve_layout
from scenario.core.rows import classify_rows
from scenario.core.schema import ColumnSchema, DEFAULT_SCHEMA
from scenario.dialog.builder import DialogueGraphBuilder
from scenario.dialog.effects import EffectExtractor, VariableAssignment, extract_effects
from scenario.dialog.lines import Answer, Comment, DialogueBlock, Question
from scenario.dialog.result import ParseResult
from scenario.resources.loader import ScriptSource, load_script_text

logger = logging.getLogger(__name__)


class ScriptParser:
    """
    Parses dialogue scripts.

    Every parse is all-or-nothing: on error the exception propagates and
    no result is returned.
    """

    def __init__(
        self,
        schema: ColumnSchema = DEFAULT_SCHEMA,
        effect_extractor: EffectExtractor = extract_effects,
    ):
        self.schema = schema
        self.effect_extractor = effect_extractor

    def load(self, locator: str | Path, source: Optional[ScriptSource] = None) -> ParseResult:
        """Acquire a script through ``source`` and parse it."""
        return self.parse_string(load_script_text(locator, source))

    def parse_file(self, path: str | Path) -> ParseResult:
        """Parse a script file."""
        return self.load(path)

    def parse_string(self, content: str) -> ParseResult:
        """Parse a script string."""
        cells = tokenize_cells(content)
        layout = resolve_layout(cells, self.schema)
        rows = classify_rows(cells, layout, self.schema)

        builder = DialogueGraphBuilder(self.effect_extractor, self.schema)
        result = builder.build(rows, custom_topic_list=self._custom_topic_list(cells, layout))

        logger.info(
            f"Parsed script: {layout.column_count} columns, "
            f"{len(rows)} rows, "
            f"{len(result.topics)} topics, "
            f"{len(result.dialogue_blocks)} blocks."
        )
        return result

    @staticmethod
    def _custom_topic_list(cells: list[str], layout: ColumnLayout) -> str:
        """NEXT cell of the first row after the "start" sentinel row."""
        index = 2 * layout.column_count + layout.index_next
        return cells[index] if index < len(cells) else ""

    def to_json(self, result: ParseResult) -> dict:
        """Convert a parse result to JSON format."""
        return {
            'custom_topic_list': result.custom_topic_list,
            'topics': [
                {
                    'name': topic.name,
                    'blocks': [_block_to_json(block) for block in topic.blocks],
                }
                for topic in result.topics
            ],
        }

    def save_json(self, result: ParseResult, path: str | Path) -> None:
        """Save a parse result as JSON."""
        path = Path(path)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_json(result), f, indent=2, ensure_ascii=False)


def _effects_to_json(effects: list[VariableAssignment]) -> Optional[list[dict]]:
    if not effects:
        return None
    return [{'name': effect.name, 'value': effect.value} for effect in effects]


def _line_to_json(line: Question | Answer | Comment) -> dict:
    return {
        'full_name': line.full_name,
        'text': line.text,
        'next': line.next or None,
        'condition': line.condition or None,
        'before': _effects_to_json(line.before_effects),
        'after': _effects_to_json(line.after_effects),
    }


def _block_to_json(block: DialogueBlock) -> dict:
    question = _line_to_json(block.question)
    question['name'] = block.question.name
    question['main_stream'] = block.main_stream
    question['answers'] = [
        {
            **_line_to_json(answer),
            'comments': [_line_to_json(comment) for comment in answer.comments],
        }
        for answer in block.answers
    ]
    return question


def compile_script_file(input_path: str | Path, output_path: Optional[str | Path] = None) -> None:
    """
    Compile a dialogue script to JSON.

    Args:
        input_path: Path to the tab separated script
        output_path: Path to output .json file (default: same name with .json)
    """
    input_path = Path(input_path)
    if output_path is None:
        output_path = input_path.with_suffix('.json')
    else:
        output_path = Path(output_path)

    parser = ScriptParser()
    result = parser.parse_file(input_path)
    parser.save_json(result, output_path)
    logger.info(f"Compiled {input_path} -> {output_path}")
