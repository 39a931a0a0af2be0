"""
Graph builder - assembles topics, blocks and lines from classified rows.

A single forward pass keeps a small running state (current topic,
current question, current answer number). Topic marker rows close the
previous topic; the first marker is the "start" sentinel and never
becomes a Topic.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from scenario.core.errors import StructuralError
from scenario.core.rows import ClassifiedRow, RowKind, count_topics
from scenario.core.schema import ColumnSchema, DEFAULT_SCHEMA
from scenario.dialog.effects import EffectExtractor, extract_effects
from scenario.dialog.lines import Answer, Comment, DialogueBlock, Question
from scenario.dialog.result import ParseResult
from scenario.dialog.topic import Topic

logger = logging.getLogger(__name__)


class DialogueGraphBuilder:
    """
    Builds the dialogue graph from classified rows.

    Usage:
        builder = DialogueGraphBuilder()
        result = builder.build(rows)
    """

    def __init__(
        self,
        effect_extractor: EffectExtractor = extract_effects,
        schema: ColumnSchema = DEFAULT_SCHEMA,
    ):
        self.effect_extractor = effect_extractor
        self.schema = schema

    def build(self, rows: Sequence[ClassifiedRow], custom_topic_list: str = "") -> ParseResult:
        """
        Walk the rows in order and build the graph.

        Raises:
            StructuralError: A comment with no answer, or an answer with
                no question, in the current topic.
        """
        topics_count = count_topics(rows)
        topics = [Topic() for _ in range(max(topics_count - 1, 0))]
        blocks: list[DialogueBlock] = []

        current_topic_id = 0
        current_topic_name = ""
        begin_index = 0
        current_block: Optional[DialogueBlock] = None
        current_answer_id = 0

        for row in rows:
            if row.kind is RowKind.TOPIC:
                if current_topic_id > 1:
                    topics[current_topic_id - 2].fill(
                        current_topic_name, blocks, begin_index, len(blocks)
                    )

                current_topic_name = row.id
                begin_index = len(blocks)
                current_topic_id += 1
                current_block = None
                current_answer_id = 0

            elif row.kind is RowKind.QUESTION:
                question = Question(name=row.id, text=row.text)
                self._apply_row(question, row)
                question.full_name = f"{current_topic_name}.{row.id}"

                current_block = DialogueBlock(question=question)
                current_answer_id = 0
                blocks.append(current_block)

            elif row.kind is RowKind.ANSWER:
                if current_block is None:
                    logger.error(f"Answer without question at row {row.row}: {row.user!r}")
                    raise StructuralError(
                        "Answer without a preceding question",
                        row.row, self.schema.user_column, row.user,
                    )

                current_answer_id += 1
                answer = Answer(text=row.user)
                self._apply_row(answer, row)
                current_block.add_answer(answer)

            elif row.kind is RowKind.COMMENT:
                if current_block is None or current_answer_id == 0:
                    logger.error(f"Comment without answer at row {row.row}: {row.text!r}")
                    raise StructuralError(
                        "Comment without a preceding answer",
                        row.row, self.schema.text_column, row.text,
                    )

                comment = Comment(text=row.text)
                self._apply_row(comment, row)
                current_block.answers[current_answer_id - 1].add_comment(comment)

            else:
                logger.debug(f"Ignoring row {row.row}")

        if current_topic_id > 1:
            topics[current_topic_id - 2].fill(
                current_topic_name, blocks, begin_index, len(blocks)
            )

        logger.debug(f"Built {len(topics)} topics from {len(blocks)} blocks")
        return ParseResult(
            topics=topics,
            dialogue_blocks=blocks,
            custom_topic_list=custom_topic_list,
        )

    def _apply_row(self, line: Question | Answer | Comment, row: ClassifiedRow) -> None:
        """Copy the named-column values and script effects onto a line."""
        line.next = row.next
        line.condition = row.condition

        effects = self.effect_extractor(row.script)
        line.before_effects = list(effects.before)
        line.after_effects = list(effects.after)
