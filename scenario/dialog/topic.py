"""
Topics - named, contiguous groups of dialogue blocks.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional, Sequence

from scenario.dialog.lines import DialogueBlock


@dataclass
class Topic:
    """
    A conversation branch.

    Attributes:
        name: Topic name (ID cell of its marker row)
        blocks: Ordered copies of the blocks between this marker and the next
        already_played: Runtime flag, False after parsing
        main_stream: Runtime flag, False after parsing
    """
    name: str = ""
    blocks: list[DialogueBlock] = field(default_factory=list)
    already_played: bool = False
    main_stream: bool = False

    def fill(
        self,
        name: str,
        blocks: Sequence[DialogueBlock],
        begin_index: int,
        end_index: int,
    ) -> None:
        """
        Copy ``blocks[begin_index:end_index]`` into this topic.

        Each source block is stamped with the topic name before it is
        copied, so both the flat list and the topic know the owner.
        """
        self.name = name
        for block in blocks[begin_index:end_index]:
            block.topic_name = name
            self.blocks.append(copy.deepcopy(block))
        self.already_played = False
        self.main_stream = False

    def get_block(self, question_name: str) -> Optional[DialogueBlock]:
        """Find a block by its question's short name."""
        for block in self.blocks:
            if block.question.name == question_name:
                return block
        return None
