"""
Parse result - the dialogue graph handed to the runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from scenario.dialog.lines import DialogueBlock, DialogueLine
from scenario.dialog.topic import Topic


@dataclass
class ParseResult:
    """
    Everything built from one script.

    Attributes:
        topics: Real topics, in script order (the "start" sentinel is excluded)
        dialogue_blocks: Flat list of every block, in script order
        custom_topic_list: Free-form NEXT cell of the first row after the sentinel
    """
    topics: list[Topic] = field(default_factory=list)
    dialogue_blocks: list[DialogueBlock] = field(default_factory=list)
    custom_topic_list: str = ""

    def get_topic(self, name: str) -> Optional[Topic]:
        for topic in self.topics:
            if topic.name == name:
                return topic
        return None

    def iter_lines(self) -> Iterator[DialogueLine]:
        """Yield every line of every topic in document order."""
        for topic in self.topics:
            for block in topic.blocks:
                yield from block.iter_lines()

    def find_line(self, full_name: str) -> Optional[DialogueLine]:
        """Resolve a ``next`` reference to the line it names."""
        for line in self.iter_lines():
            if line.full_name == full_name:
                return line
        return None

    @property
    def question_count(self) -> int:
        return sum(len(topic.blocks) for topic in self.topics)
