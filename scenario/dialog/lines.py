"""
Dialogue lines and blocks.

A line is exactly one of Question, Answer or Comment:

- Question: an NPC line addressed by ``name``, owning ordered Answers
- Answer: a player reply, owning ordered Comments
- Comment: an NPC reaction to an Answer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from scenario.dialog.effects import VariableAssignment


@dataclass
class _Line:
    """Fields shared by every kind of line."""
    text: str = ""
    full_name: str = ""
    next: str = ""              # full_name of the line to play next, "" for none
    condition: str = ""         # Opaque guard expression
    before_effects: list[VariableAssignment] = field(default_factory=list)
    after_effects: list[VariableAssignment] = field(default_factory=list)


@dataclass
class Comment(_Line):
    pass


@dataclass
class Answer(_Line):
    comments: list[Comment] = field(default_factory=list)

    def add_comment(self, comment: Comment) -> Comment:
        """Attach a comment and give it the next ``Com_<n>`` name."""
        self.comments.append(comment)
        comment.full_name = f"{self.full_name}.Com_{len(self.comments)}"
        return comment


@dataclass
class Question(_Line):
    name: str = ""
    answers: list[Answer] = field(default_factory=list)

    @property
    def main_stream(self) -> bool:
        """True for top-level questions (name without a sub-branch dot)."""
        return "." not in self.name


DialogueLine = Union[Question, Answer, Comment]


@dataclass
class DialogueBlock:
    """One question together with its answers."""
    question: Question
    topic_name: str = ""

    @property
    def answers(self) -> list[Answer]:
        return self.question.answers

    @property
    def main_stream(self) -> bool:
        return self.question.main_stream

    def add_answer(self, answer: Answer) -> Answer:
        """Attach an answer and give it the next ``Rep_<n>`` name."""
        self.question.answers.append(answer)
        answer.full_name = f"{self.question.full_name}.Rep_{len(self.question.answers)}"
        return answer

    def get_answer(self, index: int) -> Optional[Answer]:
        if 0 <= index < len(self.question.answers):
            return self.question.answers[index]
        return None

    def iter_lines(self):
        """Yield the question, then each answer followed by its comments."""
        yield self.question
        for answer in self.question.answers:
            yield answer
            yield from answer.comments


def line_kind(line: DialogueLine) -> str:
    """Name of the line's variant."""
    if isinstance(line, Question):
        return "question"
    if isinstance(line, Answer):
        return "answer"
    if isinstance(line, Comment):
        return "comment"
    raise TypeError(f"Not a dialogue line: {type(line).__name__}")
