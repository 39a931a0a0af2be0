from scenario.dialog.lines import Answer, DialogueBlock, Question
from scenario.dialog.topic import Topic


def make_blocks(*names):
    return [DialogueBlock(question=Question(name=name, full_name=f"T.{name}")) for name in names]


def test_fill_copies_range():
    blocks = make_blocks("Q1", "Q2", "Q3", "Q4")
    topic = Topic()
    topic.fill("T", blocks, 1, 3)

    assert topic.name == "T"
    assert [b.question.name for b in topic.blocks] == ["Q2", "Q3"]
    assert all(b.topic_name == "T" for b in topic.blocks)


def test_fill_stamps_source_blocks():
    blocks = make_blocks("Q1", "Q2")
    Topic().fill("T", blocks, 0, 1)

    assert blocks[0].topic_name == "T"
    assert blocks[1].topic_name == ""


def test_fill_copies_are_independent():
    blocks = make_blocks("Q1")
    topic = Topic()
    topic.fill("T", blocks, 0, 1)

    blocks[0].add_answer(Answer(text="late"))
    assert topic.blocks[0] is not blocks[0]
    assert topic.blocks[0].answers == []


def test_fill_resets_flags():
    topic = Topic(already_played=True, main_stream=True)
    topic.fill("T", [], 0, 0)

    assert not topic.already_played
    assert not topic.main_stream
    assert topic.blocks == []


def test_get_block():
    topic = Topic()
    topic.fill("T", make_blocks("Q1", "Q1.a"), 0, 2)

    assert topic.get_block("Q1.a").question.full_name == "T.Q1.a"
    assert topic.get_block("Q9") is None
