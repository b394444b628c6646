from datetime import datetime, timezone

from wcparser.cli import count_messages_by_author, main
from wcparser.models import Message

CHAT_EXAMPLE = """06/03/2017, 00:45 - You created group "ShortChat"
06/03/2017, 00:45 - Sample User: This is a test message
08/05/2017, 01:48 - TestBot: Hey I'm a test too!
09/04/2017, 01:50 - Sample User: How are you?
Is everything alright?"""

WHEN = datetime(2020, 1, 1, tzinfo=timezone.utc)


def make(author):
    return Message(date=WHEN, author=author, message="m")


def test_count_messages_by_author_orders_and_skips_system():
    messages = [make("a"), make("b"), make("a"), make(None)]
    assert count_messages_by_author(messages) == [("a", 2), ("b", 1)]


def test_count_messages_by_author_empty():
    assert count_messages_by_author([]) == []


def test_count_messages_by_author_invariants():
    authors = ["x", "y", "y", "z", "y", "x", None, None]
    counts = count_messages_by_author(make(a) for a in authors)
    values = [count for _, count in counts]
    assert values == sorted(values, reverse=True)
    assert sum(values) == sum(a is not None for a in authors)
    assert {name for name, _ in counts} == {a for a in authors if a is not None}


def test_main_prints_ranking(tmp_path, capsys):
    path = tmp_path / "chat.txt"
    path.write_bytes(CHAT_EXAMPLE.encode("utf-8"))
    status = main([str(path)])
    lines = capsys.readouterr().out.splitlines()
    assert status == 0
    assert lines[0] == "Users by message count:"
    assert lines[1:] == ["Sample User: 2", "TestBot: 1"]


def test_main_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "absent.txt")])
    captured = capsys.readouterr()
    assert status == 1
    assert "absent.txt" in captured.err
    assert captured.out == ""