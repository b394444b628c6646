import pytest

from wcparser.lines import (
    SYSTEM_MESSAGE_PATTERN,
    USER_MESSAGE_PATTERN,
    make_array_of_messages,
)
from wcparser.models import RawMessage

MULTILINE = ["23/06/2018, 01:55 p.m. - Loris: one", "two"]
SYSTEM = ['06/03/2017, 00:45 - You created group "Test"']
EMPTY = ["03/02/17, 18:42 - Luke: "]
MULTILINE_SYSTEM = [
    '06/03/2017, 00:45 - You created group "Test"',
    "This is another line",
]


def test_multiline_is_merged():
    assert make_array_of_messages(MULTILINE)[0].msg == (
        "23/06/2018, 01:55 p.m. - Loris: one\ntwo"
    )


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (MULTILINE, False),
        (EMPTY, False),
        (MULTILINE_SYSTEM, True),
        (SYSTEM, True),
    ],
)
def test_system_flag(lines, expected):
    assert make_array_of_messages(lines)[0].system is expected


def test_datetime_inside_multiline_is_not_a_new_message():
    lines = [
        "23/06/2018, 01:55 p.m. - Loris: one",
        "two",
        "2016-04-29 10:30:00",
    ]
    result = make_array_of_messages(lines)
    assert len(result) == 1
    assert result[0].msg == "23/06/2018, 01:55 p.m. - Loris: one\ntwo\n2016-04-29 10:30:00"


def test_multiline_system_message_is_merged():
    result = make_array_of_messages(MULTILINE_SYSTEM)
    assert result == [
        RawMessage(
            system=True,
            msg='06/03/2017, 00:45 - You created group "Test"\nThis is another line',
        )
    ]


def test_leading_orphan_lines_are_dropped():
    result = make_array_of_messages(["orphan", "another", *EMPTY])
    assert result == [RawMessage(system=False, msg="03/02/17, 18:42 - Luke: ")]


def test_empty_input():
    assert make_array_of_messages([]) == []


def test_accepts_any_iterable():
    result = make_array_of_messages(line for line in MULTILINE + SYSTEM)
    assert [m.system for m in result] == [False, True]
    assert len(result) == 2


def test_bracketed_line_with_marks_is_user_message():
    line = "\u200e[23/10/21, 18:44:02] Iago: \u200esticker omitted"
    assert make_array_of_messages([line]) == [RawMessage(system=False, msg=line)]


def test_user_pattern_groups():
    match = USER_MESSAGE_PATTERN.match("23/06/2018, 01:55 p.m. - Loris: one")
    assert match.groups() == ("23/06/2018", "01:55", "p.m.", "Loris", "one")


def test_user_pattern_narrow_space_ampm():
    match = USER_MESSAGE_PATTERN.match("3/6/18, 1:55\u202fPM - a: m")
    assert match.groups() == ("3/6/18", "1:55", "PM", "a", "m")


def test_system_pattern_groups():
    match = SYSTEM_MESSAGE_PATTERN.match(SYSTEM[0])
    assert match.groups() == ("06/03/2017", "00:45", None, 'You created group "Test"')


def test_user_pattern_message_spans_lines():
    match = USER_MESSAGE_PATTERN.match("06/03/2017, 00:45 - A: one\ntwo")
    assert match.group(5) == "one\ntwo"


def test_debug_output(capsys):
    result = make_array_of_messages(["orphan", *MULTILINE, *SYSTEM], debug=True)
    out = capsys.readouterr().out
    assert len(result) == 2
    assert "Total messages found: 2" in out
    assert "- User messages: 1" in out
    assert "- System messages: 1" in out
    assert "no previous message exists" in out


def test_no_output_without_debug(capsys):
    make_array_of_messages(MULTILINE)
    assert capsys.readouterr().out == ""