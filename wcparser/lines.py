"""Grouping of raw log lines into messages."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models import RawMessage

_SHARED = (
    r"^(?:\u200e|\u200f)*\[?"
    r"(\d{1,4}[-/.]\s?\d{1,4}[-/.]\s?\d{1,4})[,.]?\s\D*?"
    r"(\d{1,2}[.:]\d{1,2}(?:[.:]\d{1,2})?)"
    r"(?:(?:\s|\u202f)([AaPp](?:\.\s?|\s?)[Mm]\.?))?"
    r"\]?(?:\s-|:)?\s"
)
_AUTHOR_AND_MESSAGE = r"(?s:(.+?):\s(.*))"
_MESSAGE = r"(?s:(.*))"

USER_MESSAGE_PATTERN = re.compile(_SHARED + _AUTHOR_AND_MESSAGE)
"""Matches a message line with an author: date, time, am/pm, author, text."""

SYSTEM_MESSAGE_PATTERN = re.compile(_SHARED + _MESSAGE)
"""Matches a message line without an author: date, time, am/pm, text."""

_RULE = "DEBUG: ====================================="


def make_array_of_messages(
    lines: Iterable[str], debug: bool = False
) -> list[RawMessage]:
    """Merge continuation lines into the message before them.

    Lines that start a message but have no author are flagged as system
    messages. Lines before the first message are dropped. With ``debug``
    set, progress is printed to standard output.
    """
    lines = list(lines)
    messages: list[RawMessage] = []

    if debug:
        print(f"DEBUG: Starting message aggregation with {len(lines)} lines")
        print(f"DEBUG: User message regex: {USER_MESSAGE_PATTERN.pattern}")
        print(f"DEBUG: System message regex: {SYSTEM_MESSAGE_PATTERN.pattern}")
        print(_RULE)

    for number, line in enumerate(lines, start=1):
        if debug:
            print(f"DEBUG: Processing line {number}: {line!r}")

        if USER_MESSAGE_PATTERN.match(line):
            if debug:
                print("DEBUG: Detected user message")
            messages.append(RawMessage(system=False, msg=line))
        elif SYSTEM_MESSAGE_PATTERN.match(line):
            if debug:
                print("DEBUG: Detected system message")
            messages.append(RawMessage(system=True, msg=line))
        elif messages:
            if debug:
                print("DEBUG: Appending to previous message (multiline)")
            messages[-1].msg += "\n" + line
        elif debug:
            print(
                "DEBUG: Line doesn't match any pattern and no previous message exists"
            )

    if debug:
        system_count = sum(message.system for message in messages)
        print(_RULE)
        print("DEBUG: Message aggregation complete!")
        print(f"DEBUG: Total messages found: {len(messages)}")
        print(f"DEBUG: - User messages: {len(messages) - system_count}")
        print(f"DEBUG: - System messages: {system_count}")
        print(_RULE)

    return messages