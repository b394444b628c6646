"""Turning raw chat messages into structured messages."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import NamedTuple

from .dates import (
    convert_time_12_to_24,
    days_before_months,
    normalize_ampm,
    normalize_date,
    normalize_time,
    order_date_components,
)
from .lines import SYSTEM_MESSAGE_PATTERN, USER_MESSAGE_PATTERN
from .models import Attachment, Message, ParseOptions, RawMessage

ATTACHMENT_PATTERN = re.compile(
    r"^(?:\u200e|\u200f)*(?:<.+:(.+)>|([\w-]+\.\w+)\s[(<].+[)>])"
)
"""Matches the attachment notices written by the various exporters."""

_DIRECTION_MARKS = str.maketrans("", "", "\u200e\u200f")
_RULE = "DEBUG: ====================================="


class _Fields(NamedTuple):
    date: str
    time: str
    ampm: str | None
    author: str | None
    message: str


def parse_message_attachment(message: str) -> Attachment | None:
    """Return the attachment named in ``message``, or None if there is none."""
    match = ATTACHMENT_PATTERN.match(message)
    if match is None:
        return None
    name = match.group(1) or match.group(2) or ""
    return Attachment(file_name=name.strip())


def _extract(raw: RawMessage) -> _Fields:
    pattern = SYSTEM_MESSAGE_PATTERN if raw.system else USER_MESSAGE_PATTERN
    match = pattern.match(raw.msg)
    if match is None:
        raise ValueError(f"message does not start with a date and time: {raw.msg!r}")
    if raw.system:
        author, text = None, match.group(4) or ""
    else:
        author, text = match.group(4), match.group(5) or ""
    return _Fields(
        date=match.group(1) or "",
        time=match.group(2) or "",
        ampm=match.group(3),
        author=author,
        message=text.translate(_DIRECTION_MARKS).strip(),
    )


def _to_int(text: str, default: int) -> int:
    try:
        return int(text)
    except ValueError:
        return default


def _normalized_time(fields: _Fields) -> str:
    if fields.ampm is not None:
        return normalize_time(
            convert_time_12_to_24(fields.time, normalize_ampm(fields.ampm))
        )
    return normalize_time(fields.time)


def _build_date(fields: _Fields, days_first: bool | None, debug: bool) -> datetime:
    first, second, year = order_date_components(fields.date)
    day, month = (second, first) if days_first is False else (first, second)
    year, month, day = normalize_date(year, month, day)
    time = _normalized_time(fields)
    if debug:
        print(f"DEBUG: Date components: day={day}, month={month}, year={year}")
        print(f"DEBUG: Time normalized: {time}")

    hour, minute, second_text, *_ = (time.split(":") + ["0", "0", "0"])[:3] + [""]
    return datetime(
        _to_int(year, 1970),
        _to_int(month, 1),
        _to_int(day, 1),
        _to_int(hour, 0),
        _to_int(minute, 0),
        _to_int(second_text, 0),
        tzinfo=timezone.utc,
    )


def parse_messages(
    messages: Iterable[RawMessage], options: ParseOptions | None = None
) -> list[Message]:
    """Parse raw messages into ``Message`` objects.

    Raises ValueError if a raw message does not begin with a date and time,
    or if its date or time is out of range.
    """
    options = options or ParseOptions()
    messages = list(messages)
    debug = options.debug
    days_first = options.days_first

    if debug:
        print(f"DEBUG: Starting message parsing with {len(messages)} messages")
        print(
            f"DEBUG: Options - days_first: {days_first}, "
            f"parse_attachments: {options.parse_attachments}"
        )
        print(_RULE)

    extracted: list[_Fields] = []
    for number, raw in enumerate(messages, start=1):
        if debug:
            kind = "system" if raw.system else "user"
            print(f"DEBUG: Processing message {number}: {kind} message")
            print(f"DEBUG: Raw message: {raw.msg!r}")
        fields = _extract(raw)
        if debug:
            print(
                "DEBUG: Extracted components:\n"
                f" - Date: {fields.date!r}\n"
                f" - Time: {fields.time!r}\n"
                f" - AM/PM: {fields.ampm!r}\n"
                f" - Author: {fields.author!r}\n"
                f" - Message: {fields.message!r}"
            )
        extracted.append(fields)

    if days_first is None:
        if debug:
            print("DEBUG: Date format not specified, attempting auto-detection...")
        numeric_dates = [
            [int(part) for part in order_date_components(fields.date)]
            for fields in extracted
        ]
        days_first = days_before_months(numeric_dates)
        if debug:
            print(f"DEBUG: Date format auto-detection result: days_first = {days_first}")

    parsed: list[Message] = []
    for number, fields in enumerate(extracted, start=1):
        if debug:
            print(f"DEBUG: Creating final message object {number}")
        attachment = (
            parse_message_attachment(fields.message)
            if options.parse_attachments
            else None
        )
        parsed.append(
            Message(
                date=_build_date(fields, days_first, debug),
                author=fields.author,
                message=fields.message,
                attachment=attachment,
            )
        )

    if debug:
        authors = {message.author for message in parsed if message.author is not None}
        with_attachments = sum(message.attachment is not None for message in parsed)
        print("DEBUG: Message parsing complete!")
        print(f"DEBUG: Total messages processed: {len(parsed)}")
        print(f"DEBUG: Unique authors: {len(authors)}")
        print(f"DEBUG: Messages with attachments: {with_attachments}")
        print(_RULE)

    return parsed