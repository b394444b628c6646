"""Data types produced and consumed by the chat parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class RawMessage:
    """A message as read from the log, possibly spanning several lines."""

    system: bool
    msg: str


@dataclass(frozen=True, slots=True)
class Attachment:
    """A file attached to a message."""

    file_name: str


@dataclass(slots=True)
class Message:
    """A fully parsed chat message.

    ``author`` is None for system messages; ``attachment`` is set only when
    attachments are parsed and one is present.
    """

    date: datetime
    author: str | None
    message: str
    attachment: Attachment | None = None


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options controlling how a chat log is parsed.

    ``days_first`` fixes whether dates start with the day (True) or the
    month (False); None lets the parser work it out.
    """

    days_first: bool | None = None
    parse_attachments: bool = False
    debug: bool = False