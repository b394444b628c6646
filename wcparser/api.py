"""Entry points for parsing whole chat exports."""

from __future__ import annotations

import os

from .lines import make_array_of_messages
from .models import Message, ParseOptions
from .parser import parse_messages

_RULE = "DEBUG: ====================================="


def parse_string(text: str, options: ParseOptions | None = None) -> list[Message]:
    """Parse the text of a chat export into messages."""
    options = options or ParseOptions()
    lines = text.split("\n")
    if options.debug:
        print(f"DEBUG: parse_string called with {len(text)} characters")
        print(f"DEBUG: Split into {len(lines)} lines")
        print(f"DEBUG: Options: {options!r}")
        print(_RULE)
    return parse_messages(make_array_of_messages(lines, options.debug), options)


def parse_file(
    path: str | os.PathLike[str], options: ParseOptions | None = None
) -> list[Message]:
    """Read a UTF-8 chat export from ``path`` and parse it.

    Raises OSError if the file cannot be read and UnicodeDecodeError if it
    is not valid UTF-8.
    """
    with open(path, "rb") as handle:
        text = handle.read().decode("utf-8")
    return parse_string(text, options)