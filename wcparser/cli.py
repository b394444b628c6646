"""Command that ranks the authors of a chat export by message count."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence

from .api import parse_file
from .models import Message


def count_messages_by_author(messages: Iterable[Message]) -> list[tuple[str, int]]:
    """Count messages per author, most active first; system messages are skipped."""
    counts = Counter(m.author for m in messages if m.author is not None)
    return counts.most_common()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the authors of a chat export ordered by how many messages they sent."""
    parser = argparse.ArgumentParser(
        description="Count the messages sent by each author of a chat export."
    )
    parser.add_argument("path", help="path to the exported chat text file")
    args = parser.parse_args(argv)

    try:
        messages = parse_file(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1

    print("Users by message count:")
    for author, count in count_messages_by_author(messages):
        print(f"{author}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())