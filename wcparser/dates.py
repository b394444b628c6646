"""Helpers for interpreting the dates and times found in chat exports."""

from __future__ import annotations

import re
from collections.abc import Callable, Hashable, Sequence
from itertools import pairwise
from typing import TypeVar

T = TypeVar("T", bound=Hashable)

_DATE_SEPARATORS = re.compile(r"[-/.]")
_TIME_SEPARATORS = re.compile(r"[:.]")


def index_above_value(index: int, value: int) -> Callable[[Sequence[int]], bool]:
    """Return a predicate checking that ``array[index]`` is greater than ``value``."""

    def predicate(array: Sequence[int]) -> bool:
        return array[index] > value

    return predicate


def is_negative(number: int) -> bool:
    """Return True for a negative number; zero counts as positive."""
    return number < 0


def group_array_by_value_at_index(
    array: Sequence[Sequence[T]], index: int
) -> list[list[list[T]]]:
    """Group the inner sequences by the value they hold at ``index``."""
    groups: dict[str, list[list[T]]] = {}
    for item in array:
        groups.setdefault(str(item[index]), []).append(list(item))
    return list(groups.values())


def check_above_12(numeric_dates: Sequence[Sequence[int]]) -> bool | None:
    """Guess the day/month order from numbers that exceed 12.

    Returns True if days come first, False if months come first, or None
    if the order cannot be told.
    """
    if any(map(index_above_value(0, 12), numeric_dates)):
        return True
    if any(map(index_above_value(1, 12), numeric_dates)):
        return False
    return None


def _decreasing_in_year(dates: Sequence[Sequence[int]]) -> bool | None:
    if any(is_negative(b[0] - a[0]) for a, b in pairwise(dates)):
        return True
    if any(is_negative(b[1] - a[1]) for a, b in pairwise(dates)):
        return False
    return None


def check_decreasing(numeric_dates: Sequence[Sequence[int]]) -> bool | None:
    """Guess the day/month order from values that decrease within one year.

    Months can only grow within a year, so a decreasing first number points
    to days coming first.
    """
    results = [
        _decreasing_in_year(dates)
        for dates in group_array_by_value_at_index(numeric_dates, 2)
    ]
    if True in results:
        return True
    if False in results:
        return False
    return None


def change_frequency_analysis(numeric_dates: Sequence[Sequence[int]]) -> bool | None:
    """Guess the day/month order by which number changes more overall."""
    first = sum(abs(b[0] - a[0]) for a, b in pairwise(numeric_dates))
    second = sum(abs(b[1] - a[1]) for a, b in pairwise(numeric_dates))
    if first > second:
        return True
    if first < second:
        return False
    return None


def days_before_months(numeric_dates: Sequence[Sequence[int]]) -> bool | None:
    """Run every heuristic in turn and return the first conclusive answer."""
    for check in (check_above_12, check_decreasing, change_frequency_analysis):
        result = check(numeric_dates)
        if result is not None:
            return result
    return None


def normalize_date(year: str, month: str, day: str) -> tuple[str, str, str]:
    """Pad year, month and day to 4, 2 and 2 digits.

    Two-digit years are taken to be in the 2000-2099 range.
    """
    normalized_year = "20" + year.rjust(2, "0") if len(year) <= 2 else year
    return normalized_year, month.rjust(2, "0"), day.rjust(2, "0")


def order_date_components(date: str) -> tuple[str, str, str]:
    """Split a date and move its longest number, the year, to the end."""
    parts = [part.strip() for part in _DATE_SEPARATORS.split(date)]
    if len(parts) < 3:
        raise ValueError(f"not a date with three components: {date!r}")
    a, b, c = parts[:3]
    longest = max(len(a), len(b), len(c))
    if len(c) == longest:
        return a, b, c
    if len(b) == longest:
        return a, c, b
    return b, c, a


def _split_time(time: str) -> list[str]:
    parts = _TIME_SEPARATORS.split(time)
    if len(parts) < 2:
        raise ValueError(f"not a time with hours and minutes: {time!r}")
    return parts


def convert_time_12_to_24(time: str, ampm: str) -> str:
    """Convert a 12-hour time with its ``AM``/``PM`` marker to 24-hour form."""
    hours_text, minutes, *rest = _split_time(time)
    hours = int(hours_text)
    if hours == 12:
        hours = 0
    if ampm == "PM":
        hours += 12
    if rest:
        return f"{hours:02d}:{minutes}:{rest[0]}"
    return f"{hours:02d}:{minutes}"


def normalize_time(time: str) -> str:
    """Normalize a time string to the ``hh:mm:ss`` form."""
    hours, minutes, *rest = _split_time(time)
    seconds = rest[0] if rest else "00"
    return f"{hours.rjust(2, '0')}:{minutes}:{seconds}"


def normalize_ampm(ampm: str) -> str:
    """Turn ``am``, ``a.m.`` and the like into ``AM`` or ``PM``."""
    return "".join(ch for ch in ampm if ch.isalpha()).upper()