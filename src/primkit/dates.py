"""Date helpers: weekend check, day arithmetic, week boundaries, formatting.

Accepts ``datetime.date`` and ``datetime.datetime`` values and always returns
a value of the same type; time of day and ``tzinfo`` are carried over
unchanged. Day-of-week indexes run from 0 (Sunday) to 6 (Saturday), and weeks
start on Sunday.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import TypeVar

# pylint: disable=redefined-builtin

D = TypeVar("D", bound=date)

SUNDAY = 0
SATURDAY = 6
FORMAT_TOKEN_PATTERN = re.compile(r"yyyy|mm|dd|HH|MM|SS")


def day_of_week(d: date) -> int:
    """Day-of-week index of ``d``: 0 for Sunday through 6 for Saturday."""
    # date.weekday() counts from Monday = 0
    return (d.weekday() + 1) % 7


def is_weekend(d: date) -> bool:
    """Check whether ``d`` falls on a Saturday or a Sunday."""
    return day_of_week(d) in (SUNDAY, SATURDAY)


def add_days(d: D, n: int) -> D:
    """Return ``d`` moved by ``n`` calendar days (``n`` may be negative).

    Month and year boundaries roll over as usual; for ``datetime`` values the
    wall-clock time stays the same.
    """
    return d + timedelta(days=n)


def start_of_week(d: D) -> D:
    """Return the Sunday on or before ``d``."""
    return add_days(d, -day_of_week(d))


def end_of_week(d: D) -> D:
    """Return the Saturday on or after ``d``."""
    return add_days(d, SATURDAY - day_of_week(d))


def format(d: date, pattern: str) -> str:
    """Render ``d`` by substituting the date tokens found in ``pattern``.

    Recognized tokens, matched left to right:

    - ``yyyy``: year, not padded
    - ``mm``: month, two digits
    - ``dd``: day of month, two digits
    - ``HH``: hour (24h), two digits
    - ``MM``: minute, two digits
    - ``SS``: second, two digits

    Any other text in ``pattern`` is copied through unchanged. A plain
    ``date`` has no time of day, so its ``HH``, ``MM`` and ``SS`` are ``00``.

    Args:
        d: The date or datetime to render.
        pattern: Template such as ``"yyyy-mm-dd HH:MM:SS"``.

    Returns:
        The rendered string.
    """
    fields = {
        "yyyy": str(d.year),
        "mm": f"{d.month:02d}",
        "dd": f"{d.day:02d}",
        "HH": f"{getattr(d, 'hour', 0):02d}",
        "MM": f"{getattr(d, 'minute', 0):02d}",
        "SS": f"{getattr(d, 'second', 0):02d}",
    }
    return FORMAT_TOKEN_PATTERN.sub(lambda match: fields[match.group(0)], pattern)
