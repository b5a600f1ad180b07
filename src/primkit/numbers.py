"""Number helpers: clamping, primality and ordinal/roman formatting.

`is_prime`, `to_ordinal` and `to_roman` work on integral values: any
``numbers.Integral`` (``int``, ``numpy.int64``), or a finite ``numbers.Real``
with no fractional part (``7.0``, ``Fraction(14, 2)``). How each of them
treats other numbers is stated in its docstring.
"""

from __future__ import annotations

import logging
import math
from numbers import Integral, Real

from primkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}
ROMAN_NUMERALS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)
TRADITIONAL_ROMAN_MAX = 3999


def _is_integral(n: Real) -> bool:
    if isinstance(n, Integral):
        return True
    if not isinstance(n, Real) or not math.isfinite(n):
        return False
    return n == math.floor(n)


def _require_integral(n: Real) -> int:
    if not _is_integral(n):
        logger.debug("Rejecting non-integral value %r", n)
        raise InvalidArgumentError("n", n, "expected an integral number")
    return int(n)


def clamp(n: float, lo: float, hi: float) -> float:
    """Bound ``n`` to the closed interval [``lo``, ``hi``].

    The lower bound is applied first, so when ``lo > hi`` the result is
    always ``hi``.
    """
    return min(max(n, lo), hi)


def is_prime(n: float) -> bool:
    """Check primality by trial division up to the square root of ``n``.

    Returns False for ``n <= 1`` and for non-integral numbers.
    """
    if not _is_integral(n):
        return False
    value = int(n)
    if value <= 1:
        return False
    return all(value % divisor for divisor in range(2, math.isqrt(value) + 1))


def to_ordinal(n: float) -> str:
    """Format ``n`` as an English ordinal: 1st, 2nd, 3rd, 4th, 11th, 22nd ...

    The suffix is chosen from the absolute value, so negative numbers keep
    their sign (``-1`` gives ``"-1st"``). Integral floats are written without
    a decimal part.

    Raises:
        InvalidArgumentError: If ``n`` is not integral.
    """
    value = _require_integral(n)
    last_two = abs(value) % 100
    if 11 <= last_two <= 13:
        suffix = "th"
    else:
        suffix = ORDINAL_SUFFIXES.get(last_two % 10, "th")
    return f"{value}{suffix}"


def to_roman(n: float) -> str:
    """Convert ``n`` to a Roman numeral using the subtractive notation.

    Args:
        n: The number to convert.

    Returns:
        The numeral, or ``""`` for ``n <= 0``. There is no upper bound: values
        past 3999 simply repeat ``"M"`` (4000 gives ``"MMMM"``).

    Raises:
        InvalidArgumentError: If ``n`` is not integral.
    """
    remaining = _require_integral(n)
    if remaining <= 0:
        return ""
    if remaining > TRADITIONAL_ROMAN_MAX:
        logger.debug("%d is past traditional Roman notation; repeating M", remaining)
    numeral = []
    for symbol, value in ROMAN_NUMERALS:
        count, remaining = divmod(remaining, value)
        numeral.append(symbol * count)
    return "".join(numeral)
