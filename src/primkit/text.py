"""Text helpers: case conversion, reversal, substring search and truncation.

All functions accept any ``str`` (including the empty string) and never raise.
Casing follows Python's locale-independent ``str.lower``/``str.upper``.
"""

import re

CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z])([A-Z])")
WHITESPACE_RUN_PATTERN = re.compile(r"\s+")
WORD_START_PATTERN = re.compile(r"(?:^|[^a-zA-Z0-9]+)([a-zA-Z0-9])")


def to_title_case(s: str) -> str:
    """Capitalize every space-delimited word and lowercase the rest of it.

    The string is split on single spaces, so runs of spaces produce empty
    words that are kept as-is when the words are joined back together.
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in s.split(" "))


def reverse(s: str) -> str:
    """Return the characters of ``s`` in reverse order.

    Works on code points. Grapheme clusters made of several code points
    (e.g. a letter followed by a combining accent) are split apart.
    """
    return s[::-1]


def contains_ignore_case(s: str, sub: str) -> bool:
    """Check whether ``sub`` occurs in ``s``, ignoring case."""
    return sub.lower() in s.lower()


def truncate(s: str, max_length: int, ellipsis: str = "...") -> str:
    """Cut ``s`` down to ``max_length`` characters and append ``ellipsis``.

    Args:
        s: The input string.
        max_length: Number of characters kept from ``s``.
        ellipsis: Appended only when ``s`` was actually cut.

    Returns:
        ``s`` unchanged if it is not longer than ``max_length``. Otherwise the
        first ``max_length`` characters followed by ``ellipsis``; the result is
        then ``len(ellipsis)`` characters longer than ``max_length``.
    """
    if len(s) > max_length:
        return s[:max_length] + ellipsis
    return s


def _separate_words(s: str, separator: str) -> str:
    s = CAMEL_BOUNDARY_PATTERN.sub(rf"\1{separator}\2", s)
    return WHITESPACE_RUN_PATTERN.sub(separator, s).lower()


def to_snake_case(s: str) -> str:
    """Convert ``"helloWorld"`` or ``"hello world"`` to ``"hello_world"``."""
    return _separate_words(s, "_")


def to_kebab_case(s: str) -> str:
    """Convert ``"helloWorld"`` or ``"hello world"`` to ``"hello-world"``."""
    return _separate_words(s, "-")


def to_pascal_case(s: str) -> str:
    """Convert ``"hello_world"`` or ``"hello world"`` to ``"HelloWorld"``.

    The input is trimmed and lowercased first, so existing camel humps are
    lost (``"helloWorld"`` becomes ``"Helloworld"``). Runs of characters other
    than ASCII letters and digits act as word separators and are dropped.
    """
    return WORD_START_PATTERN.sub(
        lambda match: match.group(1).upper(), s.strip().lower()
    )


def to_camel_case(s: str) -> str:
    """Like `to_pascal_case`, with the first character lowercased."""
    pascal = to_pascal_case(s)
    return pascal[:1].lower() + pascal[1:]
