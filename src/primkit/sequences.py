"""Sequence helpers: chunking, averaging, de-duplication, flattening, grouping.

Every function returns a new list (or dict, for `group_by`) and leaves the
input sequence untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

from primkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

NESTED_TYPES = (list, tuple)


def chunk(seq: Sequence[T], size: int) -> list[list[T]]:
    """Split ``seq`` into consecutive slices of length ``size``.

    Args:
        seq: The sequence to split.
        size: Length of every chunk; the last chunk may be shorter.

    Returns:
        The list of chunks, each one a new list. Empty when ``seq`` is empty.

    Raises:
        InvalidArgumentError: If ``size`` is zero or negative.
    """
    if size <= 0:
        logger.debug("Rejecting chunk size %r", size)
        raise InvalidArgumentError("size", size, "chunk size must be greater than 0")
    return [list(seq[start : start + size]) for start in range(0, len(seq), size)]


def average(seq: Sequence[float]) -> float:
    """Arithmetic mean of ``seq``, or ``0`` when ``seq`` is empty."""
    if not seq:
        return 0
    return sum(seq) / len(seq)


def _is_hashable(item: Any) -> bool:
    # isinstance(item, Hashable) is not enough: tuples holding lists pass it
    try:
        hash(item)
    except TypeError:
        return False
    return True


def unique(seq: Sequence[T]) -> list[T]:
    """Remove duplicates from ``seq``, keeping first occurrences in order.

    Hashable elements are compared by value (so ``1`` and ``1.0`` count as the
    same element), except that booleans never match numbers: ``True`` and
    ``1`` are both kept. Unhashable elements such as lists and dicts are never
    treated as duplicates, even when they compare equal.
    """
    seen: set[tuple[bool, Any]] = set()
    result: list[T] = []
    for item in seq:
        if _is_hashable(item):
            key = (isinstance(item, bool), item)
            if key in seen:
                continue
            seen.add(key)
        result.append(item)
    return result


def flatten(seq: Sequence[Any]) -> list[Any]:
    """Flatten arbitrarily nested lists and tuples into one flat list.

    Elements come out depth-first, left to right. Strings and other
    non-list/tuple values are leaves. Uses an explicit stack, so very deep
    nesting does not hit the interpreter's recursion limit.
    """
    flat: list[Any] = []
    stack = [iter(seq)]
    while stack:
        for item in stack[-1]:
            if isinstance(item, NESTED_TYPES):
                stack.append(iter(item))
                break
            flat.append(item)
        else:
            stack.pop()
    return flat


def group_by(seq: Sequence[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Group the elements of ``seq`` by the key ``key_fn`` computes for them.

    Args:
        seq: Elements to group.
        key_fn: Pure function mapping an element to a hashable key.

    Returns:
        Mapping from key to the elements that produced it. Keys appear in the
        order they were first seen; elements keep their original order.
    """
    groups: dict[K, list[T]] = {}
    for item in seq:
        groups.setdefault(key_fn(item), []).append(item)
    return groups
