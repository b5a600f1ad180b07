"""Record helpers: deep copy and deep merge of string-keyed mappings.

A record is any ``Mapping``; copies are always built from plain ``dict``s,
so read-only mappings such as ``MappingProxyType`` are accepted at any depth.
Neither function mutates its inputs, and neither result shares mutable
structure with an input.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def _copy_value(value: Any) -> Any:
    """Copy ``value``, rebuilding mappings as dicts and recursing into lists/tuples."""
    if isinstance(value, Mapping):
        return {key: _copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_copy_value(item) for item in value)
    return copy.deepcopy(value)


def deep_clone(record: Mapping[str, Any]) -> dict[str, Any]:
    """Return a fully independent structural copy of ``record``.

    Nested mappings come back as plain dicts, lists and tuples are copied
    element by element, and every other leaf goes through ``copy.deepcopy``,
    so ``datetime`` values keep their type. Recursion depth follows the
    nesting depth of ``record``.
    """
    return _copy_value(record)


def merge(a: Mapping[str, Any], b: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``b`` into a copy of ``a``.

    For every key of ``b``: when both sides hold mappings the two are merged
    recursively, otherwise the value from ``b`` replaces the value from ``a``.
    Lists and tuples are atomic values, so a list in ``b`` replaces the list in
    ``a`` instead of being merged index by index or concatenated. Keys present
    on one side only are kept.

    Args:
        a: Base record.
        b: Record whose values take precedence.

    Returns:
        A new ``dict``. Nested mappings in the result are plain dicts.
    """
    result: dict[str, Any] = _copy_value(a)
    pending: list[tuple[dict[str, Any], Mapping[str, Any]]] = [(result, b)]
    while pending:
        target, source = pending.pop()
        for key, value in source.items():
            current = target.get(key)
            if isinstance(value, Mapping):
                if not isinstance(current, dict):
                    current = {}
                    target[key] = current
                pending.append((current, value))
                continue
            if isinstance(value, (list, tuple)) and isinstance(current, (list, tuple)):
                logger.debug("Replacing sequence at key %r instead of merging", key)
            target[key] = _copy_value(value)
    return result
