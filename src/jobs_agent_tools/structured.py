"""
Helpers for searching and reconciling decoded JSON documents.

Decoded JSON is a tree of dicts, lists and scalars. The helpers here walk
that tree depth-first, try alternative access paths in order, and merge
partial records by precedence.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

Predicate = Callable[[Any], bool]
Accessor = Callable[[Any], Any]


def iter_nodes(root: Any) -> Iterator[Any]:
    """
    Yield every node of a decoded JSON tree in depth-first pre-order.

    Dict values are visited in insertion order and list items in index
    order, so the first node yielded that satisfies a predicate is the
    same node a recursive walk would find first.
    """
    stack: list[Any] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        if isinstance(node, dict):
            stack.extend(reversed(list(node.values())))
        elif isinstance(node, list):
            stack.extend(reversed(node))


def deep_find(root: Any, predicate: Predicate) -> Any:
    """Return the first node satisfying ``predicate``, or None."""
    for node in iter_nodes(root):
        if predicate(node):
            return node
    return None


def get_path(data: Any, *keys: str) -> Any:
    """Follow nested dict keys, returning None where the path breaks."""
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def first_collection(data: Any, accessors: Iterable[Accessor]) -> list:
    """
    Try accessors in order and return the first result that is a list.

    Returns an empty list when no accessor yields one.
    """
    for accessor in accessors:
        value = accessor(data)
        if isinstance(value, list):
            return value
    return []


def is_present(value: Any) -> bool:
    """A value that should win a precedence merge."""
    return value is not None and value != ""


def merge_by_precedence(
    candidates: Sequence[dict[str, Any] | None],
    fields: Iterable[str],
) -> dict[str, Any]:
    """
    Merge partial records field by field, earlier candidates winning.

    Missing candidates (None) are skipped. For each field the first
    candidate holding a present value supplies it; fields no candidate
    supplies are set to None.
    """
    available = [c for c in candidates if c]
    merged: dict[str, Any] = {}
    for field in fields:
        merged[field] = next(
            (c[field] for c in available if is_present(c.get(field))),
            None,
        )
    return merged
