"""Flattener – removes nesting from sequences, keeping depth-first order."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from idioms.nested import Scalar, Sequence, Node, is_sequence


def iter_leaves(value: Any, depth: float = math.inf) -> Iterator[Any]:
    """Yield the leaves of *value* depth-first, left to right.

    Sequences nested deeper than *depth* levels are yielded as-is.
    A bare scalar yields itself.
    """
    if not is_sequence(value):
        yield value
        return
    for item in value:
        if is_sequence(item) and depth > 0:
            yield from iter_leaves(item, depth - 1)
        else:
            yield item


def flatten(value: Any, depth: float = math.inf) -> list[Any]:
    """Flatten *value* into a new list.

    ``depth`` defaults to unbounded. ``depth=1`` removes a single level of
    nesting and ``depth=0`` returns a shallow copy of the top-level items.
    Non-sequence leaves of any type are passed through unchanged.
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    return list(iter_leaves(value, depth))


def flatten_reduce(value: Any) -> list[Any]:
    """Old-style flatten: fold the items into an accumulator, concatenating recursive results."""
    if not is_sequence(value):
        return [value]
    flat: list[Any] = []
    for item in value:
        flat.extend(flatten_reduce(item) if is_sequence(item) else [item])
    return flat


def flatten_tree(node: Node) -> list[Any]:
    """Flatten a :class:`Scalar` / :class:`Sequence` tree."""
    if isinstance(node, Scalar):
        return [node.value]
    if isinstance(node, Sequence):
        result: list[Any] = []
        for child in node.items:
            result.extend(flatten_tree(child))
        return result
    raise TypeError(f"Expected Scalar or Sequence, got {type(node).__name__}")
