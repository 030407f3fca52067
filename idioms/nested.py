"""Nested value model – an explicit tagged variant for nested sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

# Only these container types count as nesting. Strings, mappings, sets and
# everything else are treated as opaque leaves.
SEQUENCE_TYPES = (list, tuple)


@dataclass(frozen=True)
class Scalar:
    """A single leaf value."""

    value: Any


@dataclass(frozen=True)
class Sequence:
    """An ordered run of child nodes."""

    items: tuple[Node, ...] = ()


Node = Union[Scalar, Sequence]


def is_sequence(value: Any) -> bool:
    return isinstance(value, SEQUENCE_TYPES)


def to_tree(value: Any) -> Node:
    """Convert a plain nested literal (lists/tuples of scalars) into nodes."""
    if isinstance(value, (Scalar, Sequence)):
        return value
    if is_sequence(value):
        return Sequence(tuple(to_tree(item) for item in value))
    return Scalar(value)


def to_literal(node: Node) -> Any:
    """Inverse of :func:`to_tree`; sequences come back as lists."""
    if isinstance(node, Scalar):
        return node.value
    if isinstance(node, Sequence):
        return [to_literal(child) for child in node.items]
    raise TypeError(f"Expected Scalar or Sequence, got {type(node).__name__}")


def max_depth(value: Any) -> int:
    """Return the nesting depth of *value*: 0 for a scalar, 1 for a flat list."""
    if not is_sequence(value):
        return 0
    return 1 + max((max_depth(item) for item in value), default=0)
