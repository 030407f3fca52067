"""Conditionally assembling an argument list."""

from __future__ import annotations

from typing import Any

from idioms.flatten import flatten


def insert_if(items: list[str], item: str, index: int, condition: bool) -> list[str]:
    """Old style: start from the unconditional items and splice the extra one in.

    The input list is left untouched.
    """
    result = list(items)
    if condition:
        result.insert(index, item)
    return result


def build_args(*items: Any) -> list[str]:
    """New style: write every item inline and flatten one level.

    A conditional item is written as ``flag if enabled else []`` so that a
    disabled flag disappears from the result.
    """
    return flatten(list(items), depth=1)
