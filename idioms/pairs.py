"""Building a mapping from key/value pairs."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from functools import reduce
from typing import Any


def _check_pair(pair: Sequence[Any]) -> Sequence[Any]:
    if len(pair) != 2:
        raise ValueError(f"Expected a (key, value) pair, got {pair!r}")
    return pair


def from_pairs_reduce(pairs: Iterable[Sequence[Any]]) -> dict[Hashable, Any]:
    """Old style: fold each pair into a freshly spread dict."""
    return reduce(
        lambda obj, pair: {**obj, _check_pair(pair)[0]: pair[1]},
        pairs,
        {},
    )


def from_pairs(pairs: Iterable[Sequence[Any]]) -> dict[Hashable, Any]:
    """New style: let ``dict`` consume the pairs directly."""
    return dict(_check_pair(pair) for pair in pairs)
