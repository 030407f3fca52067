"""Snippet registry – the fixed inputs and the old/new runs for each snippet."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from idioms.args import build_args, insert_if
from idioms.fallback import SplashConfig, resolve_with_coalesce, resolve_with_membership
from idioms.flatten import flatten, flatten_reduce
from idioms.logs import get_logger
from idioms.pairs import from_pairs, from_pairs_reduce
from idioms.trim import trim_end, trim_end_regex, trim_start, trim_start_regex

# ── Fixed inputs ─────────────────────────────────────────────────────

NESTED_ARRAY = [[[1, [1.1, [1.11]]], 2, 3], [4, 5]]
ARRAY_PAIRS = [["foo", 1], ["bar", 2]]
PADDED_STR = "     Whitespace     "
HEADLESS_MODE = True
SPLASH_CONFIG = SplashConfig(header_text="", animation_duration=0, show_splash_screen=False)


class UnknownSnippetError(KeyError):
    """Raised when no snippet is registered under a name/style."""


@dataclass(frozen=True)
class Snippet:
    """One runnable variant of a snippet."""

    name: str
    style: str
    description: str
    run: Callable[[], dict[str, Any]]


@dataclass(frozen=True)
class Comparison:
    """Outputs of the old and new style of a snippet side by side."""

    name: str
    old: dict[str, Any]
    new: dict[str, Any]

    @property
    def matches(self) -> bool:
        return self.old == self.new


_REGISTRY: dict[tuple[str, str], Snippet] = {}


def register(name: str, style: str, description: str) -> Callable[[Callable[[], dict[str, Any]]], Callable[[], dict[str, Any]]]:
    def decorator(func: Callable[[], dict[str, Any]]) -> Callable[[], dict[str, Any]]:
        _REGISTRY[(name, style)] = Snippet(name=name, style=style, description=description, run=func)
        return func

    return decorator


# ── flatten ──────────────────────────────────────────────────────────

@register("flatten", "old", "Recursive reduce/concat over nested lists")
def _flatten_old() -> dict[str, Any]:
    return {"flat_array": flatten_reduce(NESTED_ARRAY)}


@register("flatten", "new", "Generator-based flatten with unbounded depth")
def _flatten_new() -> dict[str, Any]:
    return {"flat_array": flatten(NESTED_ARRAY)}


# ── obj-from-tuples ──────────────────────────────────────────────────

@register("obj-from-tuples", "old", "Fold pairs into a dict with ** spreading")
def _pairs_old() -> dict[str, Any]:
    return {"obj": from_pairs_reduce(ARRAY_PAIRS)}


@register("obj-from-tuples", "new", "dict() straight from the pairs")
def _pairs_new() -> dict[str, Any]:
    return {"obj": from_pairs(ARRAY_PAIRS)}


# ── trim ─────────────────────────────────────────────────────────────

@register("trim", "old", "Regex substitution of leading/trailing whitespace")
def _trim_old() -> dict[str, Any]:
    return {
        "leading_trimmed_str": trim_start_regex(PADDED_STR),
        "trailing_trimmed_str": trim_end_regex(PADDED_STR),
    }


@register("trim", "new", "str.lstrip / str.rstrip")
def _trim_new() -> dict[str, Any]:
    return {
        "leading_trimmed_str": trim_start(PADDED_STR),
        "trailing_trimmed_str": trim_end(PADDED_STR),
    }


# ── cond-add-arr-item ────────────────────────────────────────────────

@register("cond-add-arr-item", "old", "Insert the optional flag at an index")
def _args_old() -> dict[str, Any]:
    config_arr = insert_if(
        ["--disable-gpu", "--window-size=1274,1274"],
        "--headless",
        index=1,
        condition=HEADLESS_MODE,
    )
    return {"config_arr": config_arr}


@register("cond-add-arr-item", "new", "Inline conditional item, flattened one level")
def _args_new() -> dict[str, Any]:
    config_arr = build_args(
        "--disable-gpu",
        "--headless" if HEADLESS_MODE else [],
        "--window-size=1274,1274",
    )
    return {"config_arr": config_arr}


# ── undef-key-fallback ───────────────────────────────────────────────

@register("undef-key-fallback", "old", "Membership test before reading a field")
def _fallback_old() -> dict[str, Any]:
    return resolve_with_membership(SPLASH_CONFIG)


@register("undef-key-fallback", "new", "Fall back only on None")
def _fallback_new() -> dict[str, Any]:
    return resolve_with_coalesce(SPLASH_CONFIG)


# ── Lookup ───────────────────────────────────────────────────────────

def list_snippets() -> list[Snippet]:
    """Return every registered snippet, sorted by name then style."""
    return [_REGISTRY[key] for key in sorted(_REGISTRY)]


def snippet_names() -> list[str]:
    return sorted({name for name, _ in _REGISTRY})


def get_snippet(name: str, style: str) -> Snippet:
    try:
        return _REGISTRY[(name, style)]
    except KeyError:
        raise UnknownSnippetError(f"No snippet named {name!r} with style {style!r}") from None


def run_snippet(name: str, style: str) -> dict[str, Any]:
    """Run one snippet and return the mapping it prints."""
    snippet = get_snippet(name, style)
    result = snippet.run()
    get_logger(__name__).debug("snippet.run", snippet=name, style=style, keys=sorted(result))
    return result


def compare_styles(name: str) -> Comparison:
    """Run both styles of *name* and pair up their outputs."""
    comparison = Comparison(
        name=name,
        old=run_snippet(name, "old"),
        new=run_snippet(name, "new"),
    )
    log = get_logger(__name__)
    if comparison.matches:
        log.debug("snippet.compare", snippet=name, matches=True)
    else:
        log.warning("snippet.compare", snippet=name, matches=False)
    return comparison
