"""Trimming leading and trailing whitespace."""

import re

_LEADING_WS = re.compile(r"^\s*")
_TRAILING_WS = re.compile(r"\s*$")


def trim_start_regex(text: str) -> str:
    return _LEADING_WS.sub("", text, count=1)


def trim_end_regex(text: str) -> str:
    return _TRAILING_WS.sub("", text, count=1)


def trim_start(text: str) -> str:
    return text.lstrip()


def trim_end(text: str) -> str:
    return text.rstrip()
