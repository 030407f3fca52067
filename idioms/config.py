"""Runtime settings read from the environment (and an optional ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

STYLES = ("old", "new")

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Defaults for the CLI."""

    style: str = "new"
    verbose: bool = False
    log_json: bool = False


def check_style(style: str) -> str:
    """Return *style* if it is one of :data:`STYLES`, else raise ``ValueError``."""
    if style not in STYLES:
        raise ValueError(f"Style must be one of {', '.join(STYLES)}, got {style!r}")
    return style


def load_settings(dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from ``IDIOMS_*`` environment variables.

    ``IDIOMS_STYLE`` is read as-is; it is validated with :func:`check_style`
    only when it is used.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    style = os.getenv("IDIOMS_STYLE", "new").strip().lower()

    return Settings(
        style=style,
        verbose=_flag("IDIOMS_VERBOSE"),
        log_json=_flag("IDIOMS_LOG_JSON"),
    )
