"""Default values for optional configuration fields."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SplashConfig:
    """Splash-screen settings where every field may be left unset."""

    header_text: Optional[str] = None
    animation_duration: Optional[int] = None
    show_splash_screen: Optional[bool] = None


SPLASH_DEFAULTS = SplashConfig(
    header_text="header fallback",
    animation_duration=300,
    show_splash_screen=True,
)


def _as_mapping(config: Mapping[str, Any] | SplashConfig) -> Mapping[str, Any]:
    if isinstance(config, SplashConfig):
        return asdict(config)
    return config


def resolve_with_membership(
    config: Mapping[str, Any] | SplashConfig,
    defaults: Mapping[str, Any] | SplashConfig = SPLASH_DEFAULTS,
) -> dict[str, Any]:
    """Old style: take the configured value whenever the key is present.

    A key explicitly set to ``None`` keeps ``None``.
    """
    values = _as_mapping(config)
    return {
        key: values[key] if key in values else default
        for key, default in _as_mapping(defaults).items()
    }


def resolve_with_coalesce(
    config: Mapping[str, Any] | SplashConfig,
    defaults: Mapping[str, Any] | SplashConfig = SPLASH_DEFAULTS,
) -> dict[str, Any]:
    """New style: fall back only when the value is missing or ``None``.

    Falsy values such as ``""``, ``0`` and ``False`` are kept.
    """
    values = _as_mapping(config)
    resolved: dict[str, Any] = {}
    for key, default in _as_mapping(defaults).items():
        value = values.get(key)
        resolved[key] = value if value is not None else default
    return resolved
