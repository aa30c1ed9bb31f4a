"""Configuration loading utilities for varna.

Settings come from a TOML profile, `configs/<env>.toml`, and each one can be
overridden by a `VARNA_<KEY>` environment variable. `VARNA_ENV` picks the
profile and defaults to `dev`.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

_ENV_PREFIX = "VARNA_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    strict_validation: bool


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv(f"{_ENV_PREFIX}ENV", "dev")
    profile = _read_profile((config_dir or _default_config_dir()) / f"{env}.toml")

    values: dict[str, object] = {}
    for key, (coerce, default) in _SETTINGS.items():
        variable = f"{_ENV_PREFIX}{key.upper()}"
        override = os.getenv(variable)
        if override is not None:
            values[key] = coerce(variable, override)
        elif key in profile:
            values[key] = coerce(key, profile[key])
        else:
            values[key] = default

    return AppConfig(env=env, **values)


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _read_profile(path: Path) -> dict[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _as_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _as_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    raise ValueError(f"{name} must be a boolean, got type {type(value).__name__}")


def _as_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")


def _as_log_level(name: str, value: object) -> str:
    return _as_str(name, value).upper()


# Known keys with their coercion and default; unknown profile keys are ignored.
_SETTINGS: dict[str, tuple[Callable[[str, object], object], object]] = {
    "log_level": (_as_log_level, "INFO"),
    "api_host": (_as_str, "127.0.0.1"),
    "api_port": (_as_int, 8000),
    "workers": (_as_int, 1),
    "strict_validation": (_as_bool, False),
}
