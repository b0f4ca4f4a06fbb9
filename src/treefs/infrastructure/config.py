"""Configuration constants read from the environment and .env."""

from __future__ import annotations

import os
from pathlib import Path

SETTING_KEYS = ["TREEFS_MAX_CONCURRENCY", "TREEFS_LENIENT_MKDIR"]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Values for `keys` from ./.env; never exported into os.environ."""
    try:
        lines = (Path.cwd() / ".env").read_text().splitlines()
    except OSError:
        return {}

    result: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or key.startswith("#") or key not in keys:
            continue
        value = _unquote(value.strip())
        if value:
            result[key] = value
    return result


def _int_setting(raw: str | None, default: int) -> int:
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


_env_config = read_env_file(SETTING_KEYS)


def _setting(key: str) -> str:
    """The process environment wins over .env."""
    return os.environ.get(key) or _env_config.get(key, "")


# Upper bound on concurrently in-flight file operations (stat, unlink, copy).
MAX_CONCURRENT_IO: int = max(1, _int_setting(_setting("TREEFS_MAX_CONCURRENCY"), 32))

# When true, ensure_dir swallows every mkdir failure instead of only "already exists".
LENIENT_MKDIR: bool = _setting("TREEFS_LENIENT_MKDIR").lower() == "true"
