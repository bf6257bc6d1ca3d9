from __future__ import annotations
import logging
import os


_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_log_level() -> str:
    raw = os.environ.get('DOODLE_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to their numeric level, anything else to a string
    return raw if isinstance(logging.getLevelName(raw), int) else _DEFAULT_LOG_LEVEL


def strict_bindings() -> bool:
    return flag_from_env('DOODLE_STRICT_BINDINGS')
