#!/usr/bin/env python3
"""Settings loader for namekit."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import logging
import os

import yaml
from rich.console import Console
from rich.logging import RichHandler

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

LOG_LEVEL_ENV = "NAMEKIT_LOG_LEVEL"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text())
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def get_int_range(path: str, default: tuple[int, int]) -> tuple[int, int]:
    """Read a two-element [low, high) setting, falling back to default."""
    value = get_setting(path)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            low, high = int(value[0]), int(value[1])
        except (TypeError, ValueError):
            return default
        if high > low:
            return low, high
    return default


def get_log_level() -> int:
    """
    Resolve the log level.

    NAMEKIT_LOG_LEVEL wins over logging.level in app.yaml.
    Unknown names resolve to WARNING.
    """
    level_name = os.getenv(LOG_LEVEL_ENV) or get_setting('logging.level', 'WARNING')
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int | None = None) -> None:
    """Install a rich log handler (writing to stderr) on the root logger."""
    root = logging.getLogger()
    root.setLevel(get_log_level() if level is None else level)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)


__all__ = [
    "load_app_config",
    "get_setting",
    "get_int_range",
    "get_log_level",
    "setup_logging",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
