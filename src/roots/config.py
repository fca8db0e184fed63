"""
Configuration & Path Management
===============================
Resolves, once per invocation, everything the growth engine takes from the
environment: where the root record lives, how large the grid is, and how
fast the tree grows.

Environment overrides:
    ROOTS_HOME (str): Directory holding the root record (default ``~/.roots``).
    ROOTS_WIDTH, ROOTS_HEIGHT (int): Grid size.
    ROOTS_GROWTH_RATE (int): Seconds of real time per growth step.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, replace
from datetime import timedelta
from pathlib import Path
from typing import Mapping, Optional

from .settings import DEFAULT_SETTINGS, GrowthSettings

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 40
# Columns left free on either side of the tree when sized from the terminal.
TERMINAL_MARGIN = 20

RECORD_NAME = "root_0"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GridSize:
    width: int
    height: int


def _env_int(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


def terminal_columns() -> Optional[int]:
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError):
        return None


def resolve_grid_size(
    width: Optional[int] = None,
    height: Optional[int] = None,
    env: Optional[Mapping[str, str]] = None,
    columns: Optional[int] = None,
) -> GridSize:
    """Pick the grid size: explicit values, then environment, then terminal, then defaults."""

    env = os.environ if env is None else env
    if width is None:
        width = _env_int(env, "ROOTS_WIDTH")
    if width is None:
        columns = terminal_columns() if columns is None else columns
        if columns is not None and columns > TERMINAL_MARGIN:
            width = columns - TERMINAL_MARGIN
        else:
            width = DEFAULT_WIDTH
    if height is None:
        height = _env_int(env, "ROOTS_HEIGHT") or DEFAULT_HEIGHT

    size = GridSize(width=max(width, 1), height=max(height, 1))
    logger.debug("grid size resolved to %sx%s", size.width, size.height)
    return size


def roots_home(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    override = env.get("ROOTS_HOME")
    if override:
        return Path(override).expanduser()
    try:
        return Path.home() / ".roots"
    except RuntimeError as exc:
        raise ConfigError("cannot locate the home directory; set ROOTS_HOME") from exc


def record_path(env: Optional[Mapping[str, str]] = None) -> Path:
    return roots_home(env) / RECORD_NAME


def growth_settings(env: Optional[Mapping[str, str]] = None, base: GrowthSettings = DEFAULT_SETTINGS) -> GrowthSettings:
    env = os.environ if env is None else env
    seconds = _env_int(env, "ROOTS_GROWTH_RATE")
    if seconds is None:
        return base
    return replace(base, growth_rate=timedelta(seconds=seconds))
