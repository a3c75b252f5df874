"""
Settings for the puzzle backend and CLI.

Settings live in an optional JSON file (``config.json`` in the working
directory, or the path in ``$PUZZLE_CONFIG``).  Keys missing from the
file keep their defaults.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from backend.engine.gamesolver.algorithms import Algorithm
from backend.errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")
ENV_VAR = "PUZZLE_CONFIG"


@dataclass(frozen=True)
class Settings:
    algorithm: str = "astar"
    shuffle_steps: int = 100
    dfs_max_depth: int = 60
    log_level: str = "WARNING"
    # Seconds between frames when a solution is played back.
    playback_delay: float = 0.15

    def to_dict(self) -> dict:
        return asdict(self)


# -- value checks -------------------------------------------------------------


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_algorithm(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    try:
        return Algorithm.parse(value).value
    except UnsupportedAlgorithmError:
        return None


def _check_log_level(value: Any) -> str | None:
    if isinstance(value, str) and value.upper() in logging.getLevelNamesMapping():
        return value.upper()
    return None


# Each check returns the normalised value, or None to reject it.
_CHECKS: dict[str, Callable[[Any], Any]] = {
    "algorithm": _check_algorithm,
    "shuffle_steps": lambda v: v if _is_int(v) else None,
    "dfs_max_depth": lambda v: v if _is_int(v) and v >= 0 else None,
    "log_level": _check_log_level,
    "playback_delay": lambda v: float(v) if _is_number(v) and v >= 0 else None,
}


def _checked_values(data: dict[str, Any]) -> dict[str, Any]:
    """Keep the known keys whose values pass their check."""
    defaults = Settings()
    values: dict[str, Any] = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = _CHECKS[f.name](data[f.name])
        if value is None:
            logger.warning(
                "Invalid value for setting %s: %r, using default %r",
                f.name, data[f.name], getattr(defaults, f.name),
            )
            continue
        values[f.name] = value
    return values


def _resolve_path(path: Path | None) -> Path:
    if path is not None:
        return path
    env = os.environ.get(ENV_VAR)
    return Path(env) if env else SETTINGS_FILE


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings from a JSON file.

    Args:
        path: File to read; falls back to ``$PUZZLE_CONFIG``, then
            ``config.json``

    Returns:
        Settings merged over the defaults.  Returns defaults if the file
        is missing or invalid; a value of the wrong type or out of range
        keeps its default.
    """
    settings_path = _resolve_path(path)
    if not settings_path.exists():
        logger.debug("Settings file %s not found, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load settings from %s: %s, using defaults", settings_path, e)
        return Settings()

    if not isinstance(data, dict):
        logger.warning("Settings file %s is not a JSON object, using defaults", settings_path)
        return Settings()

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))

    settings = Settings(**_checked_values(data))
    logger.debug("Settings loaded: %s", settings)
    return settings


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings to save
        path: Destination; same fallback order as ``load_settings``
    """
    settings_path = _resolve_path(path)
    try:
        with open(settings_path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)
        logger.debug("Settings saved: %s", settings)
    except OSError as e:
        logger.error("Failed to save settings: %s", e)
