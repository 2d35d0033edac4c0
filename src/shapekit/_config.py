from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_ENV_VAR = "SHAPEKIT_HOME"
CONFIG_FILENAME = "shapekit.cfg"
DEFAULT_CONFIG = {
    "_comment": "segments_per_circle: arc sampling density (>= 3). tolerance: closure test for outlines.",
    "segments_per_circle": 64,
    "tolerance": 1e-9,
}


@dataclass(frozen=True)
class SamplingSettings:
    """Resolved sampling settings from shapekit.cfg."""

    segments_per_circle: int
    tolerance: float


def config_dir() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".shapekit"


def config_file() -> Path:
    return config_dir() / CONFIG_FILENAME


def ensure_user_config() -> None:
    """Ensure the config file exists with sane defaults."""

    directory = config_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    path = directory / CONFIG_FILENAME
    if path.exists():
        return

    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    path = config_file()
    if not path.exists():
        return DEFAULT_CONFIG.copy()
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        return DEFAULT_CONFIG.copy()
    return data


def _normalize_segments(value: Any) -> int | None:
    try:
        count = int(value)
    except (TypeError, ValueError):
        return None
    if count < 3:
        return None
    return count


def _normalize_tolerance(value: Any) -> float | None:
    try:
        tol = float(value)
    except (TypeError, ValueError):
        return None
    if not tol >= 0.0 or tol == float("inf"):
        return None
    return tol


def get_sampling_settings() -> SamplingSettings:
    """Return the configured sampling density and closure tolerance."""

    raw_config = _load_user_config()
    segments = _normalize_segments(raw_config.get("segments_per_circle"))
    if segments is None:
        segments = DEFAULT_CONFIG["segments_per_circle"]
    tolerance = _normalize_tolerance(raw_config.get("tolerance"))
    if tolerance is None:
        tolerance = DEFAULT_CONFIG["tolerance"]
    return SamplingSettings(segments_per_circle=segments, tolerance=tolerance)
