"""Persistent conversion settings for ico-builder."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ico_builder.settings.common import app_config_dir

CONVERSION_STORE_VERSION = 1

DEFAULT_MAX_WORKERS = 4
MAX_WORKERS_LIMIT = 32
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _conversion_store_path() -> Path:
    return app_config_dir() / "conversion.yaml"


def get_default_conversion_settings() -> dict[str, Any]:
    """Return the default conversion settings."""
    return {
        "version": CONVERSION_STORE_VERSION,
        "max_workers": DEFAULT_MAX_WORKERS,
        "include_mask_in_size": False,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def load_conversion_settings(path: str | Path | None = None) -> dict[str, Any]:
    """Load persisted conversion settings, falling back to defaults."""
    path = Path(path) if path is not None else _conversion_store_path()
    defaults = get_default_conversion_settings()

    if not path.exists():
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except Exception as exc:
        logger.warning(f"Failed to read conversion settings: {exc}")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Ignoring conversion settings in {path}: expected a mapping")
        return defaults

    # Merge loaded values over defaults so new keys are always present
    merged = dict(defaults)
    workers = data.get("max_workers")
    if isinstance(workers, int) and not isinstance(workers, bool):
        if 1 <= workers <= MAX_WORKERS_LIMIT:
            merged["max_workers"] = workers
        else:
            logger.warning(f"Ignoring max_workers={workers}, expected 1..{MAX_WORKERS_LIMIT}")
    elif workers is not None:
        logger.warning(f"Ignoring max_workers={workers!r}, expected an integer")
    mask_flag = data.get("include_mask_in_size")
    if isinstance(mask_flag, bool):
        merged["include_mask_in_size"] = mask_flag
    elif mask_flag is not None:
        logger.warning(f"Ignoring include_mask_in_size={mask_flag!r}, expected true or false")
    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        merged["log_level"] = level.upper()
    elif level is not None:
        logger.warning(f"Ignoring log_level={level!r}, expected one of {', '.join(LOG_LEVELS)}")

    return merged


def save_conversion_settings(settings: dict[str, Any], path: str | Path | None = None) -> None:
    """Persist conversion settings to disk."""
    payload = {
        "version": CONVERSION_STORE_VERSION,
        "max_workers": settings.get("max_workers", DEFAULT_MAX_WORKERS),
        "include_mask_in_size": settings.get("include_mask_in_size", False),
        "log_level": settings.get("log_level", DEFAULT_LOG_LEVEL),
    }
    path = Path(path) if path is not None else _conversion_store_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(payload, f, sort_keys=False)
