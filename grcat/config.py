"""Tool settings — frozen dataclass from env vars and an optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    search_dirs: tuple[str, ...] = ()
    flush: bool = True


def load_yaml_settings(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML settings from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Settings file %s not found, using defaults", path)
        return {}


def load_settings(yaml_data: dict, environ=None) -> Settings:
    """Build Settings from env vars, then YAML data, then defaults."""
    if environ is None:
        environ = os.environ

    log_level = str(yaml_data.get("log_level", Settings.log_level))
    log_level = environ.get("GRCAT_LOG_LEVEL", log_level).upper()
    if log_level not in LOG_LEVELS:
        logger.warning("Unknown log level %r, using %s", log_level, Settings.log_level)
        log_level = Settings.log_level

    raw_path = environ.get("GRCAT_PATH")
    if raw_path is not None:
        search_dirs = tuple(d for d in raw_path.split(os.pathsep) if d)
    else:
        search_dirs = tuple(str(d) for d in yaml_data.get("search_dirs", []) or [])

    flush = yaml_data.get("flush", Settings.flush)
    if isinstance(flush, str):
        flush = parse_bool(flush)
    if "GRCAT_FLUSH" in environ:
        flush = parse_bool(environ["GRCAT_FLUSH"])

    return Settings(
        log_level=log_level,
        search_dirs=search_dirs,
        flush=bool(flush),
    )
