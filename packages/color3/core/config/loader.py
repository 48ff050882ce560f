"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from color3.core.config.models import AppConfig
from color3.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

ENV_STORE_DIR = "COLOR3_STORE_DIR"
ENV_LOG_LEVEL = "COLOR3_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("color3.json")
        'json'
        >>> detect_format("color3.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in (".yaml", ".yml"):
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing default config file yields defaults; an explicitly given path
    must exist. Environment variables override file values.

    Args:
        path: Path to app config file; defaults to ``AppConfig.default_path()``

    Returns:
        Validated AppConfig

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        default = AppConfig.default_path()
        raw = load_config(default) if default.exists() else {}
    else:
        raw = load_config(path)

    config = AppConfig.model_validate(raw)
    return _apply_env_overrides(config)


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    """Return a copy of ``config`` with environment overrides applied.

    Raises:
        ValidationError: If an override is invalid (e.g. unknown log level)
    """
    store_dir = os.getenv(ENV_STORE_DIR)
    log_level = os.getenv(ENV_LOG_LEVEL)
    if not store_dir and not log_level:
        return config

    data = config.model_dump()
    if store_dir:
        logger.debug(f"Loaded {ENV_STORE_DIR} from environment")
        data["store_dir"] = store_dir
    if log_level:
        logger.debug(f"Loaded {ENV_LOG_LEVEL} from environment")
        data["logging"]["level"] = log_level.upper()
    return AppConfig.model_validate(data)


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
