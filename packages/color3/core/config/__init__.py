"""Configuration management for Color³."""

from color3.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from color3.core.config.models import AppConfig, ConsensusConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "ConsensusConfig",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
