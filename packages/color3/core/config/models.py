"""Configuration models for Color³."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stdout when unset")


class ConsensusConfig(BaseModel):
    """Consensus scoring configuration."""

    min_sample: int = Field(
        default=10, ge=1, description="Observations a slot needs before it is classified"
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    store_dir: str = Field(default="data/submissions", description="JSON submission store")
    horizon_months: int = Field(default=12, gt=0, description="Months searched for matches")
    consensus: ConsensusConfig = ConsensusConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("color3.json")
