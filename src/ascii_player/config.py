"""
ascii-video-player Configuration
================================

This module handles configuration loading for the player.

Configuration Sources (in order of precedence):
    1. YAML file (--config path, or ascii_player.yaml in the working directory)
    2. Default values

Command-line flags (--workers, --log-level) are applied on top by main.
The environment is never read.

Example:
    from ascii_player.config import load_config

    settings = load_config()
    print(settings.render.target_width)
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class RenderConfig(BaseModel):
    """Frame rendering configuration."""

    ramp: str = Field(
        default=".-:=+*%#@$",
        min_length=1,
        description="Intensity ramp, sparsest glyph first",
    )
    target_width: int = Field(
        default=480,
        ge=1,
        description="Characters per row",
    )
    vertical_scale: float = Field(
        default=0.4,
        gt=0,
        description="Vertical compression for non-square terminal cells",
    )


class ConversionConfig(BaseModel):
    """Preload-mode parallel conversion configuration."""

    workers: int = Field(
        default=0,
        ge=0,
        description="Conversion workers (0 = hardware concurrency)",
    )
    progress_bar_width: int = Field(
        default=50,
        ge=1,
        description="Progress bar width in characters",
    )
    progress_threshold: float = Field(
        default=0.05,
        gt=0,
        le=1.0,
        description="Minimum progress advance between redraws",
    )


class PlaybackConfig(BaseModel):
    """Playback configuration."""

    fallback_fps: float = Field(
        default=30.0,
        gt=0,
        description="Frame rate used when the video reports none",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for ascii-video-player.

    Loaded from an optional YAML file; unset values keep their defaults.
    """

    render: RenderConfig = Field(default_factory=RenderConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from a YAML file, falling back to defaults.

    Args:
        config_path: Path to a YAML file. If None, searches the working
            directory.

    Returns:
        Settings: Loaded configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        pydantic.ValidationError: If a value is out of range
    """
    if config_path is None:
        for path in (Path("ascii_player.yaml"), Path("ascii_player.yml")):
            if path.exists():
                config_path = str(path)
                break
    elif not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config_data = {}
    if config_path:
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults")

    return Settings.model_validate(config_data)


def setup_logging(settings: Settings) -> None:
    """
    Configure logging based on settings.

    Logs go to stderr; stdout carries the frames.
    """
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
