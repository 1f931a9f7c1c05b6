"""Highlight configuration schema and loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from . import session
from .colorspace import parse_color
from .exceptions import ConfigError

DEFAULT_CONFIG_FILENAME = "code_regions.yaml"
CONFIG_SECTION = "code_regions"


class ColorGenerationConfig(BaseModel):
    """Options for procedurally generated region colors."""

    lightness_step: float = Field(
        default=0.03, description="Lightness added to the base background per nesting level"
    )
    min_lightness: float = Field(default=0.05, ge=0.0, le=1.0)
    max_lightness: float = Field(default=0.95, ge=0.0, le=1.0)
    saturation: float | None = Field(
        default=None, description="Saturation override (clamped to 0-1); None keeps the base"
    )

    def model_post_init(self, __context: Any) -> None:
        """Validate configuration after initialization."""
        if self.min_lightness > self.max_lightness:
            raise ValueError(
                f"color_generation.min_lightness ({self.min_lightness}) must not exceed "
                f"max_lightness ({self.max_lightness})"
            )


class HighlightConfig(BaseModel):
    """Configuration for region background highlighting."""

    enable_colors: bool = True
    colors: list[str] = Field(
        default_factory=list
    )  # Explicit palette cycled by level; empty = generate from the background
    color_generation: ColorGenerationConfig = ColorGenerationConfig()

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, v: list[str]) -> list[str]:
        """Normalize palette entries to lowercase '#rrggbb'."""
        return [parse_color(color) for color in v]


def load_config(config_path: Path | str) -> HighlightConfig:
    """Load highlight configuration from a YAML file.

    The settings may sit at the top level of the file or under a
    ``code_regions:`` section.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated HighlightConfig

    Raises:
        ConfigError: If the file is missing, empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open() as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not data:
        raise ConfigError(f"Empty configuration file: {config_path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_path}")

    section: Any = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"'{CONFIG_SECTION}' section must be a mapping: {config_path}")

    try:
        return HighlightConfig.model_validate(section)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e


def discover_config(config_path: Path | None = None) -> HighlightConfig:
    """Find and load the highlight configuration.

    Search order:
    1. Explicit config_path argument
    2. Session config path (set via CLI --config)
    3. Current directory / code_regions.yaml
    4. Built-in defaults
    """
    if config_path is not None:
        return load_config(config_path)

    session_path = session.get_config_path()
    if session_path is not None:
        return load_config(session_path)

    cwd_config = Path(DEFAULT_CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return HighlightConfig()
