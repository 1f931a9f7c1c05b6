"""code-regions - nesting-level background highlights for code regions.

This package derives a theme-aware background color for each region nesting
level and paints region interiors in an editor buffer:
- Color conversions between hex, RGB and HSL
- Base background resolution with a fallback chain
- Level-to-color policy (explicit palette or generated shades)
- A per-level style cache that avoids redundant host redefinitions

Main entry points:
- RegionPainter: paint and clear region highlights in a buffer
- setup / get_painter: session-wide painter
- HighlightConfig / load_config: configuration
"""

from .colorspace import HSL, RGB, hex_to_rgb, hsl_to_rgb, parse_color, rgb_to_hex, rgb_to_hsl
from .config import ColorGenerationConfig, HighlightConfig, load_config
from .exceptions import (
    CodeRegionsError,
    ConfigError,
    HostError,
    HostMutationError,
    HostQueryError,
    InvalidColorFormat,
)
from .host import EditorHost, MemoryHost
from .painter import Region, RegionPainter
from .policy import color_for_level
from .registry import StyleEntry, StyleRegistry
from .session import get_painter, setup

__version__ = "0.1.0"

__all__ = [
    # Colors
    "HSL",
    "RGB",
    "hex_to_rgb",
    "hsl_to_rgb",
    "parse_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "color_for_level",
    # Configuration
    "ColorGenerationConfig",
    "HighlightConfig",
    "load_config",
    # Host
    "EditorHost",
    "MemoryHost",
    # Highlighting
    "Region",
    "RegionPainter",
    "StyleEntry",
    "StyleRegistry",
    "get_painter",
    "setup",
    # Exceptions
    "CodeRegionsError",
    "ConfigError",
    "HostError",
    "HostMutationError",
    "HostQueryError",
    "InvalidColorFormat",
]
