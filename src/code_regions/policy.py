"""Mapping from region nesting level to background color."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .background import resolve_base_background
from .colorspace import HSL, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from .logger import get_logger

if TYPE_CHECKING:
    from .config import ColorGenerationConfig, HighlightConfig
    from .host import EditorHost

HSL_FAILURE_WARNING = "Code Regions: Failed to convert Normal BG to HSL."


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def generated_hsl(level: int, base: HSL, options: ColorGenerationConfig) -> HSL:
    """Shift the base background's lightness by one step per level.

    Hue always comes from the base; saturation comes from the override when
    one is configured.
    """
    lightness = _clamp(
        base.l + level * options.lightness_step,
        options.min_lightness,
        options.max_lightness,
    )
    saturation = base.s if options.saturation is None else _clamp(options.saturation, 0.0, 1.0)
    return HSL(h=base.h, s=saturation, l=lightness)


def generate_color(level: int, config: HighlightConfig, host: EditorHost) -> str:
    """Generate a background color for a level from the editor background.

    If the background cannot be converted to HSL the user is warned and the
    first palette entry (or the raw background) is used instead.

    Args:
        level: 1-based nesting level
        config: Highlight configuration
        host: Editor host providing the base background

    Returns:
        Color as '#rrggbb'
    """
    logger = get_logger()
    base_hex = resolve_base_background(host)
    base_hsl = rgb_to_hsl(hex_to_rgb(base_hex))

    if base_hsl is None:
        logger.warning("%s (background %r)", HSL_FAILURE_WARNING, base_hex)
        try:
            host.warn(HSL_FAILURE_WARNING)
        except Exception as e:  # noqa: BLE001 - a broken notifier must not stop painting
            logger.debug("Failed to notify user: %s", e)
        return config.colors[0] if config.colors else base_hex

    new_hsl = generated_hsl(level, base_hsl, config.color_generation)
    new_hex = rgb_to_hex(hsl_to_rgb(new_hsl))
    logger.debug(
        "Level %d: base %s (l=%.3f) -> l=%.3f s=%.3f -> %s",
        level,
        base_hex,
        base_hsl.l,
        new_hsl.l,
        new_hsl.s,
        new_hex,
    )
    return new_hex or base_hex


def color_for_level(level: int, config: HighlightConfig, host: EditorHost) -> str | None:
    """Return the background color for a region nesting level.

    Returns None when highlighting is disabled. An explicit palette is cycled
    with level 1 mapping to its first entry; otherwise the color is generated
    from the editor background.
    """
    if not config.enable_colors:
        return None

    if config.colors:
        return config.colors[(level - 1) % len(config.colors)]

    return generate_color(level, config, host)
