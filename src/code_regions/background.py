"""Resolution of the editor's base background color."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .colorspace import normalize_hex
from .host import EditorHost
from .logger import get_logger

NORMAL_STYLE = "Normal"
INACTIVE_STYLE = "NormalNC"
DARK_DEFAULT_BACKGROUND = "#202020"
LIGHT_DEFAULT_BACKGROUND = "#f0f0f0"

BackgroundProducer = Callable[[EditorHost], str | None]


def _format_background(value: str | int | None) -> str | None:
    """Turn a host-reported background into '#rrggbb' form (None if unset or malformed)."""
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return f"#{value:06x}"
    return normalize_hex(value)


def _style_background(name: str) -> BackgroundProducer:
    def producer(host: EditorHost) -> str | None:
        return _format_background(host.get_style(name).get("background"))

    producer.__name__ = f"style_background[{name}]"
    return producer


def _preference_default(host: EditorHost) -> str | None:
    if host.get_global_background() == "dark":
        return DARK_DEFAULT_BACKGROUND
    return LIGHT_DEFAULT_BACKGROUND


# Tried in order until one yields a color
BACKGROUND_PRODUCERS: list[BackgroundProducer] = [
    _style_background(NORMAL_STYLE),
    _style_background(INACTIVE_STYLE),
    _preference_default,
]


def resolve_base_background(
    host: EditorHost,
    producers: Sequence[BackgroundProducer] | None = None,
) -> str:
    """Resolve the background color regions are derived from.

    Each producer is asked in turn; a producer that returns None or raises is
    skipped. When every producer fails the dark default is returned, so this
    function never raises.

    Args:
        host: Editor host to query
        producers: Fallback chain to use (defaults to BACKGROUND_PRODUCERS)

    Returns:
        Background color as '#rrggbb'
    """
    logger = get_logger()
    for producer in producers if producers is not None else BACKGROUND_PRODUCERS:
        try:
            color = producer(host)
        except Exception as e:  # noqa: BLE001 - any host failure means "unavailable"
            logger.debug("Background query %s failed: %s", producer.__name__, e)
            continue
        if color is not None:
            return color
    return DARK_DEFAULT_BACKGROUND
