"""Cache of host style definitions, one slot per nesting level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .logger import get_logger

if TYPE_CHECKING:
    from .host import EditorHost

STYLE_NAME_PREFIX = "CodeRegionBg"


def style_name_for_level(level: int) -> str:
    """Return the host style name used for a nesting level."""
    return f"{STYLE_NAME_PREFIX}{level}"


@dataclass(frozen=True, slots=True)
class StyleEntry:
    """A style defined in the host and the color it was last defined with."""

    name: str
    color: str


class StyleRegistry:
    """Defines level styles in the host, skipping redefinitions of unchanged colors.

    The cache is keyed by level: re-theming a level overwrites its single
    entry instead of adding a new one. :meth:`reset` forgets every entry so
    the next request always redefines, for when the host may have dropped
    its definitions (colorscheme change, buffer clear).
    """

    def __init__(self, host: EditorHost) -> None:
        self._host = host
        self._entries: dict[int, StyleEntry] = {}

    def ensure_style(self, level: int, color: str | None) -> str | None:
        """Make sure the style for a level is defined with the given color.

        Args:
            level: 1-based nesting level
            color: Background color as '#rrggbb', or None

        Returns:
            The style name, or None if color is None or the host rejected the definition
        """
        if color is None:
            return None

        logger = get_logger()
        name = style_name_for_level(level)
        entry = self._entries.get(level)
        if entry is not None and entry.color == color:
            logger.checks("Style %s already defined as %s", name, color)
            return name

        try:
            self._host.define_style(name, {"background": color, "overridable": True})
        except Exception as e:  # noqa: BLE001 - a failed definition only disables this level
            logger.debug("Failed to define style %s as %s: %s", name, color, e)
            return None

        self._entries[level] = StyleEntry(name=name, color=color)
        logger.changes("Defined style %s as %s", name, color)
        return name

    def get(self, level: int) -> StyleEntry | None:
        """Return the cached entry for a level, if any."""
        return self._entries.get(level)

    def reset(self) -> None:
        """Forget every cached definition."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, level: object) -> bool:
        return level in self._entries
