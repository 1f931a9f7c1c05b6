"""Painting of region interiors with level background styles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .logger import get_logger
from .policy import color_for_level
from .registry import StyleRegistry

if TYPE_CHECKING:
    from .config import HighlightConfig
    from .host import EditorHost

NAMESPACE_TAG = "code_regions_hl"
HIGHLIGHT_PRIORITY = 10  # Low, so other decorations stay visible


@dataclass(frozen=True, slots=True)
class Region:
    """A delimited region as reported by region detection.

    Attributes:
        start_line: 1-based line holding the opening marker
        end_line: 1-based line holding the closing marker
        level: 1-based nesting depth
    """

    start_line: int
    end_line: int
    level: int


class RegionPainter:
    """Applies and clears region background highlights in editor buffers."""

    def __init__(
        self,
        host: EditorHost,
        config: HighlightConfig,
        registry: StyleRegistry | None = None,
    ) -> None:
        self.host = host
        self.config = config
        self.registry = registry if registry is not None else StyleRegistry(host)
        self._namespace: int | None = None

    def _get_namespace(self) -> int | None:
        if self._namespace is None:
            try:
                self._namespace = self.host.create_namespace(NAMESPACE_TAG)
            except Exception as e:  # noqa: BLE001 - no namespace means nothing to paint or clear
                get_logger().debug("Failed to create namespace %s: %s", NAMESPACE_TAG, e)
                return None
        return self._namespace

    def paint(self, buffer: int, start_line: int, end_line: int, level: int) -> bool:
        """Highlight the lines strictly between a region's markers.

        Args:
            buffer: Host buffer handle
            start_line: 1-based line of the opening marker
            end_line: 1-based line of the closing marker
            level: 1-based nesting level

        Returns:
            True if a mark was placed, False if nothing was painted
        """
        if not self.config.enable_colors:
            return False

        logger = get_logger()
        color = color_for_level(level, self.config, self.host)
        if color is None:
            return False

        style_name = self.registry.ensure_style(level, color)
        if style_name is None:
            return False

        # 1-based marker lines -> 0-based interior, end exclusive
        mark_start = start_line
        mark_end = end_line - 1
        if mark_start >= mark_end:
            logger.checks(
                "Region %d-%d (level %d) has no interior lines", start_line, end_line, level
            )
            return False

        namespace = self._get_namespace()
        if namespace is None:
            return False

        try:
            self.host.mark_line_range(
                buffer,
                namespace,
                mark_start,
                mark_end,
                {"style_name": style_name, "priority": HIGHLIGHT_PRIORITY},
            )
        except Exception as e:  # noqa: BLE001 - an unpaintable range is skipped
            logger.debug(
                "Failed to mark lines %d-%d in buffer %d: %s", mark_start, mark_end, buffer, e
            )
            return False

        logger.changes(
            "Painted buffer %d lines %d-%d with %s", buffer, mark_start, mark_end, style_name
        )
        return True

    def clear(self, buffer: int) -> None:
        """Remove every region highlight from a buffer and reset the style cache."""
        namespace = self._get_namespace()
        if namespace is not None:
            try:
                self.host.clear_namespace(buffer, namespace)
            except Exception as e:  # noqa: BLE001 - clearing is best effort
                get_logger().debug("Failed to clear buffer %d: %s", buffer, e)
        self.registry.reset()

    def refresh(self, buffer: int, regions: Iterable[Region]) -> int:
        """Clear a buffer and paint the given regions.

        Regions are painted in order, so inner regions listed after their
        parents end up on top.

        Returns:
            Number of regions that were painted
        """
        self.clear(buffer)
        return sum(
            self.paint(buffer, region.start_line, region.end_line, region.level)
            for region in regions
        )

    def theme_changed(self) -> None:
        """Forget cached styles after a colorscheme change.

        Existing marks keep their style names; the next paint redefines them.
        """
        self.registry.reset()
