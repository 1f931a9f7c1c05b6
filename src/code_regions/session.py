"""Editor session state shared by the highlighting entry points."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import CodeRegionsError
from .painter import RegionPainter

if TYPE_CHECKING:
    from .config import HighlightConfig
    from .host import EditorHost


class _Session:
    """Session state for managing the active painter."""

    def __init__(self) -> None:
        self.config_path: Path | None = None
        self.painter: RegionPainter | None = None


# Singleton instance
_session = _Session()


def get_config_path() -> Path | None:
    """Get the session config path."""
    return _session.config_path


def set_config_path(path: Path | None) -> None:
    """Set the session config path."""
    _session.config_path = path


def setup(host: EditorHost, config: HighlightConfig) -> RegionPainter:
    """Start highlighting for an editor session.

    Replaces any previous painter, so its style cache starts empty.
    """
    _session.painter = RegionPainter(host, config)
    return _session.painter


def get_painter() -> RegionPainter:
    """Get the session painter.

    Raises:
        CodeRegionsError: If setup() has not been called
    """
    if _session.painter is None:
        raise CodeRegionsError("Highlighting is not set up; call setup() first")
    return _session.painter


def reset_session() -> None:
    """Drop all session state (used between tests)."""
    _session.config_path = None
    _session.painter = None
