"""Pytest configuration and fixtures for code-regions tests."""

from __future__ import annotations

import pytest

from code_regions import session
from code_regions.config import ColorGenerationConfig, HighlightConfig
from code_regions.host import MemoryHost
from code_regions.logger import reset_logger
from code_regions.painter import RegionPainter

BUFFER = 1
BUFFER_LINES = 20


@pytest.fixture(autouse=True)
def clean_state() -> None:
    """Reset the logger and session state before each test for isolation."""
    reset_logger()
    session.reset_session()


@pytest.fixture
def host() -> MemoryHost:
    """Dark host with a 20-line buffer and a '#202020' Normal background."""
    h = MemoryHost(background="dark")
    h.add_buffer(BUFFER, BUFFER_LINES)
    h.set_user_style("Normal", "#202020")
    return h


@pytest.fixture
def generated_config() -> HighlightConfig:
    """Config generating colors in 0.05 lightness steps over the full range."""
    return HighlightConfig(
        color_generation=ColorGenerationConfig(
            lightness_step=0.05, min_lightness=0.0, max_lightness=1.0
        )
    )


@pytest.fixture
def palette_config() -> HighlightConfig:
    """Config with a three-color explicit palette."""
    return HighlightConfig(colors=["#111111", "#222222", "#333333"])


@pytest.fixture
def painter(host: MemoryHost, generated_config: HighlightConfig) -> RegionPainter:
    """Painter over the default host with generated colors."""
    return RegionPainter(host, generated_config)
