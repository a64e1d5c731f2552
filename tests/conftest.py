"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from services.layout_service import BorderLayoutService, BorderSettings


# ---------------------------------------------------------------------------
# Layout Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def layout_service() -> BorderLayoutService:
    return BorderLayoutService()


@pytest.fixture
def portrait_8x10_settings() -> BorderSettings:
    """35mm (3:2) on portrait 8x10 with a half inch border."""
    return BorderSettings(
        paper_size="8x10",
        aspect_ratio="3:2",
        min_border=0.5,
        is_landscape=False,
    )


@pytest.fixture
def landscape_8x10_settings() -> BorderSettings:
    """The stock preset: 35mm on landscape 8x10, 6x9 print."""
    return BorderSettings()


@pytest.fixture
def quiet_logging(monkeypatch):
    """Stop the CLI from configuring file logging during tests."""
    import main

    monkeypatch.setattr(main, "setup_logging", lambda *args, **kwargs: None)
