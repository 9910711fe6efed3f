"""
Tests for configuration module.
"""

import pytest
from pathlib import Path
import sys

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chronicle.core.config import (
    PROJECT_NAME,
    PROJECT_VERSION,
    ERA_CONFIG,
    ARCHIVE_CONFIG,
    DISPLAY_CONFIG,
)


def test_project_info():
    """Test project information constants."""
    assert PROJECT_NAME == "Chronicle"
    assert PROJECT_VERSION == "1.0.0"


def test_era_config():
    """Test era configuration defaults."""
    assert ERA_CONFIG["EARLY_ERA_CUTOFF"] == "2025-11-20T23:59:59"
    assert ERA_CONFIG["FIRST_ERA_START"] == "2025-11-21"
    assert ERA_CONFIG["EARLY_ERA_LABEL"] == "Early Era"
    assert ERA_CONFIG["POST_EARLY_ERA_LABEL"] == "Post Early Era"
    assert ERA_CONFIG["UNKNOWN_ERA_LABEL"] == "Unknown Era"


def test_archive_config():
    """Test archive configuration."""
    assert ARCHIVE_CONFIG["STATUS_BUCKETS"] == ["Released", "Unreleased", "Sessions"]
    assert ARCHIVE_CONFIG["SESSION_PLACEHOLDER"].strip()
    assert ARCHIVE_CONFIG["DEFAULT_SORT_FIELD"] in ARCHIVE_CONFIG["SORT_FIELDS"]


def test_display_config():
    """Test display configuration."""
    assert DISPLAY_CONFIG["DEFAULT_LAYOUT"] in DISPLAY_CONFIG["LAYOUTS"]
    assert DISPLAY_CONFIG["DATE_FORMAT"] == "%m/%d/%Y"


def test_environment_variable_override(monkeypatch):
    """Test that environment variables override the era cutoff."""
    import importlib
    from chronicle.core import config

    monkeypatch.setenv("CHRONICLE_EARLY_ERA_CUTOFF", "2024-01-01T00:00:00")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.ERA_CONFIG["EARLY_ERA_CUTOFF"] == "2024-01-01T00:00:00"
    finally:
        monkeypatch.delenv("CHRONICLE_EARLY_ERA_CUTOFF")
        importlib.reload(config)
