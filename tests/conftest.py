"""Shared test fixtures."""
import logging
import pytest
import structlog
from digit_grouping.config import Settings
from digit_grouping.models.grouping import GroupingSpec


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any DIGIT_GROUPING_* variables from the environment."""
    for var in ("DIGIT_GROUPING_LOG_LEVEL", "DIGIT_GROUPING_DEFAULT_PRESET", "DIGIT_GROUPING_DEFAULT_SEPARATOR"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def reset_logging():
    """Restore structlog defaults and the root logger after the test."""
    root = logging.getLogger()
    saved_level = root.level
    yield
    structlog.reset_defaults()
    # pytest re-attaches its capture handlers for each phase
    root.handlers.clear()
    root.setLevel(saved_level)


@pytest.fixture
def test_settings(clean_env):
    """Settings built without reading the host environment."""
    return Settings(log_level="DEBUG", default_preset="india", default_separator="'")


@pytest.fixture
def india_restart():
    """India widths with the restart policy."""
    return GroupingSpec.custom(",", [3, 2], restart_on_exhaustion=True)


@pytest.fixture
def india_repeat():
    """India widths with the repeat-last policy."""
    return GroupingSpec.custom(",", [3, 2], restart_on_exhaustion=False)
