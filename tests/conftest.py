"""Shared fixtures for rlevector tests."""

import pytest

from rlevector.config import clear_config_cache


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the repository config with no profile selected."""
    monkeypatch.delenv('RLEVECTOR_PROFILE', raising=False)
    monkeypatch.delenv('RLEVECTOR_CONFIG_DIR', raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def stepped():
    """The ten-element vector [0,0,0,1,1,2,2,2,2,2] as a dense list."""
    return [0, 0, 0, 1, 1, 2, 2, 2, 2, 2]
