"""
Pytest configuration and shared fixtures for the Devkit backend tests.
"""

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the ConfigManager singleton at a fresh temp directory."""
    monkeypatch.setenv("DEVKIT_CONFIG_DIR", str(tmp_path / "config"))
    ConfigManager.reset_instance()
    yield tmp_path / "config"
    ConfigManager.reset_instance()


@pytest.fixture
def client():
    """TestClient against the full application."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
