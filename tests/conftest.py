"""Shared pytest configuration and fixtures for all tests."""

import pytest

from desktop_actions.api.config.DesktopConfig import DesktopConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with fake desktop collaborators")
    config.addinivalue_line("markers", "integration: tests that touch the real filesystem or platform")
    config.addinivalue_line("markers", "config: configuration loading and validation tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(backend_type: str = "windows") -> dict:
    """Minimal valid configuration dict for testing.

    The backend is explicit so tests never depend on the host OS.
    """
    return {
        "type": backend_type,
        "home_dir": None,
        "desktop_dirname": None,
        "log": {"level": "INFO", "file": False},
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Isolated user home with a Desktop folder; HOME and the app home point into tmp_path."""
    home = tmp_path / "home"
    (home / "Desktop").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("DESKTOP_ACTIONS_HOME", str(tmp_path / "app_home"))
    return home


@pytest.fixture
def desktop_config(home_dir) -> DesktopConfig:
    """Windows-backend config whose user home is the isolated home_dir."""
    return DesktopConfig(type="windows", home_dir=home_dir)
