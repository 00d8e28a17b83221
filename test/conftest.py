"""
Shared pytest configuration and fixtures for the appenv tests.
"""

import logging

import pytest
import structlog

from appenv.config import EnvironmentRegistry, get_environment_preset
from appenv.core.enums import Environment
from appenv.environment import reset_registry


@pytest.fixture(scope="session")
def expected_bundles():
    """
    Display name and base URL every flavor must resolve to.
    Session scope means this fixture is created once per test session.
    """
    return {
        Environment.DEV: ("Development", "https://dev.example.com"),
        Environment.UAT: ("Staging", "https://staging.example.com"),
        Environment.PROD: ("Production", "https://prod.example.com"),
    }


@pytest.fixture
def registry():
    """Fresh, uninitialized registry built from the presets."""
    return EnvironmentRegistry()


@pytest.fixture
def dev_registry(registry):
    registry.set_environment(Environment.DEV)
    return registry


@pytest.fixture
def dev_preset():
    return get_environment_preset(Environment.DEV)


@pytest.fixture
def write_overrides(tmp_path):
    """Write an environments.yaml into tmp_path and return the directory."""
    def _write(text: str):
        (tmp_path / "environments.yaml").write_text(text)
        return tmp_path
    return _write


@pytest.fixture(autouse=True)
def clean_process_state():
    """Give every test a fresh default registry and untouched logging setup."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    reset_registry()
    structlog.contextvars.clear_contextvars()
    yield
    reset_registry()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
