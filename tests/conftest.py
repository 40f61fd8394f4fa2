"""Shared test fixtures for ytguard."""

import logging

import pytest

from ytguard.config.models import WrapperConfig


@pytest.fixture
def make_config():
    """Build a WrapperConfig from raw setting overrides."""

    def _make(**overrides: str) -> WrapperConfig:
        settings = {key.replace("__", "-"): value for key, value in overrides.items()}
        return WrapperConfig.from_mapping(settings)

    return _make


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() side effects between tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
