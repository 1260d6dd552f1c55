"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from datum_enum import config, enum, logging_utils


def _clear_settings_caches() -> None:
    """Drop cached settings and the shared random generator built from them."""
    config.get_settings.cache_clear()
    enum._shared_random.cache_clear()


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """
    Ensure settings are re-read from the (monkeypatched) environment.
    """
    _clear_settings_caches()
    yield
    _clear_settings_caches()


@pytest.fixture
def restore_root_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    """
    Snapshot the root logger so `configure_logging` can be exercised safely.
    """
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
