"""Shared pytest fixtures for Console Kit tests."""

import logging
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def navigator():
    """Navigator collaborator whose transitions succeed."""
    nav = AsyncMock()
    nav.transition_to.return_value = None
    return nav


@pytest.fixture
def invoker():
    """Backend action invoker collaborator."""
    inv = AsyncMock()
    inv.invoke.return_value = {"status": "ok"}
    return inv


@pytest.fixture
def link_opener():
    """Link opener collaborator."""
    opener = AsyncMock()
    opener.open.return_value = None
    return opener


@pytest.fixture
def reset_loggers():
    """Drop handlers that setup_logging() attached to the package loggers."""
    from core.logging_setup import LOGGER_NAMES

    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
