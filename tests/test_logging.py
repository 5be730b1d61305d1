"""Tests for logging utilities."""

import logging

import pytest

from localrag.utils import get_logger, set_log_level


@pytest.fixture(autouse=True)
def restore_level():
    package = logging.getLogger("localrag")
    level = package.level
    yield
    package.setLevel(level)


class TestLogging:
    def test_single_package_handler(self):
        first = get_logger("localrag.transport.http")
        second = get_logger("localrag.providers.ollama")
        assert first.handlers == []
        assert second.handlers == []
        assert len(logging.getLogger("localrag").handlers) == 1

    def test_set_log_level_reaches_children(self):
        logger = get_logger("localrag.rag.indexer")
        set_log_level("DEBUG")
        assert logger.isEnabledFor(logging.DEBUG)
        set_log_level(logging.ERROR)
        assert not logger.isEnabledFor(logging.WARNING)
