"""Tests for shared/logging_config.py."""

import logging

import pytest

from shared.logging_config import HANDLER_NAME, configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_sets_level(self, root_logger):
        configure_logging("debug")
        assert root_logger.level == logging.DEBUG

    def test_installs_one_handler(self, root_logger):
        configure_logging("INFO")
        configure_logging("INFO")
        ours = [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
