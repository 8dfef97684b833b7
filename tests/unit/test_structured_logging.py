"""
Unit tests for structured logging setup
"""

import logging

import pytest

from buildledger.utils import structured_logging
from buildledger.utils.structured_logging import get_structured_logger, setup_logging


@pytest.fixture
def restore_logging(monkeypatch):
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(structured_logging, "_structured_logger", structured_logging._structured_logger)
    yield root
    root.setLevel(level)


class TestSetupLogging:
    def test_level_applies_after_logging_is_configured(self, restore_logging):
        get_structured_logger()
        setup_logging("WARNING")
        assert restore_logging.level == logging.WARNING

        setup_logging("DEBUG")
        assert restore_logging.level == logging.DEBUG

    def test_level_from_environment(self, restore_logging, monkeypatch):
        monkeypatch.setenv("APP_LOG_LEVEL", "error")
        setup_logging()
        assert restore_logging.level == logging.ERROR

    def test_replaces_global_instance(self, restore_logging):
        setup_logging("INFO")
        assert get_structured_logger().level == "INFO"
