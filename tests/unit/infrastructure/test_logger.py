"""Tests for structured logging setup."""
import json
import logging

import pytest

from resource_binder.config.schemas import LogDestination, LoggingConfig
from resource_binder.infrastructure.logging import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.mark.unit
class TestLogging:
    def test_json_file_logging(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "binder.log"
        setup_logging(
            LoggingConfig(level="info", destination=LogDestination.FILE, file_path=str(log_file), json_format=True)
        )

        get_logger("resource_binder.test").info("Reading resource", resource_type="example_widget")
        for handler in restore_root_logger.handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert lines[-1]["event"] == "Reading resource"
        assert lines[-1]["resource_type"] == "example_widget"
        assert lines[-1]["level"] == "info"

    def test_level_applied_to_root(self, restore_root_logger):
        setup_logging(LoggingConfig(level="ERROR"))

        assert restore_root_logger.level == logging.ERROR
        assert len(restore_root_logger.handlers) == 1

    def test_get_logger_without_setup(self):
        assert get_logger("resource_binder.other") is not None
