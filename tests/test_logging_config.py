"""Tests for qualytics.logging_config."""

import logging

from rich.logging import RichHandler

from qualytics.config import AnalysisConfig
from qualytics.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Handlers and levels driven by AnalysisConfig."""

    def test_default_is_warning(self):
        logger = setup_logging()
        assert logger.name == "qualytics"
        assert logger.level == logging.WARNING

    def test_levels_follow_verbosity(self):
        assert setup_logging(AnalysisConfig(verbosity="verbose")).level == logging.DEBUG
        assert setup_logging(AnalysisConfig(verbosity="quiet")).level == logging.ERROR
        assert setup_logging(AnalysisConfig(verbosity="normal")).level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_log_file_receives_records(self, tmp_path):
        path = tmp_path / "qualytics.log"
        logger = setup_logging(AnalysisConfig(verbosity="verbose", log_file=str(path)))
        assert len(logger.handlers) == 2

        get_logger("metrics").debug("relaxation finished")
        text = path.read_text(encoding="utf-8")
        assert "qualytics.metrics - DEBUG - relaxation finished" in text

    def test_file_handler_closed_on_reset(self, tmp_path):
        path = tmp_path / "qualytics.log"
        setup_logging(AnalysisConfig(log_file=str(path)))
        logger = setup_logging()
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


class TestGetLogger:
    def test_prefixes_namespace(self):
        assert get_logger("api").name == "qualytics.api"

    def test_keeps_qualified_names(self):
        assert get_logger("qualytics.metrics.structure").name == "qualytics.metrics.structure"

    def test_default_is_package_logger(self):
        assert get_logger().name == "qualytics"
