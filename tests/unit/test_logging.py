"""
Unit tests for logging module.
"""

import logging

from ui_components_server.core.logging import (
    StructuredLogger,
    UIComponentsFormatter,
    get_logger,
    setup_logging,
)


def _record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestUIComponentsFormatter:
    """Test custom formatter."""

    def test_format_basic_log(self):
        result = UIComponentsFormatter().format(_record())
        assert "ℹ️" in result
        assert "test: Test message" in result

    def test_format_with_extra_data(self):
        record = _record()
        record.extra_data = {"key": "value", "count": 42}

        result = UIComponentsFormatter().format(record)

        assert "key=value" in result
        assert "count=42" in result

    def test_error_emoji(self):
        assert "❌" in UIComponentsFormatter().format(_record(level=logging.ERROR))


class TestStructuredLogger:
    """Test structured logger."""

    def test_logger_creation(self):
        logger = StructuredLogger("test_logger")
        assert logger.logger.name == "test_logger"

    def test_structured_fields_reach_record(self, caplog):
        logger = get_logger("ui_components_server.test")

        with caplog.at_level(logging.INFO, logger="ui_components_server.test"):
            logger.info("Built catalog", components=3)

        (record,) = caplog.records
        assert record.getMessage() == "Built catalog"
        assert record.extra_data == {"components": 3}

    def test_disabled_level_is_skipped(self, caplog):
        logger = get_logger("ui_components_server.quiet")

        with caplog.at_level(logging.WARNING, logger="ui_components_server.quiet"):
            logger.debug("hidden", detail="x")

        assert caplog.records == []


class TestSetupLogging:
    """Test logging setup."""

    def test_setup_logging_default(self):
        setup_logging()
        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert any(
            isinstance(h.formatter, UIComponentsFormatter) for h in root_logger.handlers
        )

    def test_setup_logging_debug(self):
        setup_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "server.log"
        setup_logging("INFO", log_file)

        logging.getLogger("file_test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        assert "written" in log_file.read_text()

        for handler in logging.getLogger().handlers[:]:
            if isinstance(handler, logging.FileHandler):
                logging.getLogger().removeHandler(handler)
                handler.close()

    def test_quiets_httpx(self):
        setup_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
