"""Unit tests for logging setup."""

from loguru import logger

from monadpay.logging import setup_logging


class TestSetupLogging:
    """Tests for loguru sink configuration."""

    def test_file_sink_receives_messages(self, tmp_path):
        """Optional file sink captures log records at the given level."""
        log_file = tmp_path / "monadpay.log"
        setup_logging(level="debug", log_file=str(log_file))

        logger.debug("payment link decoded")
        logger.remove()

        assert "payment link decoded" in log_file.read_text(encoding="utf-8")

    def test_level_filters_file_sink(self, tmp_path):
        """Messages below the configured level are dropped."""
        log_file = tmp_path / "monadpay.log"
        setup_logging(level="WARNING", log_file=str(log_file))

        logger.info("not written")
        logger.warning("written")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "written" in content
        assert "not written" not in content
