"""Unit tests for logging setup."""

from activity_template.core.config import Config
from activity_template.core.logging import bind_context, clear_context, get_logger, setup_logging


class TestSetupLogging:
    """Tests for the stderr logging pipeline."""

    def test_events_go_to_stderr(self, capsys):
        """Test that log events never reach stdout."""
        setup_logging()
        get_logger(__name__).info("Generating activity", activity="MainActivity")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Generating activity" in captured.err
        assert "MainActivity" in captured.err

    def test_level_filters_debug(self, capsys):
        """Test that debug events are dropped at INFO level."""
        setup_logging(Config(log_level="INFO"))
        get_logger(__name__).debug("hidden event")

        assert "hidden event" not in capsys.readouterr().err

    def test_bound_context_is_attached_until_cleared(self, capsys):
        """Test that bind_context fields appear on events until cleared."""
        setup_logging()
        logger = get_logger(__name__)

        bind_context(request_id="r-42")
        logger.info("first")
        clear_context()
        logger.info("second")

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        assert "r-42" in next(line for line in lines if "first" in line)
        assert "r-42" not in next(line for line in lines if "second" in line)
