"""
Tests for the structured category logger.
"""

import pytest

from utils.logger import Logger, LogCategory, LogLevel, configure_logger, get_category_logger, get_logger


@pytest.fixture
def plain_logger():
    return Logger(min_level=LogLevel.DEBUG, use_colors=False)


class TestLogger:

    def test_message_and_details(self, plain_logger, capsys):
        plain_logger.info(LogCategory.RENDER, "Frame sent", universe=3, channels=288)
        lines = capsys.readouterr().out.splitlines()

        assert "RENDER" in lines[0]
        assert "Frame sent" in lines[0]
        assert lines[1].strip() == "├─ universe: 3"
        assert lines[2].strip() == "└─ channels: 288"

    def test_level_filter(self, capsys):
        logger = Logger(min_level=LogLevel.WARN, use_colors=False)
        logger.info(LogCategory.CONFIG, "hidden")
        logger.debug(LogCategory.CONFIG, "hidden too")
        logger.error(LogCategory.CONFIG, "shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_is_enabled_for(self):
        logger = Logger(min_level=LogLevel.INFO)
        assert not logger.is_enabled_for(LogLevel.DEBUG)
        assert logger.is_enabled_for(LogLevel.INFO)
        assert logger.is_enabled_for(LogLevel.ERROR)

    def test_no_ansi_when_colors_disabled(self, plain_logger, capsys):
        plain_logger.warn(LogCategory.HARDWARE, "OLA missing")
        assert "\033[" not in capsys.readouterr().out

    def test_colors_enabled(self, capsys):
        Logger(use_colors=True).info(LogCategory.SYSTEM, "hello")
        assert "\033[" in capsys.readouterr().out

    def test_exc_info_prints_traceback(self, plain_logger, capsys):
        try:
            raise RuntimeError("olad died")
        except RuntimeError:
            plain_logger.error(LogCategory.SYSTEM, "Fatal error", exc_info=True)

        out = capsys.readouterr().out
        assert "Traceback" in out
        assert "RuntimeError: olad died" in out


class TestBoundLogger:

    def test_bound_category(self, plain_logger, capsys):
        log = plain_logger.for_category(LogCategory.ANIMATION)
        log.debug("Pixel ignited", age=1)
        out = capsys.readouterr().out
        assert "ANIMATION" in out
        assert "age: 1" in out

    def test_with_category(self, plain_logger, capsys):
        log = plain_logger.for_category(LogCategory.ANIMATION).with_category(LogCategory.SHUTDOWN)
        log.info("Blackout sent")
        assert "SHUTDOWN" in capsys.readouterr().out


class TestGlobalLogger:

    def test_configure_modifies_singleton(self, capsys):
        logger = get_logger()
        bound = get_category_logger(LogCategory.ZONE)
        previous = (logger.min_level, logger.use_colors)
        try:
            configure_logger(LogLevel.ERROR, use_colors=False)
            assert get_logger() is logger
            bound.info("not shown")
            bound.error("shown")
            out = capsys.readouterr().out
            assert "not shown" not in out
            assert "shown" in out
        finally:
            configure_logger(*previous)
