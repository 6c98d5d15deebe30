"""
Tests for the logging helpers.
"""
import logging

from perf_timeline.utils.message import (
    Log, ColorFormatter, init_logger, parse_level, purge_old_logs, LOG_FILE_PREFIX,
)


class TestParseLevel:

    def test_names_and_numbers(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level(" Warning ") == logging.WARNING
        assert parse_level(logging.ERROR) == logging.ERROR

    def test_unknown_name_uses_default(self):
        assert parse_level("chatty") == logging.INFO


class TestLogFacade:

    def test_set_level_applies_to_handlers(self):
        original = Log.get_logger().level
        try:
            Log.set_level("ERROR")
            logger = Log.get_logger()
            assert logger.level == logging.ERROR
            assert all(h.level == logging.ERROR for h in logger.handlers)
        finally:
            Log.set_level(original)

    def test_set_logger(self):
        original = Log.get_logger()
        replacement = logging.getLogger("perf_timeline.test")
        try:
            Log.set_logger(replacement)
            assert Log.get_logger() is replacement
        finally:
            Log.set_logger(original)


class TestFileLogging:

    def test_file_handler_writes(self, tmp_path):
        logger = init_logger(
            name="perf_timeline.file_test",
            log_folder=str(tmp_path),
            console_logging=False,
            file_logging=True,
            level=logging.DEBUG,
        )
        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()
        files = list(tmp_path.glob(f"{LOG_FILE_PREFIX}*.log"))
        assert len(files) == 1
        assert "hello" in files[0].read_text(encoding="utf-8")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_purge_keeps_newest(self, tmp_path):
        names = [f"{LOG_FILE_PREFIX}2024-01-0{i}_000000.log" for i in range(1, 6)]
        for name in names:
            (tmp_path / name).write_text("")
        (tmp_path / "other.txt").write_text("")
        purge_old_logs(str(tmp_path), keep=2)
        remaining = sorted(p.name for p in tmp_path.iterdir())
        assert remaining == sorted(names[-2:] + ["other.txt"])


def test_color_formatter_leaves_record_untouched():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
    text = ColorFormatter(fmt="%(levelname)s %(message)s").format(record)
    assert "WARNING" in text and "msg" in text
    assert record.levelname == "WARNING"
