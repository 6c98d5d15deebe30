import logging
import os
import sys
from datetime import datetime
from logging import Logger
from colorama import init, Fore, Style
init(autoreset=True)

LOG_FILE_PREFIX = "perf_timeline_"
LEVEL_ENV_VAR = "PERF_TIMELINE_LOG_LEVEL"
FILE_ENV_VAR = "PERF_TIMELINE_LOG_FILE"

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_level(level: str | int, default: int = logging.INFO) -> int:
    """Map a level name ("debug", "INFO", ...) or number to a logging level."""
    if isinstance(level, int):
        return level
    return LEVEL_MAP.get(str(level).strip().upper(), default)


def create_log_directory(log_folder: str = None):
    """
    Ensures that the log directory exists. If not, it creates it.

    Args:
        log_folder: Optional path to log folder. If None, uses platform-specific location.
    """
    if log_folder is None:
        from perf_timeline.utils.paths import get_logs_dir
        log_folder = str(get_logs_dir())

    if not os.path.exists(log_folder):
        os.makedirs(log_folder)
    return log_folder


def get_log_file_path(log_folder: str) -> str:
    """
    Returns a log file path with a timestamp in the name.
    Format: logs/perf_timeline_YYYY-mm-dd_HHMMSS.log
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    return os.path.join(log_folder, f"{LOG_FILE_PREFIX}{timestamp}.log")


def purge_old_logs(log_folder: str, keep: int = 10):
    """
    Removes older log files, keeping only the most recent 'keep' files.
    Timestamped names sort lexicographically in chronological order.
    """
    all_logs = [f for f in os.listdir(log_folder)
                if f.startswith(LOG_FILE_PREFIX) and f.endswith(".log")]
    all_logs.sort()

    for old_file in all_logs[:-keep] if keep > 0 else all_logs:
        os.remove(os.path.join(log_folder, old_file))


class ColorFormatter(logging.Formatter):
    """
    A formatter that colorizes log level names using colorama.
    """
    color_map = {
        logging.DEBUG: Fore.BLUE,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.LIGHTRED_EX,
    }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        # Copy so file handlers sharing the record keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def init_logger(
    name: str = "perf_timeline",
    log_folder: str = None,
    console_logging: bool = True,
    file_logging: bool = False,
    level: int = logging.INFO
) -> Logger:
    """
    Initializes and configures the logger with the specified settings.
    :param name: The logger's name.
    :param log_folder: The folder where log files should go. If None, uses platform-specific location.
    :param console_logging: Whether to log to the console.
    :param file_logging: Whether to log to a file.
    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :return: A configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Calling init_logger twice must not duplicate handlers
    if not logger.handlers:
        if file_logging:
            log_folder = create_log_directory(log_folder)
            purge_old_logs(log_folder, keep=10)
            file_handler = logging.FileHandler(get_log_file_path(log_folder), encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        if console_logging:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(ColorFormatter(
                fmt="%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%H:%M:%S"
            ))
            logger.addHandler(console_handler)

    return logger


class Log:
    """
    Class-level logging facade (Log.info(...)) backed by Python's logging.

    Level and file logging are taken from PERF_TIMELINE_LOG_LEVEL and
    PERF_TIMELINE_LOG_FILE at import time; TimelineSettingsManager may
    change the level later via set_level().
    """
    _logger: Logger = init_logger(
        name="perf_timeline",
        console_logging=True,
        file_logging=os.getenv(FILE_ENV_VAR, "0").lower() in ("1", "true", "yes"),
        level=parse_level(os.getenv(LEVEL_ENV_VAR, "INFO")),
    )

    @classmethod
    def set_logger(cls, logger: Logger):
        """Replace the backing logger at runtime."""
        cls._logger = logger

    @classmethod
    def get_logger(cls) -> Logger:
        return cls._logger

    @classmethod
    def set_level(cls, level: str | int):
        """
        Set the logging level dynamically.

        Args:
            level: Log level as string ("DEBUG", "INFO", "WARNING", "ERROR") or int
        """
        level = parse_level(level)
        cls._logger.setLevel(level)
        for handler in cls._logger.handlers:
            handler.setLevel(level)

    @classmethod
    def debug(cls, text: str):
        cls._logger.debug(text)

    @classmethod
    def info(cls, text: str):
        cls._logger.info(text)

    @classmethod
    def warning(cls, text: str, exc_info: bool = False):
        cls._logger.warning(text, exc_info=exc_info)

    @classmethod
    def error(cls, text: str):
        cls._logger.error(text)

    @classmethod
    def exception(cls, text: str):
        cls._logger.exception(text)
