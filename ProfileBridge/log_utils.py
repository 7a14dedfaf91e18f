from __future__ import annotations

import logging
import os
import sys
from typing import Optional


# Custom log levels for workflow visibility
STEP_LEVEL = 25  # Between INFO (20) and WARNING (30)
SUCCESS_LEVEL = 22  # Between INFO (20) and STEP (25)

logging.addLevelName(STEP_LEVEL, "STEP")
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


class LogSource:
    """
    Constants for data sources to ensure consistent naming and coloring.
    """
    ORCID = "ORCID"


class LogCategory:
    """
    Constants for log categories used as semantic tags on each message.
    """
    PROFILE = "PROFILE"
    WORK = "WORK"
    FUNDING = "FUNDING"
    FETCH = "FETCH"
    SAVE = "SAVE"
    ERROR = "ERROR"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI color codes for level, source, and category so
    terminal output is easy to scan.
    """

    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD_CYAN = "\033[1;36m"
    BOLD_GREEN = "\033[1;32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BOLD_RED = "\033[1;31m"
    GREEN = "\033[32m"
    BOLD_MAGENTA = "\033[1;35m"
    BOLD_BLUE = "\033[1;34m"
    LIGHT_CYAN = "\033[96m"
    RESET = "\033[0m"

    LEVEL_COLORS = {
        "DEBUG": CYAN,
        "INFO": WHITE,
        "STEP": BOLD_CYAN,
        "SUCCESS": BOLD_GREEN,
        "WARNING": YELLOW,
        "ERROR": RED,
        "CRITICAL": BOLD_RED,
    }

    SOURCE_COLORS = {
        LogSource.ORCID: GREEN,
    }

    CATEGORY_COLORS = {
        LogCategory.PROFILE: BOLD_MAGENTA,
        LogCategory.WORK: BOLD_BLUE,
        LogCategory.FUNDING: LIGHT_CYAN,
        LogCategory.FETCH: CYAN,
        LogCategory.SAVE: GREEN,
        LogCategory.ERROR: RED,
    }

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """
        Prefix the message with its source and category tags, colored when the
        formatter is attached to a terminal.
        """
        original_msg = record.msg
        original_levelname = record.levelname

        source = getattr(record, "source", None)
        category = getattr(record, "category", None)

        parts = []
        if source:
            color = self.SOURCE_COLORS.get(source) if self.use_color else None
            parts.append(f"{color}[{source}]{self.RESET}" if color else f"[{source}]")
        if category:
            color = self.CATEGORY_COLORS.get(category) if self.use_color else None
            parts.append(f"{color}[{category}]{self.RESET}" if color else f"[{category}]")

        if self.use_color and record.levelname in self.LEVEL_COLORS:
            record.levelname = f"{self.LEVEL_COLORS[record.levelname]}{record.levelname}{self.RESET}"
        if parts:
            record.msg = f"{' '.join(parts)} {record.msg}"

        formatted = super().format(record)

        record.msg = original_msg
        record.levelname = original_levelname
        return formatted


class CategoryAdapter(logging.LoggerAdapter):
    """
    Adapter that moves the source and category keyword arguments into the
    record's extra dict.
    """

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})

        source = kwargs.pop("source", None)
        if source:
            extra["source"] = source

        category = kwargs.pop("category", None)
        if category:
            extra["category"] = category

        kwargs["extra"] = extra
        return msg, kwargs


class Logger:
    """
    Project logger built on the standard logging module with colored console
    output, custom levels (STEP, SUCCESS), source/category tags, and optional
    mirroring into a log file.
    """

    LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self, name: str = "ProfileBridge"):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        self._logger.handlers.clear()

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        console_formatter = ColoredFormatter(self.LOG_FORMAT, use_color=sys.stdout.isatty())
        console_formatter.datefmt = self.DATE_FORMAT
        self._console_handler.setFormatter(console_formatter)
        self._logger.addHandler(self._console_handler)

        self._file_handler: Optional[logging.FileHandler] = None
        self._log_file_path: Optional[str] = None

        self._adapter = CategoryAdapter(self._logger, {})

    def set_log_file(self, path: str):
        """
        Start mirroring all log messages (DEBUG and up) to the given file,
        replacing any file set earlier.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        self.close()
        handler = logging.FileHandler(path, mode="w", encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(ColoredFormatter(self.LOG_FORMAT, use_color=False))
        handler.formatter.datefmt = self.DATE_FORMAT
        self._logger.addHandler(handler)
        self._file_handler = handler
        self._log_file_path = path

    def close(self):
        """
        Stop logging to file.
        """
        if self._file_handler is not None:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None
            self._log_file_path = None

    def step(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        """
        Log a top-level workflow step.
        """
        self._adapter.log(STEP_LEVEL, msg, source=source, category=category)

    def debug(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        self._adapter.debug(msg, source=source, category=category)

    def info(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        self._adapter.info(msg, source=source, category=category)

    def error(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        self._adapter.error(msg, source=source, category=category)

    def success(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        """
        Log a completed operation.
        """
        self._adapter.log(SUCCESS_LEVEL, msg, source=source, category=category)

    @property
    def log_file_path(self) -> Optional[str]:
        return self._log_file_path


# Global logger instance
logger = Logger()
