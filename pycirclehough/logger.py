"""
Logger wrapper shared by the pycirclehough modules.
"""
import os
import sys
import time
from typing import Optional
from enum import Enum, auto


class LogLevel(Enum):
    """Log levels for controlling verbosity."""
    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()


class HoughLogger:
    """
    Logger that writes accumulator diagnostics to the console, a file, or both.
    """
    def __init__(
        self,
        mode: str = 'console',
        log_file: Optional[str] = None,
        console_level: LogLevel = LogLevel.INFO,
        file_level: LogLevel = LogLevel.DEBUG,
        include_timestamp: bool = True,
        name: str = 'pycirclehough'
    ):
        """
        Initialize the logger.

        Args:
            mode: 'console', 'file', or 'both'
            log_file: Path to log file (required if mode is 'file' or 'both')
            console_level: Minimum log level for console output
            file_level: Minimum log level for file output
            include_timestamp: Whether to prefix messages with a timestamp
            name: Tag written in front of every message
        """
        if mode not in ('console', 'file', 'both'):
            raise ValueError("mode must be 'console', 'file', or 'both'")
        if mode != 'console' and not log_file:
            raise ValueError("log_file must be provided when mode is 'file' or 'both'")

        self.mode = mode
        self.log_file = log_file
        self.console_level = console_level
        self.file_level = file_level
        self.include_timestamp = include_timestamp
        self.name = name

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            # start every session with an empty file
            open(self.log_file, 'w').close()

    @property
    def _to_console(self) -> bool:
        return self.mode in ('console', 'both')

    @property
    def _to_file(self) -> bool:
        return self.mode in ('file', 'both')

    def isEnabledFor(self, level: LogLevel) -> bool:
        """
        Return True if a message at ``level`` would reach any output.
        Mirrors ``logging.Logger.isEnabledFor`` so callers can skip
        building expensive debug messages.
        """
        if self._to_console and level.value >= self.console_level.value:
            return True
        return self._to_file and level.value >= self.file_level.value

    def _format_message(self, message: str, level: LogLevel) -> str:
        parts = []
        if self.include_timestamp:
            parts.append(f"[{time.strftime('%Y-%m-%d %H:%M:%S')}]")
        parts.append(f"[{self.name}]")
        parts.append(f"[{level.name}]")
        return " ".join(parts) + " " + message

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        """
        Log a message with the specified level.

        Args:
            message: The message to log
            level: The log level (default: INFO)
        """
        if not self.isEnabledFor(level):
            return
        formatted = self._format_message(message, level)
        if self._to_console and level.value >= self.console_level.value:
            stream = sys.stderr if level.value >= LogLevel.WARNING.value else sys.stdout
            print(formatted, file=stream)
        if self._to_file and level.value >= self.file_level.value:
            with open(self.log_file, 'a') as f:
                f.write(formatted + '\n')

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)

    __call__ = log


DEFAULT_LOGGER = HoughLogger(mode='console')


def get_logger(name: Optional[str] = None) -> HoughLogger:
    """
    Return the package logger. ``name`` is accepted for compatibility with
    the standard logging module and ignored.
    """
    return DEFAULT_LOGGER


def set_logger(logger: Optional[HoughLogger]) -> None:
    """
    Replace the package logger.

    Args:
        logger: A HoughLogger instance, or None to restore a console logger
    """
    global DEFAULT_LOGGER
    if logger is None:
        DEFAULT_LOGGER = HoughLogger(mode='console')
    elif not isinstance(logger, HoughLogger):
        raise ValueError("Logger must be an instance of HoughLogger")
    else:
        DEFAULT_LOGGER = logger
