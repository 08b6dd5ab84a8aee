# simplecraft/utils/logger.py
import datetime
import sys
from typing import Optional, TextIO, Union

from simplecraft.config import LOG_LEVEL

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4 # Only fatal errors

    @classmethod
    def from_name(cls, name: str) -> int:
        """Resolve 'debug', 'WARN', etc. Unknown names fall back to WARNING."""
        key = (name or "").strip().upper()
        aliases = {"WARN": "WARNING", "CRIT": "CRITICAL"}
        key = aliases.get(key, key)
        if key in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return getattr(cls, key)
        return cls.WARNING

_LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT"
}

class Logger:
    _instance = None
    _level = LogLevel.from_name(LOG_LEVEL)
    _stream: Optional[TextIO] = None  # None means sys.stderr at write time

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level: Union[int, str]):
        """Sets the minimum logging level (a LogLevel value or its name)."""
        cls._level = LogLevel.from_name(level) if isinstance(level, str) else level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_stream(cls, stream: Optional[TextIO]):
        """Redirect log output. Pass None to go back to stderr."""
        cls._stream = stream

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if level < cls._level:
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = _LEVEL_NAMES.get(level, "LOG")
        stream = cls._stream or sys.stderr
        # Format: [TIME] [LEVEL] [Source] Message
        print(f"[{timestamp}] [{level_name:<5}] [{source}] {message}", file=stream)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
