from __future__ import annotations

import logging
import sys
from typing import IO, Any, Protocol

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class Logger(Protocol):
    """
    Leveled logging capability accepted by the document store.

    Messages use %-style arguments, the same as the standard logging module.
    """

    def fatal(self, message: str, *args: Any) -> None: ...
    def error(self, message: str, *args: Any) -> None: ...
    def info(self, message: str, *args: Any) -> None: ...
    def debug(self, message: str, *args: Any) -> None: ...
    def warn(self, message: str, *args: Any) -> None: ...
    def trace(self, message: str, *args: Any) -> None: ...


def parse_level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name == "FATAL":
        return logging.CRITICAL
    if name == "WARN":
        return logging.WARNING
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value!r}")
    return level


class ConsoleLogger(Logger):
    """
    Default Logger: writes to a console stream (stderr unless given) at or above a minimum level.

    Uses its own logging.Logger instance rather than a named one from the
    logging registry, so several stores never stack handlers on each other.
    fatal() logs at CRITICAL and returns; it never exits the process.
    """

    def __init__(self, level: str | int = logging.INFO, *, stream: IO[str] | None = None, name: str = "docstore"):
        self._logger = logging.Logger(name, parse_level(level))
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        self._logger.addHandler(handler)

    @property
    def level(self) -> int:
        return self._logger.level

    def fatal(self, message: str, *args: Any) -> None:
        self._logger.critical(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def trace(self, message: str, *args: Any) -> None:
        self._logger.log(TRACE, message, *args)
