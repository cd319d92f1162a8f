"""Logger backed by the standard library logging module."""

import logging
from typing import Any, Dict

from .base import Logger


def _format_fields(fields: Dict[str, Any]) -> str:
    return " ".join(f"{key}={value!r}" for key, value in fields.items())


class DefaultLogger(Logger):
    """Forwards structured calls to a named ``logging.Logger``.

    Keyword fields are rendered after the message as ``key=value`` pairs.
    Handler configuration is left to the application.
    """

    def __init__(self, name: str = "layout_mcp", level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    def _log(self, level: int, message: str, fields: Dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if fields:
            message = f"{message} {_format_fields(fields)}"
        self._logger.log(level, message)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)
