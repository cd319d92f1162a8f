"""Logger that writes to standard error."""

import logging
import sys
from typing import Optional, TextIO

from .default_logger import DefaultLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger with its own stderr handler attached.

    The handler is attached once per logger name, so creating several
    ConsoleLogger instances does not duplicate output.
    """

    def __init__(
        self,
        name: str = "layout_mcp",
        level: int = logging.INFO,
        stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(name=name, level=level)
        if not any(getattr(h, "_layout_mcp_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._layout_mcp_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
        self._logger.propagate = False
