"""
Logger module for layout-mcp

This module provides a small logging interface that allows callers to
drop in their own logger implementations.

Standard output carries protocol frames only, so every bundled logger
writes to standard error.

Usage:
    from layout_mcp.logger import Logger, ConsoleLogger

    logger = ConsoleLogger()
    logger.info("Tool invocation started", tool="create_document")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            ...
"""

import logging

from .base import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

# Shared logger instance for modules that just need basic stderr logging
server_logger: Logger = ConsoleLogger(level=logging.INFO)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "server_logger",
]
