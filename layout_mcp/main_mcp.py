import argparse
import asyncio
import os
import sys
from typing import List, Optional

from layout_mcp.config import BRIDGE_CHOICES, LOG_LEVELS, load_config
from layout_mcp.exceptions import LayoutMcpError
from layout_mcp.logger import ConsoleLogger, Logger, server_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="layout-mcp - Page-layout automation via Model Context Protocol over stdio"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log verbosity (default: INFO, or LAYOUT_MCP_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--bridge",
        choices=BRIDGE_CHOICES,
        default=None,
        help="Host automation bridge (default: auto, or LAYOUT_MCP_BRIDGE env var)",
    )
    parser.add_argument(
        "--host-app",
        type=str,
        default=None,
        help="Scripted application name (default: Adobe InDesign 2025, or LAYOUT_MCP_HOST_APP env var)",
    )
    parser.add_argument(
        "--idle-timeout",
        type=float,
        default=None,
        help="Seconds a partially received frame may wait before it is rejected "
        "(default: unbounded, or LAYOUT_MCP_IDLE_TIMEOUT env var)",
    )
    return parser


def _silence_stdout() -> None:
    # the interpreter flushes stdout again at exit
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    startup_logger: Logger = server_logger

    try:
        config = load_config().with_overrides(
            log_level=args.log_level,
            bridge=args.bridge,
            host_app=args.host_app,
            idle_timeout=args.idle_timeout,
        )
    except LayoutMcpError as e:
        startup_logger.error("FATAL: Invalid configuration", error=str(e))
        sys.exit(1)

    logger = ConsoleLogger(level=config.logging_level)

    from layout_mcp.mcp_server import main as serve_stdio

    try:
        asyncio.run(serve_stdio(config, logger))
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        sys.exit(0)
    except BrokenPipeError:
        logger.info("Output stream closed; shutting down")
        _silence_stdout()
        sys.exit(0)
    except LayoutMcpError as e:
        logger.error("Failed to start server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)
    except Exception as e:
        logger.error("Server terminated unexpectedly", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
