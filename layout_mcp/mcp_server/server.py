"""Stdio server loop.

Strictly sequential: the next frame is not read until the reply to the
current one has been written.
"""

from __future__ import annotations

import sys
from typing import IO, BinaryIO, Optional

from layout_mcp.config import ServerConfig
from layout_mcp.logger import Logger
from layout_mcp.mcp_server.components import initialize_components
from layout_mcp.mcp_server.dispatcher import RequestDispatcher
from layout_mcp.transport import LineFramer, ResponseWriter, open_stdin_reader


async def serve(
    framer: LineFramer,
    writer: ResponseWriter,
    dispatcher: RequestDispatcher,
    logger: Logger,
) -> int:
    """Answer frames until end of input; returns the number of frames read."""
    frames = 0
    while True:
        frame = await framer.read_frame()
        if frame is None:
            logger.info("End of input", frames=frames, responses=writer.messages_written)
            return frames
        frames += 1

        if frame.error is not None:
            reply = dispatcher.fault_reply(frame.error)
        else:
            reply = await dispatcher.handle(frame.payload)

        if reply is not None:
            writer.write(reply.to_message())


async def main(
    config: ServerConfig,
    logger: Logger,
    stdin: Optional[IO] = None,
    stdout: Optional[BinaryIO] = None,
) -> None:
    """Build the components and serve stdin until it closes.

    Raises:
            RegistryError: if the tool registry cannot be built
            BrokenPipeError: if the output stream is closed by the peer
    """
    components = initialize_components(config=config, logger=logger)

    reader = await open_stdin_reader(stdin or sys.stdin, logger=logger)
    framer = LineFramer(
        reader,
        max_frame_bytes=config.max_frame_bytes,
        idle_timeout=config.idle_timeout,
        logger=logger,
    )
    writer = ResponseWriter(stdout or sys.stdout.buffer)

    logger.info(
        "Starting MCP server",
        transport="stdio",
        tools=len(components.registry),
        bridge=components.bridge.name,
    )
    await serve(framer, writer, components.dispatcher, logger)
