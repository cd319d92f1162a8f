"""Standard input as an asyncio StreamReader."""

from __future__ import annotations

import asyncio
import os
import threading
from typing import IO, Optional

from layout_mcp.logger import Logger


def _pump(fd: int, reader: asyncio.StreamReader, loop: asyncio.AbstractEventLoop) -> None:
    while True:
        try:
            chunk = os.read(fd, 64 * 1024)
        except OSError:
            chunk = b""
        if not chunk:
            loop.call_soon_threadsafe(reader.feed_eof)
            return
        loop.call_soon_threadsafe(reader.feed_data, chunk)


async def open_stdin_reader(stdin: IO, logger: Optional[Logger] = None) -> asyncio.StreamReader:
    """Attach ``stdin`` to the running loop.

    Pipes are registered with the loop directly. Inputs the loop cannot
    watch (regular files, some consoles) are read by a daemon thread that
    feeds the same StreamReader.
    """
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    protocol = asyncio.StreamReaderProtocol(reader)
    try:
        await loop.connect_read_pipe(lambda: protocol, stdin)
    except (OSError, ValueError, NotImplementedError) as exc:
        if logger:
            logger.debug("Reading stdin from a thread", reason=str(exc))
        thread = threading.Thread(
            target=_pump, args=(stdin.fileno(), reader, loop), name="stdin-reader", daemon=True
        )
        thread.start()
    return reader
