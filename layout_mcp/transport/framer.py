"""Newline-delimited JSON framing over an asyncio stream.

Each frame is one line of UTF-8 JSON terminated by ``\\n`` (a trailing
``\\r`` is stripped). Faults are returned to the caller as FramingError
values so they can be answered with a parse error instead of being
dropped.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Optional

from layout_mcp.exceptions import FramingError
from layout_mcp.logger import Logger

DEFAULT_CHUNK_SIZE = 64 * 1024


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not a valid JSON value")


@dataclass(frozen=True)
class Frame:
    """One framing cycle: a decoded JSON value or the fault that replaced it."""

    payload: Any = None
    error: Optional[FramingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LineFramer:
    """Reads one JSON value per line from ``reader``.

    ``read_frame`` returns None once the stream is exhausted. Idle time
    with an empty buffer is never a fault; ``idle_timeout`` only bounds how
    long a partially received line may wait for the rest of its bytes.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader,
        *,
        max_frame_bytes: int,
        idle_timeout: Optional[float] = None,
        logger: Optional[Logger] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.reader = reader
        self.max_frame_bytes = max_frame_bytes
        self.idle_timeout = idle_timeout
        self.logger = logger
        self.chunk_size = chunk_size
        self._buffer = bytearray()
        self._discarding = False
        self._eof = False

    async def read_frame(self) -> Optional[Frame]:
        while True:
            newline = self._buffer.find(b"\n")
            if newline >= 0:
                line = bytes(self._buffer[:newline])
                del self._buffer[: newline + 1]
                if self._discarding:
                    # tail of a line already reported as a fault
                    self._discarding = False
                    continue
                if len(line) > self.max_frame_bytes:
                    return self._fault(self._oversize_message())
                line = line.rstrip(b"\r")
                if not line.strip():
                    continue
                return self._decode(line)

            if self._discarding:
                self._buffer.clear()
            elif len(self._buffer) > self.max_frame_bytes:
                self._buffer.clear()
                self._discarding = True
                return self._fault(self._oversize_message())

            if self._eof:
                return self._drain()

            chunk = await self._read_chunk()
            if chunk is None:
                self._buffer.clear()
                self._discarding = True
                return self._fault(
                    f"Parse error: incomplete frame received within {self.idle_timeout} seconds"
                )
            if not chunk:
                self._eof = True
            else:
                self._buffer.extend(chunk)

    async def _read_chunk(self) -> Optional[bytes]:
        """Next chunk, ``b""`` at end of stream, None when a partial frame timed out."""
        partial = bool(self._buffer) and not self._discarding
        if not partial or self.idle_timeout is None:
            return await self.reader.read(self.chunk_size)
        try:
            return await asyncio.wait_for(self.reader.read(self.chunk_size), self.idle_timeout)
        except asyncio.TimeoutError:
            return None

    def _drain(self) -> Optional[Frame]:
        """Handle bytes left without a terminating newline at end of stream."""
        remainder = bytes(self._buffer).rstrip(b"\r")
        self._buffer.clear()
        if self._discarding or not remainder.strip():
            self._discarding = False
            return None
        frame = self._decode(remainder)
        if frame.ok:
            return frame
        return self._fault("Parse error: trailing data at end of input is not valid JSON")

    def _decode(self, line: bytes) -> Frame:
        try:
            text = line.decode("utf-8")
        except UnicodeDecodeError:
            return self._fault("Parse error: frame is not valid UTF-8")
        try:
            return Frame(payload=json.loads(text, parse_constant=_reject_constant))
        except json.JSONDecodeError as exc:
            return self._fault(f"Parse error: {exc.msg}")
        except ValueError as exc:
            return self._fault(f"Parse error: {exc}")
        except RecursionError:
            return self._fault("Parse error: frame is nested too deeply")

    def _oversize_message(self) -> str:
        return f"Parse error: frame exceeds maximum size of {self.max_frame_bytes} bytes"

    def _fault(self, message: str) -> Frame:
        if self.logger:
            self.logger.warning("Framing fault", error=message)
        return Frame(error=FramingError(message))
