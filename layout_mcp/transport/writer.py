"""Serializes response messages onto the output stream."""

import json
from typing import Any, BinaryIO, Dict


def encode_message(message: Dict[str, Any]) -> bytes:
    """Compact single-line JSON followed by a newline.

    Raises:
        ValueError: if the message holds NaN or an infinity
    """
    text = json.dumps(message, separators=(",", ":"), ensure_ascii=True, allow_nan=False)
    return text.encode("utf-8") + b"\n"


class ResponseWriter:
    """Writes one message per line and flushes after each.

    BrokenPipeError propagates so the server can shut down cleanly.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.messages_written = 0

    def write(self, message: Dict[str, Any]) -> None:
        self.stream.write(encode_message(message))
        self.stream.flush()
        self.messages_written += 1
