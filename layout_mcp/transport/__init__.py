"""Stdio transport: line framing and response writing."""
from layout_mcp.transport.framer import Frame, LineFramer
from layout_mcp.transport.stdio import open_stdin_reader
from layout_mcp.transport.writer import ResponseWriter, encode_message

__all__ = ["Frame", "LineFramer", "ResponseWriter", "encode_message", "open_stdin_reader"]
