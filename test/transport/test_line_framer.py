"""Tests for newline-delimited JSON framing."""

import asyncio

import pytest

from layout_mcp.exceptions import FramingError
from layout_mcp.transport import LineFramer


def _framer(data: bytes = b"", *, eof: bool = True, **kwargs) -> LineFramer:
    reader = asyncio.StreamReader()
    if data:
        reader.feed_data(data)
    if eof:
        reader.feed_eof()
    kwargs.setdefault("max_frame_bytes", 1024)
    return LineFramer(reader, **kwargs)


async def _read_all(framer: LineFramer):
    frames = []
    while True:
        frame = await framer.read_frame()
        if frame is None:
            return frames
        frames.append(frame)


class TestFraming:
    @pytest.mark.asyncio
    async def test_one_frame_per_line(self):
        framer = _framer(b'{"id":1}\n{"id":2}\r\n[3]\n')

        frames = await _read_all(framer)

        assert [frame.payload for frame in frames] == [{"id": 1}, {"id": 2}, [3]]
        assert all(frame.ok for frame in frames)

    @pytest.mark.asyncio
    async def test_blank_lines_are_skipped(self):
        framer = _framer(b'\n   \r\n{"id":1}\n\n')

        frames = await _read_all(framer)

        assert [frame.payload for frame in frames] == [{"id": 1}]

    @pytest.mark.asyncio
    async def test_frame_split_across_chunks(self):
        reader = asyncio.StreamReader()
        framer = LineFramer(reader, max_frame_bytes=1024, chunk_size=4)
        reader.feed_data(b'{"method":"ping",')
        reader.feed_data(b'"id":5}\n')
        reader.feed_eof()

        frame = await framer.read_frame()

        assert frame.payload == {"method": "ping", "id": 5}
        assert await framer.read_frame() is None

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        assert await _framer(b"").read_frame() is None


class TestFramingFaults:
    @pytest.mark.asyncio
    async def test_invalid_json_is_reported_and_reading_continues(self):
        framer = _framer(b'{"id":1,,}\n{"id":2}\n')

        frames = await _read_all(framer)

        assert len(frames) == 2
        assert isinstance(frames[0].error, FramingError)
        assert frames[0].error.message.startswith("Parse error")
        assert frames[1].payload == {"id": 2}

    @pytest.mark.asyncio
    async def test_invalid_utf8(self):
        frames = await _read_all(_framer(b'{"text":"\xff\xfe"}\n'))

        assert len(frames) == 1
        assert "UTF-8" in frames[0].error.message

    @pytest.mark.asyncio
    async def test_valid_trailing_json_without_newline(self):
        frames = await _read_all(_framer(b'{"id":1}\n{"id":2}'))

        assert [frame.payload for frame in frames] == [{"id": 1}, {"id": 2}]

    @pytest.mark.asyncio
    async def test_invalid_trailing_fragment(self):
        frames = await _read_all(_framer(b'{"id":1}\n{"id":'))

        assert frames[0].payload == {"id": 1}
        assert len(frames) == 2
        assert "trailing data" in frames[1].error.message

    @pytest.mark.asyncio
    async def test_oversized_frame_is_rejected(self):
        big = b'{"data":"' + b"x" * 100 + b'"}\n'

        frames = await _read_all(_framer(big + b'{"ok":true}\n', max_frame_bytes=32))

        assert len(frames) == 2
        assert "maximum size" in frames[0].error.message
        assert frames[1].payload == {"ok": True}

    @pytest.mark.asyncio
    async def test_oversized_frame_arriving_in_pieces(self):
        reader = asyncio.StreamReader()
        framer = LineFramer(reader, max_frame_bytes=32, chunk_size=8)
        reader.feed_data(b'{"data":"' + b"y" * 100 + b'"}\n{"ok":1}\n')
        reader.feed_eof()

        frames = await _read_all(framer)

        assert len(frames) == 2
        assert not frames[0].ok
        assert frames[1].payload == {"ok": 1}

    @pytest.mark.asyncio
    async def test_partial_frame_times_out(self):
        reader = asyncio.StreamReader()
        framer = LineFramer(reader, max_frame_bytes=1024, idle_timeout=0.05)
        reader.feed_data(b'{"id":1,')

        frame = await framer.read_frame()

        assert not frame.ok
        assert "incomplete frame" in frame.error.message

        reader.feed_data(b'"late":true}\n{"id":2}\n')
        reader.feed_eof()
        assert (await framer.read_frame()).payload == {"id": 2}
        assert await framer.read_frame() is None

    @pytest.mark.asyncio
    async def test_idle_with_empty_buffer_is_not_a_fault(self):
        reader = asyncio.StreamReader()
        framer = LineFramer(reader, max_frame_bytes=1024, idle_timeout=0.01)
        loop = asyncio.get_running_loop()
        loop.call_later(0.1, reader.feed_data, b'{"id":3}\n')

        frame = await framer.read_frame()

        assert frame.payload == {"id": 3}


class TestStrictJson:
    @pytest.mark.asyncio
    async def test_deeply_nested_frame_is_a_parse_error(self):
        framer = _framer(b"[" * 200000 + b"\n" + b'{"id":9}\n', max_frame_bytes=1024 * 1024)

        frames = await _read_all(framer)

        assert len(frames) == 2
        assert frames[0].error.message.startswith("Parse error")
        assert frames[1].payload == {"id": 9}

    @pytest.mark.parametrize("token", [b"NaN", b"Infinity", b"-Infinity"])
    @pytest.mark.asyncio
    async def test_non_standard_constants_are_rejected(self, token):
        frames = await _read_all(_framer(b'{"id":' + token + b',"method":"ping"}\n'))

        assert len(frames) == 1
        assert not frames[0].ok
        assert "is not a valid JSON value" in frames[0].error.message
