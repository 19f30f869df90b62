"""Tests for chunk classification."""

from dataclasses import dataclass

import pytest

from stream_tap.models import ChunkKind
from stream_tap.tap import classify_chunk, decode_binary


@dataclass
class ServerSentEvent:
    event: str
    data: str


class TestClassifyText:
    """Tests for textual chunks."""

    def test_string(self):
        """Test that a str is kept as-is."""
        result = classify_chunk("hello")
        assert result.kind == ChunkKind.STRING
        assert result.content == "hello"
        assert not result.has_event
        assert not result.has_data

    def test_empty_string(self):
        """Test that an empty str is still a string chunk."""
        assert classify_chunk("").kind == ChunkKind.STRING


class TestClassifyBinary:
    """Tests for byte buffer chunks."""

    @pytest.mark.parametrize(
        "chunk", [b"hi", bytearray(b"hi"), memoryview(b"hi")]
    )
    def test_binary_decoded(self, chunk):
        """Test that byte buffers are decoded as UTF-8."""
        result = classify_chunk(chunk)
        assert result.kind == ChunkKind.UINT8ARRAY
        assert result.kind.value == "Uint8Array"
        assert result.content == "hi"

    def test_multibyte_utf8(self):
        """Test decoding of multi-byte characters."""
        result = classify_chunk("héllo ✓".encode("utf-8"))
        assert result.content == "héllo ✓"

    def test_invalid_utf8_replaced(self):
        """Test that invalid sequences become replacement characters."""
        result = classify_chunk(b"ok\xff\xfe")
        assert result.kind == ChunkKind.UINT8ARRAY
        assert result.content.startswith("ok")
        assert "�" in result.content

    def test_decode_binary_does_not_raise(self):
        """Test decode_binary on a truncated multi-byte sequence."""
        assert decode_binary("✓".encode("utf-8")[:2]) == "�"


class TestClassifyObject:
    """Tests for structured-event chunks."""

    def test_mapping_with_event_and_data(self):
        """Test that event/data are read from mapping keys."""
        chunk = {"event": "delta", "data": {"text": "x"}}
        result = classify_chunk(chunk)
        assert result.kind == ChunkKind.OBJECT
        assert result.event == "delta"
        assert result.data == {"text": "x"}
        assert result.has_event
        assert result.has_data
        assert result.content is chunk

    def test_object_attributes(self):
        """Test that event/data are read from attributes."""
        chunk = ServerSentEvent(event="start", data="{}")
        result = classify_chunk(chunk)
        assert result.kind == ChunkKind.OBJECT
        assert result.event == "start"
        assert result.data == "{}"

    def test_mapping_without_fields(self):
        """Test that missing fields are absent, not errors."""
        result = classify_chunk({"other": 1})
        assert result.kind == ChunkKind.OBJECT
        assert not result.has_event
        assert not result.has_data
        assert result.event is None

    def test_list_is_object(self):
        """Test that other containers are object chunks."""
        result = classify_chunk([1, 2])
        assert result.kind == ChunkKind.OBJECT
        assert not result.has_event

    def test_raising_property_counts_as_absent(self):
        """Test that a property raising on access does not break classification."""

        class Broken:
            @property
            def event(self):
                raise ValueError("boom")

        result = classify_chunk(Broken())
        assert result.kind == ChunkKind.OBJECT
        assert not result.has_event


class TestClassifyPrimitive:
    """Tests for primitive chunks."""

    @pytest.mark.parametrize(
        "chunk,kind",
        [
            (42, ChunkKind.NUMBER),
            (3.5, ChunkKind.NUMBER),
            (1j, ChunkKind.NUMBER),
            (True, ChunkKind.BOOLEAN),
            (False, ChunkKind.BOOLEAN),
            (None, ChunkKind.NULL),
        ],
    )
    def test_primitive_kind(self, chunk, kind):
        """Test primitive type names."""
        result = classify_chunk(chunk)
        assert result.kind == kind
        assert result.content is chunk

    def test_number_label(self):
        """Test that 42 is labelled "number"."""
        assert classify_chunk(42).kind.value == "number"
