"""Chunk shape classification."""

from collections.abc import Mapping
from typing import Any

from ..models import ChunkKind, ClassifiedChunk

_BINARY_TYPES = (bytes, bytearray, memoryview)
_MISSING = object()


def decode_binary(chunk: bytes | bytearray | memoryview) -> str:
    """Best-effort UTF-8 decode; invalid sequences become U+FFFD."""
    return bytes(chunk).decode("utf-8", errors="replace")


def _read_field(chunk: Any, name: str) -> Any:
    try:
        if isinstance(chunk, Mapping):
            return chunk.get(name, _MISSING)
        return getattr(chunk, name, _MISSING)
    except Exception:
        # A property or __getitem__ that raises counts as absent
        return _MISSING


def classify_chunk(chunk: Any) -> ClassifiedChunk:
    """Resolve a chunk's shape. Never raises for any input."""
    if isinstance(chunk, str):
        return ClassifiedChunk(kind=ChunkKind.STRING, content=chunk)

    if isinstance(chunk, _BINARY_TYPES):
        return ClassifiedChunk(kind=ChunkKind.UINT8ARRAY, content=decode_binary(chunk))

    if chunk is None:
        return ClassifiedChunk(kind=ChunkKind.NULL, content=None)

    # bool is a subclass of int
    if isinstance(chunk, bool):
        return ClassifiedChunk(kind=ChunkKind.BOOLEAN, content=chunk)

    if isinstance(chunk, (int, float, complex)):
        return ClassifiedChunk(kind=ChunkKind.NUMBER, content=chunk)

    event = _read_field(chunk, "event")
    data = _read_field(chunk, "data")
    return ClassifiedChunk(
        kind=ChunkKind.OBJECT,
        content=chunk,
        event=None if event is _MISSING else event,
        data=None if data is _MISSING else data,
        has_event=event is not _MISSING,
        has_data=data is not _MISSING,
    )
