"""Tracing and observability data models."""

from dataclasses import dataclass, field
from typing import Any

from .chunks import ChunkKind, StreamType

_UNSET: Any = object()


@dataclass
class TraceRecord:
    """One record per chunk seen by a StreamTap."""

    chunk_number: int  # 1-based, per tap
    stream_type: StreamType
    chunk_type: ChunkKind
    chunk_content: Any
    msg: str
    event: Any = field(default=_UNSET)
    data: Any = field(default=_UNSET)

    def to_dict(self) -> dict:
        """Render the mapping handed to a trace sink."""
        record = {
            "chunk_number": self.chunk_number,
            "stream_type": self.stream_type.value,
            "chunk_type": self.chunk_type.value,
        }
        if self.event is not _UNSET:
            record["event"] = self.event
        if self.data is not _UNSET:
            record["data"] = self.data
        record["chunk_content"] = self.chunk_content
        record["msg"] = self.msg
        return record


@dataclass
class SummaryRecord:
    """Emitted once when a tapped stream ends."""

    total_chunks: int
    stream_type: StreamType
    msg: str

    def to_dict(self) -> dict:
        """Render the mapping handed to a trace sink."""
        return {
            "total_chunks": self.total_chunks,
            "stream_type": self.stream_type.value,
            "msg": self.msg,
        }
