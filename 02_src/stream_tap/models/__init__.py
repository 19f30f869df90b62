"""Core data models for Stream Tap."""

from .chunks import ChunkKind, ClassifiedChunk, StreamType
from .tracing import SummaryRecord, TraceRecord

__all__ = [
    # Chunks
    "StreamType",
    "ChunkKind",
    "ClassifiedChunk",
    # Tracing
    "TraceRecord",
    "SummaryRecord",
]
