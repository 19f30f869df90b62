"""Stream Tap: trace every chunk of a stream without touching it."""

from .models import (
    ChunkKind,
    ClassifiedChunk,
    StreamType,
    SummaryRecord,
    TraceRecord,
)
from .sinks import ITraceSink, LoggerSink, MemorySink
from .tap import StreamTap, classify_chunk
from .transport import (
    IStreamController,
    ITransformer,
    StreamController,
    TransformStream,
    iter_through,
    pipe_through,
)

__all__ = [
    # Models
    "StreamType",
    "ChunkKind",
    "ClassifiedChunk",
    "TraceRecord",
    "SummaryRecord",
    # Components
    "StreamTap",
    "classify_chunk",
    "ITraceSink",
    "LoggerSink",
    "MemorySink",
    "IStreamController",
    "ITransformer",
    "StreamController",
    "TransformStream",
    "pipe_through",
    "iter_through",
]
