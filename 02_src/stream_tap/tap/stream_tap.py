"""StreamTap: logs stream chunks while passing them through unchanged."""

from typing import Any

from ..config import DEFAULT_PREFIX, DEFAULT_STREAM_TYPE
from ..models import ChunkKind, StreamType, SummaryRecord, TraceRecord
from ..sinks import ITraceSink
from ..transport import IStreamController
from .classifier import classify_chunk


class StreamTap:
    """Transparent pipeline stage that traces every chunk it forwards.

    Each chunk is numbered, classified and reported to the sink, then
    enqueued downstream as the very same object. A tap serves one stream:
    after ``flush`` it still forwards chunks but no longer traces them.
    """

    def __init__(
        self,
        sink: ITraceSink | None = None,
        stream_type: StreamType | str = DEFAULT_STREAM_TYPE,
        prefix: str = DEFAULT_PREFIX,
    ):
        # Anything without a callable trace() counts as no sink
        self._sink = sink if callable(getattr(sink, "trace", None)) else None
        self._stream_type = StreamType(stream_type)
        self._prefix = prefix or ""
        self._chunk_count = 0
        self._finished = False

    @property
    def sink(self) -> ITraceSink | None:
        return self._sink

    @property
    def stream_type(self) -> StreamType:
        return self._stream_type

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def chunk_count(self) -> int:
        """Chunks seen so far."""
        return self._chunk_count

    @property
    def finished(self) -> bool:
        return self._finished

    def transform(self, chunk: Any, controller: IStreamController) -> None:
        """Trace one chunk and forward it."""
        if self._finished:
            # Inert after the summary: forward only
            controller.enqueue(chunk)
            return

        self._chunk_count += 1
        try:
            if self._sink is not None:
                self._sink.trace(self._build_record(chunk).to_dict())
        finally:
            controller.enqueue(chunk)

    def flush(self, controller: IStreamController) -> None:
        """Emit the summary record once."""
        if self._finished:
            return
        self._finished = True

        if self._sink is not None:
            summary = SummaryRecord(
                total_chunks=self._chunk_count,
                stream_type=self._stream_type,
                msg=self._summary_message(),
            )
            self._sink.trace(summary.to_dict())

    def _build_record(self, chunk: Any) -> TraceRecord:
        classified = classify_chunk(chunk)
        record = TraceRecord(
            chunk_number=self._chunk_count,
            stream_type=self._stream_type,
            chunk_type=classified.kind,
            chunk_content=classified.content,
            msg=self._chunk_message(),
        )
        if classified.kind is ChunkKind.OBJECT:
            if classified.has_event:
                record.event = classified.event
            if classified.has_data:
                record.data = classified.data
        return record

    def _chunk_message(self) -> str:
        if self._prefix:
            return f"*JB* {self._prefix} streaming chunk #{self._chunk_count}"
        return (
            f"*JB* Fully processed streaming chunk #{self._chunk_count} "
            f"({self._stream_type.value})"
        )

    def _summary_message(self) -> str:
        if self._prefix:
            return (
                f"*JB* {self._prefix} stream completed - "
                f"{self._chunk_count} chunks processed"
            )
        return (
            f"*JB* Stream processing completed - {self._chunk_count} chunks "
            f"processed ({self._stream_type.value})"
        )
