"""Streaming API routes."""

import asyncio
import json
from collections.abc import Mapping
from typing import Any, AsyncIterator, Literal

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from ...logging_config import get_logger
from ...models import StreamType
from ...sinks import ITraceSink
from ...tap import StreamTap
from ...transport import TransformStream

logger = get_logger(__name__)


class StreamRequest(BaseModel):
    """Request model for a tapped stream."""

    chunks: list[Any] = Field(default_factory=list)
    stream_type: Literal["agent", "regular"] = "regular"
    prefix: str = ""


async def produce(chunks: list[Any]) -> AsyncIterator[Any]:
    """Emit request chunks one at a time, yielding control between them."""
    for chunk in chunks:
        yield chunk
        await asyncio.sleep(0)


def encode_text(chunk: Any) -> str:
    """Render a forwarded chunk for a text/plain response."""
    if isinstance(chunk, str):
        return chunk
    return json.dumps(chunk)


def encode_sse(chunk: Any) -> str:
    """Render a forwarded chunk as one server-sent-event frame."""
    if isinstance(chunk, Mapping):
        frame = ""
        if chunk.get("event") is not None:
            frame += f"event: {chunk['event']}\n"
        return frame + f"data: {json.dumps(chunk.get('data'))}\n\n"
    return f"data: {json.dumps(chunk)}\n\n"


def create_streaming_router(sink: ITraceSink | None) -> APIRouter:
    """Create streaming router."""
    router = APIRouter(prefix="/api", tags=["streaming"])

    @router.post("/stream")
    async def stream(request: StreamRequest) -> StreamingResponse:
        """Stream the request chunks back through a StreamTap."""
        try:
            stream_type = StreamType(request.stream_type)
            tap = StreamTap(sink=sink, stream_type=stream_type, prefix=request.prefix)
            tapped = TransformStream(tap).pipe(produce(request.chunks))
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        logger.info(
            "Streaming %d chunks (%s)", len(request.chunks), stream_type.value
        )

        if stream_type is StreamType.AGENT:
            body = (encode_sse(chunk) async for chunk in tapped)
            return StreamingResponse(body, media_type="text/event-stream")

        body = (encode_text(chunk) async for chunk in tapped)
        return StreamingResponse(body, media_type="text/plain")

    @router.get("/health")
    async def health() -> dict:
        """Liveness probe."""
        return {"status": "ok"}

    return router
