"""FastAPI application setup."""

from fastapi import FastAPI

from ..sinks import ITraceSink, LoggerSink
from .routes import streaming


def create_fastapi_app(sink: ITraceSink | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        sink: Trace sink shared by every tap the app creates.
              Defaults to a LoggerSink.
    """
    fastapi_app = FastAPI(
        title="Stream Tap API",
        description="Demo host streaming request chunks through a StreamTap",
        version="0.1.0",
    )

    fastapi_app.include_router(
        streaming.create_streaming_router(sink if sink is not None else LoggerSink())
    )

    return fastapi_app
