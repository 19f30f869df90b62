"""Transport module."""

from .transform_stream import (
    IStreamController,
    ITransformer,
    StreamController,
    TransformStream,
    iter_through,
    pipe_through,
)

__all__ = [
    "IStreamController",
    "ITransformer",
    "StreamController",
    "TransformStream",
    "iter_through",
    "pipe_through",
]
