"""Stream tap module."""

from .classifier import classify_chunk, decode_binary
from .stream_tap import StreamTap

__all__ = ["StreamTap", "classify_chunk", "decode_binary"]
