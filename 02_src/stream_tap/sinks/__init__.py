"""Trace sinks module."""

from .sink import ITraceSink, LoggerSink, MemorySink

__all__ = ["ITraceSink", "LoggerSink", "MemorySink"]
