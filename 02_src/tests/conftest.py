"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def memory_sink():
    """Create in-memory trace sink."""
    from stream_tap.sinks import MemorySink

    return MemorySink()


@pytest.fixture
def controller():
    """Create a stream controller."""
    from stream_tap.transport import StreamController

    return StreamController()


@pytest.fixture
def tap(memory_sink):
    """Create StreamTap writing to the memory sink."""
    from stream_tap.tap import StreamTap

    return StreamTap(sink=memory_sink)


@pytest.fixture
def failing_sink():
    """Create a sink whose trace() always raises."""
    sink = Mock()
    sink.trace = Mock(side_effect=RuntimeError("sink down"))
    return sink


@pytest.fixture
def trace_logger():
    """Create logger enabled at TRACE level."""
    from stream_tap.logging_config import TRACE

    logger = logging.getLogger("test.stream_tap")
    logger.setLevel(TRACE)
    return logger
