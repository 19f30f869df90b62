"""Stream chunk data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StreamType(str, Enum):
    """Logical stream a tap belongs to."""

    AGENT = "agent"
    REGULAR = "regular"


class ChunkKind(str, Enum):
    """Runtime shape of a stream chunk."""

    STRING = "string"
    UINT8ARRAY = "Uint8Array"
    OBJECT = "object"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class ClassifiedChunk:
    """A chunk resolved into the fields a trace record needs."""

    kind: ChunkKind
    content: Any  # decoded text for binary chunks, the chunk itself otherwise
    event: Any = None
    data: Any = None
    has_event: bool = False
    has_data: bool = False
