"""API routes."""

from . import streaming

__all__ = ["streaming"]
