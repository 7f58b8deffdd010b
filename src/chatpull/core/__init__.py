"""Export pipeline entry points."""

from .exporter import ConversationExporter, StreamingInProgressError

__all__ = ["ConversationExporter", "StreamingInProgressError"]
