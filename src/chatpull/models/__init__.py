"""Chatpull content, configuration and result models."""

from .config import ExportConfig, HeadingConfig, OutputConfig, SelectorConfig
from .nodes import (
    LIST_KINDS,
    Element,
    ImageRef,
    Node,
    NodeKind,
    Role,
    Text,
    Turn,
    find_all,
    find_first,
    iter_descendants,
    text_content,
)
from .results import ConversionResult

__all__ = [
    # Config
    "ExportConfig",
    "HeadingConfig",
    "OutputConfig",
    "SelectorConfig",
    # Nodes
    "Element",
    "ImageRef",
    "LIST_KINDS",
    "Node",
    "NodeKind",
    "Role",
    "Text",
    "Turn",
    "find_all",
    "find_first",
    "iter_descendants",
    "text_content",
    # Results
    "ConversionResult",
]
