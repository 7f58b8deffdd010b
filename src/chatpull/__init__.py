"""
chatpull - Export ChatGPT conversations from saved pages to clean Markdown.

Usage:
    from pathlib import Path
    from chatpull import ConversationExporter, ExportConfig

    exporter = ConversationExporter(ExportConfig(output={"directory": Path("./chats")}))

    result = exporter.convert_file(Path("saved-chat.html"))
    if result is not None:
        exporter.save(result)
"""

__version__ = "1.0.0"

from .assembler import DocumentAssembler
from .conversion import HtmlNodeAdapter, MarkdownRenderer, normalize_whitespace
from .core.exporter import ConversationExporter, StreamingInProgressError
from .extraction import TurnExtractor, derive_title, parse_page
from .models.config import ExportConfig, HeadingConfig, OutputConfig, SelectorConfig
from .models.nodes import Element, ImageRef, Node, NodeKind, Role, Text, Turn
from .models.results import ConversionResult

__all__ = [
    "__version__",
    # Core
    "ConversationExporter",
    "StreamingInProgressError",
    "ConversionResult",
    # Pipeline
    "DocumentAssembler",
    "HtmlNodeAdapter",
    "MarkdownRenderer",
    "TurnExtractor",
    "derive_title",
    "normalize_whitespace",
    "parse_page",
    # Config
    "ExportConfig",
    "HeadingConfig",
    "OutputConfig",
    "SelectorConfig",
    # Nodes
    "Element",
    "ImageRef",
    "Node",
    "NodeKind",
    "Role",
    "Text",
    "Turn",
]
