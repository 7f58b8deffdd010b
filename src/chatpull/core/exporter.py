"""ConversationExporter - end-to-end export of saved conversation pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..assembler import DocumentAssembler
from ..conversion.markdown import MarkdownRenderer
from ..extraction.page import derive_title, is_streaming, parse_page
from ..extraction.turns import TurnExtractor
from ..models.config import ExportConfig
from ..models.results import ConversionResult
from ..naming import build_filename

logger = logging.getLogger(__name__)


class StreamingInProgressError(RuntimeError):
    """Raised when a page still shows a response being generated."""

    def __init__(self, message: str = "Wait for the response to finish before exporting.") -> None:
        super().__init__(message)


class ConversationExporter:
    """
    Primary API for chatpull.

    Runs the whole pipeline for one page: parse, extract turns, render,
    assemble, and optionally save. Each call is independent; the input
    page is only read.

    Example:
        exporter = ConversationExporter(ExportConfig(output={"directory": Path("./chats")}))

        result = exporter.convert_file(Path("saved-chat.html"))
        if result is not None:
            path = exporter.save(result)
            print(f"Saved {result.turn_count} turns to {path}")
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        """
        Initialize the exporter.

        Args:
            config: Export configuration (defaults apply when None)
        """
        self.config = config or ExportConfig()
        self._extractor = TurnExtractor(selectors=self.config.selectors)
        self._assembler = DocumentAssembler(
            renderer=MarkdownRenderer(),
            headings=self.config.headings,
            default_title=self.config.default_title,
        )

    def convert(self, html: Union[bytes, str]) -> Optional[ConversionResult]:
        """
        Convert a saved conversation page to Markdown.

        Args:
            html: Page HTML as bytes or text

        Returns:
            The conversion result, or None when the page holds no conversation

        Raises:
            StreamingInProgressError: If a response is still being generated
        """
        soup = parse_page(html)

        if is_streaming(soup, self.config.selectors.streaming_indicator):
            raise StreamingInProgressError()

        title = derive_title(
            soup,
            default=self.config.default_title,
            suffix_pattern=self.config.title_suffix_pattern,
        )
        turns = self._extractor.extract(soup)

        markdown = self._assembler.assemble(title, turns)
        if markdown is None:
            logger.warning("No conversation content found")
            return None

        filename = build_filename(
            title,
            extension=self.config.output.extension,
            fallback=self.config.default_title,
        )
        logger.debug(f"Converted {len(turns)} turns of {title!r} to {len(markdown)} characters")
        return ConversionResult(title=title, markdown=markdown, turns=tuple(turns), filename=filename)

    def convert_file(self, path: Path) -> Optional[ConversionResult]:
        """
        Convert a saved conversation page file.

        Args:
            path: Path to the saved HTML page

        Returns:
            The conversion result, or None when the page holds no conversation
        """
        logger.debug(f"Reading {path}")
        return self.convert(path.read_bytes())

    def _validate_output_path(self, output_path: Path, directory: Path) -> Path:
        """
        Validate that output path is inside the output directory.

        Raises:
            ValueError: If the path escapes the directory
        """
        resolved = output_path.resolve()
        base_resolved = directory.resolve()
        try:
            resolved.relative_to(base_resolved)
        except ValueError as err:
            raise ValueError(f"Output path {resolved} is outside base directory {base_resolved}") from err
        return resolved

    def save(self, result: ConversionResult, directory: Optional[Path] = None) -> Path:
        """
        Write a conversion result to disk.

        Args:
            result: Converted conversation
            directory: Output directory (uses the configured directory if None)

        Returns:
            Path of the written file (the would-be path in dry-run mode)

        Raises:
            ValueError: If the output path is outside the directory
            FileExistsError: If the file exists and overwriting is disabled
            OSError: If the file cannot be written
        """
        directory = directory or self.config.output.directory

        try:
            output_path = self._validate_output_path(directory / result.filename, directory)
        except ValueError as e:
            logger.error(f"Path validation failed for {result.filename}: {e}")
            raise

        if self.config.dry_run:
            logger.info(f"Dry run, would save: {output_path}")
            return output_path

        if output_path.exists() and not self.config.output.overwrite:
            logger.error(f"Refusing to overwrite {output_path}")
            raise FileExistsError(f"Output file already exists: {output_path}")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.markdown, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save {result.title!r} to {output_path}: {e}")
            raise

        logger.info(f"Saved: {output_path}")
        return output_path

    def export_file(self, path: Path, directory: Optional[Path] = None) -> Optional[Path]:
        """
        Convert a saved page and write the Markdown next to the others.

        Args:
            path: Path to the saved HTML page
            directory: Output directory (uses the configured directory if None)

        Returns:
            Path of the written file, or None when the page holds no conversation
        """
        result = self.convert_file(path)
        if result is None:
            return None
        return self.save(result, directory)
