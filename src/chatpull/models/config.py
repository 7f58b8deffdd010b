"""Pydantic configuration models for chatpull."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class SelectorConfig(BaseModel):
    """CSS selectors used to locate conversation structure in a saved page."""

    turn: str = Field(
        'article[data-testid^="conversation-turn-"]',
        description="Selector matching one container per conversation turn",
    )
    message_role: str = Field(
        "[data-message-author-role]",
        description="Selector for the role-bearing element inside a turn",
    )
    role_attribute: str = Field(
        "data-message-author-role",
        description="Attribute holding the author role (user, assistant)",
    )
    user_text: str = Field(
        ".whitespace-pre-wrap",
        description="Selector for the plain-text body of a user turn",
    )
    assistant_content: str = Field(
        ".markdown.prose",
        description="Selector for the rich-content body of an assistant turn",
    )
    streaming_indicator: str = Field(
        "[data-writing-block]",
        description="Selector present while a response is still being generated",
    )

    model_config = {"extra": "forbid"}


class HeadingConfig(BaseModel):
    """Heading lines emitted before each turn."""

    user: str = Field("##### You said:", description="Heading for user turns")
    assistant: str = Field("###### ChatGPT said:", description="Heading for assistant turns")

    model_config = {"extra": "forbid"}


class OutputConfig(BaseModel):
    """Configuration for saving exported Markdown."""

    directory: Path = Field(Path("./exports"), description="Output directory for exported files")
    overwrite: bool = Field(True, description="Replace an existing export with the same name")
    extension: str = Field(".md", pattern=r"^\.[A-Za-z0-9]+$", description="Output file extension")

    model_config = {"extra": "forbid"}


class ExportConfig(BaseModel):
    """
    Root configuration model for chatpull.

    Example:
        config = ExportConfig(
            output=OutputConfig(directory=Path("./chats")),
            headings={"assistant": "### Assistant"},
        )

    YAML format:
        default_title: untitled
        output:
          directory: ./chats
        headings:
          user: "### Me"
    """

    selectors: SelectorConfig = Field(default_factory=SelectorConfig)
    headings: HeadingConfig = Field(default_factory=HeadingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    default_title: str = Field(
        "conversation",
        min_length=1,
        description="Title used when the page has none; never rendered as a heading",
    )
    title_suffix_pattern: str = Field(
        r"\s*[-–|]\s*ChatGPT\s*$",
        description="Regex removed (case-insensitive) from the end of the page title",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")
    dry_run: bool = Field(False, description="Convert without writing files")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ExportConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ExportConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text(encoding="utf-8"))
