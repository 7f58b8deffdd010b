"""Command-line interface for chatpull."""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Verify core dependencies
try:
    import bs4  # noqa: F401
    import pydantic  # noqa: F401
    import rich  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pip users: pip install --upgrade --force-reinstall chatpull", file=sys.stderr)
    print("  2. For development: pip install -e .[dev]", file=sys.stderr)
    sys.exit(1)

from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.exporter import ConversationExporter, StreamingInProgressError
from .logging_config import configure_logging
from .models.config import ExportConfig
from .models.nodes import Role


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="chatpull",
        description="Export ChatGPT conversations from saved pages to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export a saved conversation page to ./exports
  chatpull saved-chat.html

  # Export several pages into a custom directory
  chatpull chats/*.html --output-dir ./markdown

  # Print the Markdown instead of saving it
  chatpull saved-chat.html --stdout

  # Use a YAML configuration file
  chatpull saved-chat.html --config chatpull.yaml
        """,
    )

    parser.add_argument(
        "pages",
        nargs="*",
        type=Path,
        metavar="PAGE",
        help="Saved conversation HTML page(s) to export",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )

    # Output
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Output directory (default: ./exports)",
    )
    output_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print Markdown to stdout instead of saving",
    )
    output_group.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of replacing existing exports",
    )
    output_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be exported without writing files",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress output",
    )

    return parser


def build_config(args: argparse.Namespace) -> ExportConfig:
    """Build the export configuration from a config file and CLI overrides."""
    if args.config:
        config = ExportConfig.from_yaml_file(args.config)
    else:
        config = ExportConfig()

    updates: dict = {}
    output_updates: dict = {}
    if args.output_dir:
        output_updates["directory"] = args.output_dir
    if args.no_overwrite:
        output_updates["overwrite"] = False
    if output_updates:
        updates["output"] = config.output.model_copy(update=output_updates)
    if args.dry_run:
        updates["dry_run"] = True

    # Log level
    if args.verbose:
        updates["log_level"] = "DEBUG"
    elif args.quiet:
        updates["log_level"] = "ERROR"

    return config.model_copy(update=updates)


def run_exporter(args: argparse.Namespace) -> int:
    """Run the exporter with given arguments."""
    console = Console(stderr=args.stdout, soft_wrap=True)

    if not args.pages:
        console.print("[red]Error:[/red] Please provide at least one saved page to export")
        return 1

    try:
        config = build_config(args)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return 1

    configure_logging(config)
    exporter = ConversationExporter(config)

    if not args.quiet and not args.stdout:
        console.print(f"[bold blue]chatpull[/bold blue] v{__version__}")
        console.print()

    failures = 0
    for page in args.pages:
        try:
            result = exporter.convert_file(page)
            if result is None:
                console.print(f"[yellow]{escape(str(page))}:[/yellow] No conversation content found.")
                failures += 1
                continue

            if args.stdout:
                sys.stdout.write(result.markdown)
                continue

            output_path = exporter.save(result)
            if not args.quiet:
                verb = "Would export" if config.dry_run else "Exported"
                users = result.count_by_role(Role.USER)
                assistants = result.count_by_role(Role.ASSISTANT)
                console.print(
                    f"[green]{verb}:[/green] {escape(str(page))} -> {escape(str(output_path))} "
                    f"({users} user, {assistants} assistant turns)"
                )

        except StreamingInProgressError as e:
            console.print(f"[yellow]{escape(str(page))}:[/yellow] {e}")
            failures += 1
        except Exception as e:
            console.print(f"[red]Error:[/red] {escape(str(page))}: {e}")
            if args.verbose:
                import traceback

                traceback.print_exc()
            failures += 1

    return 0 if failures == 0 else 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_exporter(args)


if __name__ == "__main__":
    sys.exit(main())
