"""CLI entry point for the Social Mentions and Hashtags Extractor.

Usage:
    mentions-hashtags extract "@MrBeast just posted! #fyp"
    mentions-hashtags extract --file caption.txt --output json
    cat caption.txt | mentions-hashtags extract --no-mentions
    mentions-hashtags batch comments.txt --output csv --save results/comments
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .core.config import ExtractorConfig
from .core.exceptions import MentionsHashtagsError
from .extractor.parser import TokenExtractor
from .output.formatters import OutputFormatter, TableFormatter, get_formatter

# Initialize app
app = typer.Typer(
    name="mentions-hashtags",
    help="Extract unique @mentions and #hashtags from social media text",
    add_completion=False,
)

console = Console()

# Status and errors go to stderr so stdout stays machine-readable
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/]")
    raise typer.Exit(1)


def _load_config(config: Optional[Path], keep_trailing_periods: bool) -> ExtractorConfig:
    settings = ExtractorConfig.load(config)
    if keep_trailing_periods:
        settings = replace(settings, strip_trailing_periods=False)
    return settings


def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    if text is not None:
        return text
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            _fail(f"Cannot read {file}: {e}")
    if sys.stdin.isatty():
        _fail("No input: pass TEXT, --file, or pipe text on stdin")
    try:
        return sys.stdin.read()
    except UnicodeDecodeError as e:
        _fail(f"Cannot read stdin: {e}")


def _emit(formatter: OutputFormatter, result, save: Optional[Path]) -> None:
    if isinstance(formatter, TableFormatter):
        formatter.use_rich = sys.stdout.isatty()
    print(formatter.format(result))

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save_path = save.with_suffix(formatter.extension)
        formatter.format_to_file(result, str(save_path))
        err_console.print(f"[green]Saved to {escape(str(save_path))}[/]")


@app.command()
def extract(
    text: Optional[str] = typer.Argument(None, help="Text to scan (reads stdin if omitted)"),
    file: Optional[Path] = typer.Option(
        None,
        "--file", "-f",
        help="Read text from a file",
    ),
    mentions: bool = typer.Option(
        True,
        "--mentions/--no-mentions",
        help="Extract @mentions",
    ),
    hashtags: bool = typer.Option(
        True,
        "--hashtags/--no-hashtags",
        help="Extract #hashtags",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output format: table, json, csv",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save", "-s",
        help="Save output to file",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to YAML config file",
    ),
    keep_trailing_periods: bool = typer.Option(
        False,
        "--keep-trailing-periods",
        help="Keep sentence-final periods inside tokens",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Extract mentions and hashtags from a single text.

    Examples:
        mentions-hashtags extract "@charlidamelio #fyp #CapCut"
        mentions-hashtags extract --file caption.txt -o json
    """
    setup_logging(verbose)

    try:
        settings = _load_config(config, keep_trailing_periods)
        formatter = get_formatter(output or settings.output_format)
        extractor = TokenExtractor(settings)
    except MentionsHashtagsError as e:
        _fail(f"Error: {e}")

    content = _read_text(text, file)
    result = extractor.extract(content, mentions, hashtags)
    _emit(formatter, result, save)


@app.command()
def batch(
    texts_file: Path = typer.Argument(..., help="File with one text per line"),
    output: str = typer.Option(
        "json",
        "--output", "-o",
        help="Output format: table, json, csv",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save", "-s",
        help="Save output to file",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to YAML config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Extract from many texts, deduplicating across all of them.

    Blank lines are skipped.
    """
    setup_logging(verbose)

    if not texts_file.exists():
        _fail(f"File not found: {texts_file}")

    try:
        settings = _load_config(config, keep_trailing_periods=False)
        formatter = get_formatter(output)
        extractor = TokenExtractor(settings)
    except MentionsHashtagsError as e:
        _fail(f"Error: {e}")

    try:
        with open(texts_file, "r", encoding="utf-8") as f:
            texts = [line.rstrip("\n") for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {texts_file}: {e}")

    logger.info(f"Processing {len(texts)} texts from {texts_file}")
    result = extractor.extract_many(texts)
    _emit(formatter, result, save)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"mentions-hashtags v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
