"""Output formatters for extraction results.

Provides multiple output formats:
- JSON: Machine-readable
- CSV: One row per token
- Table: Human-readable CLI output
"""

import csv
import io
import json
import logging
from abc import ABC, abstractmethod

from rich.console import Console
from rich.table import Table

from ..core.exceptions import ConfigurationError
from ..core.models import MentionsHashtags
from ..core.types import OUTPUT_FORMATS, OutputFormatType, TokenKind

logger = logging.getLogger(__name__)


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    extension: str = ".txt"

    @abstractmethod
    def format(self, result: MentionsHashtags) -> str:
        """Format the result as a string."""
        pass

    def format_to_file(self, result: MentionsHashtags, filepath: str) -> None:
        """Write formatted result to a file."""
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(self.format(result))
        logger.debug(f"Wrote {self.__class__.__name__} output to {filepath}")


class JSONFormatter(OutputFormatter):
    """Formats results as JSON."""

    extension = ".json"

    def __init__(self, indent: int | None = 2):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation level, None for a single line
        """
        self.indent = indent

    def format(self, result: MentionsHashtags) -> str:
        """Format result as JSON string."""
        return json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False)


class CSVFormatter(OutputFormatter):
    """Formats results as CSV with one token per row."""

    extension = ".csv"

    def __init__(self, delimiter: str = ",", include_header: bool = True):
        self.delimiter = delimiter
        self.include_header = include_header

    def format(self, result: MentionsHashtags) -> str:
        """Format result as CSV string."""
        output = io.StringIO()
        writer = csv.writer(output, delimiter=self.delimiter, lineterminator="\n")

        if self.include_header:
            writer.writerow(["kind", "token"])

        for kind in TokenKind:
            for token in result.get(kind):
                writer.writerow([kind.value, token])

        return output.getvalue()


class TableFormatter(OutputFormatter):
    """Formats results as human-readable tables for CLI output."""

    def __init__(self, use_rich: bool = True, width: int = 80):
        """
        Initialize table formatter.

        Args:
            use_rich: Use rich tables with colors, plain text otherwise
            width: Console width for rich rendering
        """
        self.use_rich = use_rich
        self.width = width

    def format(self, result: MentionsHashtags) -> str:
        """Format result as table string."""
        if self.use_rich:
            return self._format_rich(result)
        return self._format_plain(result)

    def _format_plain(self, result: MentionsHashtags) -> str:
        """Plain text formatting."""
        lines = []
        for kind in TokenKind:
            tokens = result.get(kind)
            lines.append(f"{kind.display_name} ({len(tokens)})")
            lines.append("-" * 40)
            if tokens:
                lines.extend(f"  {token}" for token in tokens)
            else:
                lines.append("  (none)")
            lines.append("")
        return "\n".join(lines)

    def _format_rich(self, result: MentionsHashtags) -> str:
        """Rich library formatting with colors."""
        output = io.StringIO()
        console = Console(file=output, force_terminal=True, width=self.width)

        for kind in TokenKind:
            tokens = result.get(kind)
            table = Table(title=f"{kind.display_name} ({len(tokens)})")
            table.add_column("#", justify="right", style="dim")
            table.add_column("Token", style="cyan" if kind == TokenKind.MENTION else "green")

            for i, token in enumerate(tokens, 1):
                table.add_row(str(i), token)

            if not tokens:
                table.add_row("", "[dim](none)[/]")

            console.print(table)

        return output.getvalue()

    def format_to_file(self, result: MentionsHashtags, filepath: str) -> None:
        """Write formatted output to file."""
        # For file output, use plain format (no ANSI codes)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self._format_plain(result))


def get_formatter(output_format: OutputFormatType | str) -> OutputFormatter:
    """Return the formatter for an output format name."""
    name = output_format.lower()
    if name == "json":
        return JSONFormatter()
    if name == "csv":
        return CSVFormatter()
    if name == "table":
        return TableFormatter()
    raise ConfigurationError(
        "output_format",
        f"must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}",
    )
