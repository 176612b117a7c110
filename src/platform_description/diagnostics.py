import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import PreLexerConfig
from .errors import ParsingError
from .prelexer import PreLexer

logger = logging.getLogger(__name__)

def format_error(error: ParsingError, lines: Sequence[str]) -> str:
    """Format an error with the offending source line and a caret under it"""
    message = f"{error.location}: {error.error.value}: {error.message}"
    if not 1 <= error.line_number <= len(lines):
        return message

    source = lines[error.line_number - 1]
    column = len(source) - len(source.lstrip())
    return "\n".join([message, source, " " * column + "^"])

def print_error(error: ParsingError, lines: Sequence[str], console: Optional[Console] = None) -> None:
    """Print a formatted error inside a Rich panel"""
    console = console or Console(stderr=True)
    console.print(Panel(
        Text(format_error(error, lines)),
        title=error.error.value.title(),
        border_style="red"
    ))

def render_comparison(
    source_lines: Sequence[str],
    console: Optional[Console] = None,
    config: Optional[PreLexerConfig] = None
) -> Table:
    """Side-by-side table of source and prelexed lines.

    Stops at the first error, which is shown as the final row.
    """
    table = Table(title="PreLexer Output")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Source", style="dim")
    table.add_column("Output", style="green")

    produced: List[str] = []
    try:
        for output in PreLexer(config).process(source_lines):
            produced.append(output)
            number = len(produced)
            table.add_row(str(number), Text(source_lines[number - 1]), Text(output))
    except ParsingError as e:
        logger.debug(f"Comparison stopped after {len(produced)} line(s): {e}")
        table.add_row(
            str(e.line_number),
            Text(source_lines[e.line_number - 1]) if 1 <= e.line_number <= len(source_lines) else Text(""),
            Text(f"{e.error.value}: {e.message}", style="bold red")
        )

    if console:
        console.print(table)
    return table
