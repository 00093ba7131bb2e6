"""
Result blocks for locator output.

Match tables, diagnostics and errors, each drawn as a Rich panel.
"""

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..records import MatchRecord
from .console import LocatorConsole, get_console


def print_matches(
    records: Sequence[MatchRecord],
    *,
    xpath: str,
    console: Optional[LocatorConsole] = None,
) -> None:
    """
    Print matched nodes as a table.

    Args:
        records: Matches in document order
        xpath: Resolved expression, shown in the title
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    if not records:
        content = Text("No matches", style="dim")
    else:
        content = Table(show_header=True, header_style="bold", box=None)
        content.add_column("#", style="dim", justify="right")
        content.add_column("Tag", style="match")
        content.add_column("id")
        content.add_column("name")
        content.add_column("Text")
        for record in records:
            content.add_row(
                str(record.position),
                Text(record.tag or "-"),
                Text(record.id or ""),
                Text(record.name or ""),
                Text(record.text),
            )

    panel = Panel(
        content,
        title=Text(f"[MATCHES] {xpath}"),
        title_align="left",
        border_style=console.config.color_match,
        padding=(0, 1),
    )
    console.print(panel)


def print_diagnostics(
    messages: Sequence[str],
    *,
    console: Optional[LocatorConsole] = None,
) -> None:
    """
    Print resolver diagnostics, if any.

    Args:
        messages: Reported diagnostic messages
        console: Console to use (defaults to global console)
    """
    if not messages:
        return
    console = console or get_console()

    content = Text()
    for index, message in enumerate(messages):
        if index:
            content.append("\n")
        content.append("! ", style="diagnostic")
        content.append(message, style="diagnostic.text")

    panel = Panel(
        content,
        title="[DIAGNOSTICS]",
        title_align="left",
        border_style=console.config.color_diagnostic,
        padding=(0, 1),
    )
    console.print(panel)


def print_expression(
    expression: str,
    *,
    console: Optional[LocatorConsole] = None,
) -> None:
    """Print a generated XPath expression on its own line."""
    console = console or get_console()
    console.print(Text(expression, style="expression"))


def print_error(
    error_message: str,
    *,
    error_type: Optional[str] = None,
    console: Optional[LocatorConsole] = None,
) -> None:
    """
    Print an error block.

    Args:
        error_message: The error message
        error_type: Type/category of error
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    content = Text()
    content.append("Error", style="bold red")
    if error_type:
        content.append(f" ({error_type})", style="dim red")
    content.append("\n\n")
    content.append(error_message)

    panel = Panel(
        content,
        title="[ERROR]",
        title_align="left",
        border_style="red",
        padding=(0, 1),
    )
    console.print(panel)
