"""
Rich TUI Console Setup

Provides the console used by the locator CLI.
Configured via environment variables for customizable appearance.
"""

import os
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.theme import Theme


@dataclass
class TUIConfig:
    """
    TUI configuration loaded from environment variables.

    Attributes:
        color_match: Color for match tables
        color_diagnostic: Color for resolver diagnostics
        color_expression: Color for generated XPath expressions
    """

    color_match: str = "green"
    color_diagnostic: str = "yellow"
    color_expression: str = "cyan"

    @classmethod
    def from_env(cls) -> "TUIConfig":
        """Load configuration from environment variables."""
        return cls(
            color_match=os.getenv("COLOR_MATCH", "green"),
            color_diagnostic=os.getenv("COLOR_DIAGNOSTIC", "yellow"),
            color_expression=os.getenv("COLOR_EXPRESSION", "cyan"),
        )


def create_theme(config: TUIConfig) -> Theme:
    """Create a Rich theme from TUI configuration."""
    return Theme(
        {
            "match": Style(color=config.color_match, bold=True),
            "diagnostic": Style(color=config.color_diagnostic, bold=True),
            "diagnostic.text": Style(color=config.color_diagnostic),
            "expression": Style(color=config.color_expression),
            "label": Style(bold=True),
        }
    )


class LocatorConsole:
    """
    Rich console wrapper for locator output.

    Pass an existing Console (e.g. one recording output in tests) to
    redirect everything printed through this wrapper.
    """

    def __init__(self, config: Optional[TUIConfig] = None, console: Optional[Console] = None):
        """
        Initialize the locator console.

        Args:
            config: TUI configuration. If None, loads from environment.
            console: Underlying Rich console. If None, a themed stdout console.
        """
        self.config = config or TUIConfig.from_env()
        self._theme = create_theme(self.config)
        if console is None:
            console = Console(theme=self._theme)
        else:
            console.push_theme(self._theme)
        self.console = console

    def print(self, *args, **kwargs) -> None:
        """Passthrough to underlying Rich console."""
        self.console.print(*args, **kwargs)


# Global console instance
_console: Optional[LocatorConsole] = None


def get_console() -> LocatorConsole:
    """Get or create the global console instance."""
    global _console
    if _console is None:
        _console = LocatorConsole()
    return _console


def create_console(
    config: Optional[TUIConfig] = None,
    console: Optional[Console] = None,
) -> LocatorConsole:
    """
    Create a new console instance with optional configuration.

    Args:
        config: TUI configuration. If None, loads from environment.
        console: Underlying Rich console to wrap.
    """
    return LocatorConsole(config, console)
