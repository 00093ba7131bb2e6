"""
Rich TUI Interface Module

Terminal output for the locator CLI, built on the Rich library.

Components:
- LocatorConsole: Console wrapper with themed output
- TUIConfig: Configuration for colors
- Blocks for matches, diagnostics, expressions and errors
"""

from xpath_locator.tui.console import (
    LocatorConsole,
    TUIConfig,
    create_console,
    get_console,
)
from xpath_locator.tui.result import (
    print_diagnostics,
    print_error,
    print_expression,
    print_matches,
)

__all__ = [
    # Console infrastructure
    "LocatorConsole",
    "TUIConfig",
    "create_console",
    "get_console",
    # Result blocks
    "print_diagnostics",
    "print_error",
    "print_expression",
    "print_matches",
]
