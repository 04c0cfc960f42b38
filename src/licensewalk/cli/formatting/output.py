#!/usr/bin/env python
"""
Output formatting with Rich console.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


# Custom theme for the licensewalk CLI
custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "red",
    "success": "green",
})


class ConsoleOutput:
    """Console output with Rich formatting."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(theme=custom_theme, highlight=False, emoji=False)

    def print(self, text: str = "", **kwargs):
        """Print text to console."""
        self.console.print(text, **kwargs)

    def print_plain(self, text: str):
        """Write text verbatim, bypassing Rich rendering (keeps \\r and tabs)."""
        self.console.file.write(f"{text}\n")
        self.console.file.flush()

    def print_error(self, text: str):
        """Print error text."""
        self.console.print(f"[red]Error:[/red] {escape(text)}")

    def print_warning(self, text: str):
        """Print warning text."""
        self.console.print(f"[yellow]Warning:[/yellow] {escape(text)}")
