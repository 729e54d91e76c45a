"""
Output utility for the todolist CLI with colors and verbosity control.

Provides a centralized output manager using the Rich library for
formatted console messages.
"""

from enum import IntEnum
from typing import Optional

from rich.console import Console
from rich.syntax import Syntax


class Verbosity(IntEnum):
    """Verbosity levels for output."""

    QUIET = 0  # Only errors and final results
    NORMAL = 1  # Standard output with colors
    VERBOSE = 2  # Detailed output including resolved settings


class OutputManager:
    """
    Centralized output manager for the todolist CLI.

    Provides methods for formatted output with colors and verbosity control.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL):
        self.verbosity = verbosity
        self.console = Console()
        self.error_console = Console(stderr=True)

    def success(self, message: str) -> None:
        """Print a success message in green."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Print an error message in red to stderr."""
        self.error_console.print(f"[red]✗ {message}[/red]", style="red")

    def info(self, message: str) -> None:
        """Print an info message in blue."""
        if self.verbosity >= Verbosity.NORMAL:
            self.console.print(f"[blue]ℹ[/blue] {message}", style="blue")

    def verbose(self, message: str) -> None:
        """Print a verbose message (only shown in VERBOSE mode)."""
        if self.verbosity >= Verbosity.VERBOSE:
            self.console.print(f"[dim]{message}[/dim]", style="dim")

    def sql(self, statement: str) -> None:
        """Print a SQL statement. Shown at every verbosity since it is the command's result."""
        if self.verbosity == Verbosity.QUIET:
            self.console.print(statement, markup=False, highlight=False)
        else:
            self.console.print(Syntax(statement, "sql"))


# Global output manager instance
_output_manager: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """
    Get the global output manager instance.

    Returns:
        OutputManager instance
    """
    global _output_manager
    if _output_manager is None:
        _output_manager = OutputManager()
    return _output_manager


def set_output(manager: OutputManager) -> None:
    """Set the global output manager instance."""
    global _output_manager
    _output_manager = manager
