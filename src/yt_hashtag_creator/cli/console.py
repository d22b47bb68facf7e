"""Rich console singletons for CLI output."""

import sys

from rich.console import Console

# Use safe_box on Windows to avoid Unicode encoding errors
_safe_box = sys.platform == "win32"

# Global console instance - used across all CLI modules
console = Console(safe_box=_safe_box)

# Diagnostics go to stderr so stdout stays clean for JSON output
error_console = Console(stderr=True, safe_box=_safe_box)


def print_error(message: str, details: dict | None = None) -> None:
    """Print an error message.

    Args:
        message: Error message
        details: Optional details dict
    """
    error_console.print(f"[red]Error: {message}[/red]")
    if details:
        for key, value in details.items():
            error_console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message to stderr."""
    error_console.print(f"[cyan]{message}[/cyan]")
