"""Shared Rich console with custom theme for consistent CLI output."""

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

# Named styles for semantic consistency
THEME_STYLES = {
    "heading": "bold cyan",
    "success": "green",
    "error": "bold red",
    "muted": "dim",
    "path": "cyan",
}
custom_theme = Theme(THEME_STYLES)

# Singleton console instances
console = Console(theme=custom_theme)
err_console = Console(theme=custom_theme, stderr=True)


def print_success(text: str) -> None:
    """Print text with success style."""
    console.print(f"[success]✓[/success] {text}")


def print_path(label: str, path: str) -> None:
    """Print labeled path with muted style."""
    console.print(f"[muted]{label}:[/muted] [path]{path}[/path]")


def print_violations(violations: Sequence[str]) -> None:
    """Print a panel listing every violation to stderr."""
    body = "\n".join(f"[error]✗[/error] {v}" for v in violations)
    err_console.print(
        Panel(
            body,
            title="[error]Environment variable validation failed[/error]",
            border_style="red",
        )
    )
