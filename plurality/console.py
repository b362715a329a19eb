"""Shared rich console for the plurality command line tool."""

from rich.console import Console

console = Console()

_STATUS_STYLES = {
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def status_print(message: str, status: str = "info") -> None:
    """Print a message styled by status ('info', 'success', 'warning', 'error')."""
    console.print(message, style=_STATUS_STYLES.get(status, ""), highlight=False, markup=False)
