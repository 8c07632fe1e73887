"""
Rich console output for CLI operations.

All output goes to stderr to preserve stdout for machine-readable output
(the saved file path).
"""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Console for stderr output (preserves stdout for machine output)
console = Console(stderr=True)


def print_success_result(
    output_path: Path,
    model_used: str,
    mime_type: str,
    action: str,
    user_text: str,
) -> None:
    """
    Print a formatted success panel for a generated or refined logo.

    Args:
        output_path: Path where the image was saved
        model_used: The model that produced the image
        mime_type: MIME type returned by the model
        action: "generate" or "refine"
        user_text: The description or feedback the user supplied
    """
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="right", vertical="top")
    table.add_column(style="white")

    table.add_row("Saved to", f"[bold green]{output_path}[/bold green]")
    table.add_row("Model", model_used)
    table.add_row("Type", mime_type)
    label = "Feedback" if action == "refine" else "Description"
    table.add_row(label, f"[dim]{user_text}[/dim]")

    title = "Logo Refined" if action == "refine" else "Logo Generated"
    panel = Panel(
        table,
        title=f"[bold green]✓ {title}[/bold green]",
        border_style="green",
        padding=(1, 2),
    )

    console.print()
    console.print(panel)


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]✗[/red] {message}")
