"""Rich console components for the testscaffold CLI."""

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from ...domain.models import TypeDescriptor

# Restricted palette, matched by the log handler and the tables
SCAFFOLD_THEME = Theme(
    {
        "primary": "cyan",
        "accent": "magenta",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "muted": "dim",
    }
)


def create_console(**kwargs) -> Console:
    """Console bound to the testscaffold theme."""
    return Console(theme=SCAFFOLD_THEME, **kwargs)


def build_candidate_table(types: list[TypeDescriptor]) -> Table:
    """
    Build a table summarizing candidate types.

    Args:
        types: Candidate types in discovery order

    Returns:
        Rich table with one row per type
    """
    table = Table(title="Candidate Types", header_style="primary")
    table.add_column("Type", style="accent")
    table.add_column("Module", style="muted")
    table.add_column("Constructor", justify="right")
    table.add_column("Methods")

    for descriptor in types:
        if descriptor.constructor is None:
            constructor = "[warning]none[/]"
        else:
            constructor = str(descriptor.constructor.arity)
        table.add_row(
            descriptor.name,
            descriptor.module,
            constructor,
            ", ".join(method.name for method in descriptor.methods),
        )

    return table


def print_generation_summary(console: Console, output_directory: str) -> None:
    """Print the single line reporting where scaffolds were written."""
    console.print(
        f"Test scripts generated in: {output_directory}",
        highlight=False,
        markup=False,
        soft_wrap=True,
    )
