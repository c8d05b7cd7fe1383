"""
Describe command: show the labels of a machine definition
"""

import json
import typer
from rich.console import Console
from rich.table import Table

from machine.core import MachineError, canonicalize
from machine.loader import load_machine
from machine.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


def describe_command(
    target: str = typer.Argument(..., help="Machine definition, e.g. machine.examples.users:machine"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show status labels, initial label and status field of a machine.

    Examples:
        machine describe machine.examples.users:machine
        machine describe machine.examples.users:machine --json
    """
    try:
        m = load_machine(target)
    except MachineError as e:
        logger.error("Cannot load machine %s: %s", target, e)
        if json_output:
            print(json.dumps({"error": str(e), "target": target}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        output = {
            "target": target,
            "labels": canonicalize(list(m.labels)),
            "initial": canonicalize(m.initial_label),
            "status_field": m.status_field,
            "strict": m.strict,
        }
        print(json.dumps(output, indent=2))
        return

    table = Table(title=f"Machine {target}")
    table.add_column("Label", style="green")
    table.add_column("Reducer", style="cyan")
    table.add_column("Initial", justify="center")

    for label, reducer in m.reducers.items():
        name = getattr(reducer, "__qualname__", type(reducer).__name__)
        table.add_row(str(label), name, "✓" if label == m.initial_label else "")

    console.print(table)
    console.print(f"  Status field: [yellow]{m.status_field}[/yellow]")
    console.print(f"  Strict: [yellow]{m.strict}[/yellow]")
