#!/usr/bin/env python3
"""
Machine CLI - status machine composer

Main entrypoint for the machine command-line tool.
"""

import uuid

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import describe, run
from machine.logging_config import setup_logging

app = typer.Typer(
    name="machine",
    help="Compose and replay status machines",
    add_completion=False,
)

console = Console()

app.command(name="describe")(describe.describe_command)
app.command(name="run")(run.run_command)


@app.callback()
def init(ctx: typer.Context):
    """Configure logging and tag this invocation with a run id."""
    setup_logging()
    ctx.obj = {"run_id": uuid.uuid4().hex[:12]}


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from machine import __version__ as machine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Machine CLI[/bold]", f"v{__version__}")
    table.add_row("Composer", f"v{machine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
