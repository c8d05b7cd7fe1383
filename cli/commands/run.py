"""
Run command: replay an event file through a machine
"""

import json
import typer
from typing import NoReturn, Optional
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from machine.core import MachineError, canonicalize, state_hash
from machine.loader import load_machine, read_events
from machine.logging_config import get_logger
from machine.replay import replay

console = Console()


def _fail(message: str, json_output: bool, **extra) -> NoReturn:
    if json_output:
        print(json.dumps({"error": message, **extra}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)


def run_command(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Machine definition, e.g. machine.examples.users:machine"),
    events_path: str = typer.Option(..., "--events", "-e", help="Path to JSON Lines event file"),
    state_json: Optional[str] = typer.Option(None, "--state", help="Initial state as JSON"),
    until: Optional[int] = typer.Option(None, "--until", "-u", min=0, help="Apply at most N events"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay events through a machine and show the status trail.

    Examples:
        machine run machine.examples.users:machine --events events.jsonl
        machine run machine.examples.users:machine -e events.jsonl --until 2
        machine run machine.examples.users:machine -e events.jsonl --show-state --json
    """
    run_id = (ctx.obj or {}).get("run_id")
    logger = get_logger(__name__, run_id=run_id)

    initial_state = None
    if state_json is not None:
        try:
            initial_state = json.loads(state_json)
        except json.JSONDecodeError as e:
            _fail(f"Invalid --state JSON: {e.msg}", json_output)

    try:
        m = load_machine(target)
        events = read_events(events_path)
    except FileNotFoundError:
        logger.error("Event file not found: %s", events_path)
        _fail(f"Event file not found: {events_path}", json_output, path=events_path)
    except MachineError as e:
        logger.error("Cannot load run inputs: %s", e)
        _fail(str(e), json_output)

    logger.info("Replaying %d events through %s", len(events), target)
    result = replay(m, events, initial_state=initial_state, until=until)
    try:
        digest = state_hash(result.state)
    except TypeError as e:
        logger.error("Final state cannot be serialized: %s", e)
        _fail(f"Final state is not JSON serializable: {e}", json_output)
    logger.info("Replayed %d events, final status %r", result.applied, m.resolve_label(result.state))

    if json_output:
        output = {
            "success": True,
            "events_replayed": result.applied,
            "statuses": canonicalize(list(result.statuses)),
            "final_status": canonicalize(m.resolve_label(result.state)),
            "state_hash": digest,
        }
        if show_state:
            output["state"] = canonicalize(result.state)
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {result.applied} events[/green]")
    console.print(f"  Final status: [cyan]{m.resolve_label(result.state)}[/cyan]")
    console.print(f"  State hash: [yellow]{digest}[/yellow]")

    table = Table(title="Status Trail")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Event", style="green")
    table.add_column("Status", style="cyan")

    for idx, (ev, status) in enumerate(zip(events, result.statuses), start=1):
        table.add_row(str(idx), ev.type, str(status))

    console.print(table)

    if show_state:
        console.print("\n[bold]Final State:[/bold]")
        syntax = Syntax(json.dumps(canonicalize(result.state), indent=2), "json", theme="monokai")
        console.print(syntax)
