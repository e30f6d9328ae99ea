"""CLI command for showing the state of the background document."""

import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config.settings import get_settings
from contextmd.service.factory import create_context_service

console = Console()
app = typer.Typer()


@app.command()
def stats(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print a JSON object instead of a table"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
):
    """Load the background document and report whether context is available."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    settings = get_settings()
    service = create_context_service(settings)
    service.refresh()
    result = service.stats()

    if as_json:
        payload = result.to_dict()
        payload["path"] = service.context_file_path
        console.print_json(json.dumps(payload))
        return

    table = Table(title="contextmd")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    status = "[green]available[/green]" if result.available else "[red]unavailable[/red]"
    table.add_row("Status", status)
    table.add_row("Path", escape(service.context_file_path))
    table.add_row("Chunks", str(result.chunk_count))
    table.add_row("Size", f"{result.file_size_bytes} bytes")
    table.add_row("Last modified", result.last_modified.isoformat() if result.last_modified else "-")
    table.add_row("Last refreshed", result.last_refreshed.isoformat() if result.last_refreshed else "-")

    console.print(table)
