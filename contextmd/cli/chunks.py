"""CLI command for inspecting chunk boundaries."""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config.settings import get_settings
from contextmd.service.factory import create_context_service

console = Console()
app = typer.Typer()


@app.command()
def chunks(
    section: Annotated[
        Optional[str],
        typer.Option("--section", "-s", help="Only show chunks whose section title contains this text"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
):
    """List the chunks built from the background document."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    settings = get_settings()
    service = create_context_service(settings)

    if not service.refresh():
        console.print(f"[bold red]No usable context file at {service.context_file_path}.[/bold red]")
        raise typer.Exit(1)

    selected = service.state.chunks
    if section:
        needle = section.lower()
        selected = tuple(c for c in selected if c.section_title and needle in c.section_title.lower())

    table = Table(title=f"{len(selected)} of {len(service.state.chunks)} chunks")
    table.add_column("#", justify="right")
    table.add_column("Section")
    table.add_column("Words", justify="right")
    table.add_column("Keywords")

    for chunk in selected:
        table.add_row(
            str(chunk.chunk_index),
            escape(chunk.section_title or "(no section)"),
            str(chunk.word_count),
            ", ".join(chunk.keywords[:8]),
        )

    console.print(table)
