"""CLI command for creating or deleting a sample background document."""

import logging
from typing import Annotated

import typer
from rich.console import Console

from config.settings import get_settings
from contextmd.storage.sample import delete_document, write_sample_document

console = Console()
app = typer.Typer()


@app.command()
def sample(
    delete: Annotated[
        bool,
        typer.Option("--delete", help="Delete the background document instead of creating it"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing background document"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
):
    """Write a sample context.md to try the feature, or remove it."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    settings = get_settings()
    target = settings.context_path

    if delete:
        if not delete_document(target):
            console.print(f"[bold red]Could not delete {target}.[/bold red]")
            raise typer.Exit(1)
        console.print(f"Removed {target}")
        return

    written = write_sample_document(target, overwrite=force)
    if written is None:
        if target.exists():
            console.print(
                f"[bold yellow]{target} already exists.[/bold yellow] Use --force to overwrite it."
            )
        else:
            console.print(f"[bold red]Could not write {target}.[/bold red]")
        raise typer.Exit(1)

    console.print(f"[bold green]Sample context written to {written}[/bold green]")
