"""CLI command for retrieving context for a question."""

import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from config.settings import get_settings
from contextmd.prompt.builder import estimate_tokens
from contextmd.service.factory import create_context_service

console = Console()
app = typer.Typer()


@app.command()
def query(
    question: Annotated[
        str,
        typer.Argument(help="The chat message to find background context for"),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print a JSON object instead of a panel"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
):
    """Show the context prompt that would be injected ahead of a question."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    settings = get_settings()
    service = create_context_service(settings)
    prompt = service.query_context(question)

    if as_json:
        payload = {
            "available": service.is_available(),
            "context": prompt,
            "estimated_tokens": estimate_tokens(prompt) if prompt else 0,
        }
        console.print_json(json.dumps(payload))
        return

    if prompt is None:
        console.print(
            "[bold yellow]No context available.[/bold yellow]\n"
            f"Create {service.context_file_path} or run 'contextmd sample' to try the feature."
        )
        raise typer.Exit(1)

    tokens = estimate_tokens(prompt)
    console.print(Panel(Text(prompt), title="Context prompt", border_style="green", padding=(1, 2)))
    console.print(f"[dim]~{tokens} tokens[/dim]")
    if tokens > service.config.max_context_tokens:
        console.print(
            f"[bold yellow]Warning:[/bold yellow] context exceeds the "
            f"{service.config.max_context_tokens}-token budget"
        )
