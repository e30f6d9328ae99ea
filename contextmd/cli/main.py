"""contextmd CLI entry point."""

import typer

from contextmd.cli.chunks import chunks
from contextmd.cli.query import query
from contextmd.cli.sample import sample
from contextmd.cli.stats import stats

app = typer.Typer(
    name="contextmd",
    help="Background-document context retrieval - find the parts of your context.md that matter for a question.",
)

app.command(name="query")(query)
app.command(name="stats")(stats)
app.command(name="chunks")(chunks)
app.command(name="sample")(sample)


if __name__ == "__main__":
    app()
