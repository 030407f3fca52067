"""idiom-snippets – CLI entry point."""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table

from idioms.config import check_style, load_settings
from idioms.logs import configure_logging
from idioms.snippets import (
    UnknownSnippetError,
    compare_styles,
    list_snippets,
    run_snippet,
    snippet_names,
)

app = typer.Typer(
    name="idioms",
    help="Run small snippets contrasting old and new ways of transforming data.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit log lines as JSON."),
) -> None:
    """Configure logging before any command runs."""
    settings = load_settings()
    configure_logging(
        verbose=verbose or settings.verbose,
        log_json=log_json or settings.log_json,
    )


@app.command("list")
def list_command() -> None:
    """List every snippet and its two styles."""
    table = Table(title="Snippets")
    table.add_column("Name", style="cyan")
    table.add_column("Style", style="magenta")
    table.add_column("Description", style="white")

    for snippet in list_snippets():
        table.add_row(snippet.name, snippet.style, snippet.description)

    console.print(table)


@app.command()
def run(
    name: str = typer.Argument(..., help="Snippet to run."),
    style: Optional[str] = typer.Option(None, "--style", "-s", help="old or new (defaults to IDIOMS_STYLE)."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Run one snippet and print its result."""
    try:
        chosen = check_style(style or load_settings(dotenv=False).style)
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)

    try:
        result = run_snippet(name, chosen)
    except UnknownSnippetError as exc:
        err_console.print(f"[red]{exc.args[0]}[/red]")
        err_console.print(f"Available: {', '.join(snippet_names())}")
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(json.dumps(result))
    else:
        console.print(Pretty(result))


@app.command()
def compare(
    name: Optional[str] = typer.Argument(None, help="Snippet to compare (default: all)."),
) -> None:
    """Run the old and new style of each snippet and check they agree."""
    names = [name] if name else snippet_names()
    if name and name not in snippet_names():
        err_console.print(f"[red]No snippet named {name!r}[/red]")
        raise typer.Exit(code=2)

    table = Table(title="Old vs New")
    table.add_column("Snippet", style="cyan")
    table.add_column("Result", style="white")
    table.add_column("Match", justify="center")

    mismatches = 0
    for snippet_name in names:
        comparison = compare_styles(snippet_name)
        status = "[green]PASS[/green]" if comparison.matches else "[red]FAIL[/red]"
        if not comparison.matches:
            mismatches += 1
        table.add_row(snippet_name, Pretty(comparison.new), status)

    console.print(table)
    _print_summary(len(names) - mismatches, mismatches)
    if mismatches:
        raise typer.Exit(code=1)


def _print_summary(matched: int, mismatched: int) -> None:
    """Print a coloured summary line after a comparison run."""
    parts: list[str] = []
    if matched:
        parts.append(f"[green]{matched} snippet(s) agree[/green]")
    if mismatched:
        parts.append(f"[red]{mismatched} snippet(s) differ[/red]")
    console.print(" | ".join(parts) if parts else "[dim]Nothing to do.[/dim]")


if __name__ == "__main__":
    app()
