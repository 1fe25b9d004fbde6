"""Main CLI for Pagination Sequence."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .models import PaginationArgs, PaginationItem
from .output import format_response, render_cli, render_sequence, sequence_payload
from .seq_config import ConfigError, SequenceContext, create_config, resolve_context
from .sequence import InvalidArgumentError, create_pagination, validate_args

app = typer.Typer(
    name="pagination-sequence",
    help="Pagination Sequence - compact page-link sequences with ellipsis gaps",
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def get_context(path: Optional[Path] = None) -> SequenceContext:
    """Resolve display parameters or exit with error."""
    try:
        return resolve_context(path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def resolve_display(
    edges: Optional[int],
    neighbors: Optional[int],
    path: Optional[Path],
) -> tuple[int, int]:
    """Fill in display parameters not given on the command line."""
    if edges is None or neighbors is None:
        context = get_context(path)
        edges = context.edges if edges is None else edges
        neighbors = context.neighbors if neighbors is None else neighbors
    return edges, neighbors


def build_items(args: PaginationArgs) -> list[PaginationItem]:
    """Build one sequence, exiting on invalid input."""
    try:
        return create_pagination(args)
    except InvalidArgumentError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def render_items(args: PaginationArgs, items: list[PaginationItem]) -> str:
    """Render a sequence with the clamped current page highlighted."""
    return render_sequence(items, min(args.page, args.pages), width=max(2, len(str(args.pages))))


def respond(payload, output_format: str, text_renderer=None) -> dict:
    """Format a payload or exit on an unknown output format."""
    try:
        return format_response(payload, output_format, text_renderer)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


# ============================================================================
# Sequence Commands
# ============================================================================


@app.command("show")
def show_sequence(
    page: int = typer.Argument(..., help="Current page"),
    pages: int = typer.Argument(..., help="Total number of pages"),
    edges: Optional[int] = typer.Option(None, "--edges", "-e", help="Pages pinned at each end"),
    neighbors: Optional[int] = typer.Option(None, "--neighbors", "-n", help="Pages shown around the current page"),
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Directory to resolve config from"),
    output_format: str = typer.Option("text", "--format", "-f", help="Output format (text|json)"),
):
    """Show the pagination sequence for one page.

    Display parameters not given on the command line come from
    .pagination/config.json, the user config, or the defaults.
    """
    edges, neighbors = resolve_display(edges, neighbors, path)
    args = PaginationArgs(page=page, pages=pages, edges=edges, neighbors=neighbors)
    items = build_items(args)

    data = {**args.to_dict(), "items": sequence_payload(items)}
    response = respond(data, output_format, text_renderer=lambda _: render_items(args, items))
    console.print(render_cli(response), markup=False, highlight=False, soft_wrap=True)


@app.command("table")
def show_table(
    pages: int = typer.Argument(..., help="Total number of pages"),
    edges: Optional[int] = typer.Option(None, "--edges", "-e", help="Pages pinned at each end"),
    neighbors: Optional[int] = typer.Option(None, "--neighbors", "-n", help="Pages shown around the current page"),
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Directory to resolve config from"),
):
    """Show the sequence for every page from 1 to PAGES, one per line."""
    edges, neighbors = resolve_display(edges, neighbors, path)

    try:
        validate_args(1, pages, edges, neighbors)
    except InvalidArgumentError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    for page in range(1, pages + 1):
        args = PaginationArgs(page=page, pages=pages, edges=edges, neighbors=neighbors)
        console.print(render_items(args, build_items(args)), markup=False, highlight=False, soft_wrap=True)


# ============================================================================
# Config Commands
# ============================================================================


@app.command("context")
def show_context(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Path to check context for"),
    output_format: str = typer.Option("text", "--format", "-f", help="Output format (text|json)"),
):
    """Show the resolved display parameters and where they came from."""
    context = get_context(path or Path.cwd())

    def text(data: dict) -> str:
        lines = [f"Display parameters (from {data['config_source']}):"]
        lines.append(f"  Config: {data['config_path'] or 'none'}")
        lines.append(f"  Edges: {data['edges']}")
        lines.append(f"  Neighbors: {data['neighbors']}")
        if data["env_overrides"]:
            lines.append(f"  Overridden by: {', '.join(data['env_overrides'])}")
        return "\n".join(lines)

    response = respond(context.to_dict(), output_format, text_renderer=text)
    console.print(render_cli(response), markup=False, highlight=False, soft_wrap=True)


@app.command("init")
def init_config(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Directory to initialize"),
    edges: Optional[int] = typer.Option(None, "--edges", "-e", help="Default edge count"),
    neighbors: Optional[int] = typer.Option(None, "--neighbors", "-n", help="Default neighbor count"),
    force: bool = typer.Option(False, "--force", help="Overwrite without asking"),
):
    """Initialize .pagination/config.json in current or specified directory."""
    target_path = Path(path) if path else Path.cwd()

    if not target_path.exists():
        console.print(f"[red]Error:[/red] Directory not found: {target_path}")
        raise typer.Exit(1)

    existing_config = target_path / ".pagination" / "config.json"
    if existing_config.exists() and not force:
        if not typer.confirm(f"Config already exists at {existing_config}. Overwrite?"):
            raise typer.Exit(0)

    try:
        config_path = create_config(target_path, edges=edges, neighbors=neighbors)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Created[/green] {config_path}")


if __name__ == "__main__":
    app()
