"""CLI for gqn."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console

from . import config, fragments, operations, parser, utils
from .nodes import Document, ValidationResult
from .report import emit, operation_node

app = typer.Typer(help="GraphQL query normalizer")
config_app = typer.Typer(help="Configuration operations")
app.add_typer(config_app, name="config")

console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_document(query_file: str, cfg: config.Config, expand: bool) -> Document:
    result = parser.parse(utils.read_text(query_file), cfg)
    if not result.ok:
        console.print(f"[red]Parse error: {result.error}[/red]")
        raise typer.Exit(1)
    if expand:
        return fragments.expand_document_fragments(result.document)
    return result.document


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "--config", help="Config file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Normalize GraphQL documents."""
    try:
        cfg = config.load(config_path)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    _configure_logging("DEBUG" if verbose else cfg.log_level)
    ctx.obj = cfg


@app.command("parse")
def parse_cmd(
    ctx: typer.Context,
    query_file: str = typer.Argument(..., help="GraphQL query file"),
    expand: bool = typer.Option(False, help="Inline fragment spreads"),
    output: str = typer.Option("console", help="Output format (console|json)"),
):
    """Parse a GraphQL document and print its simplified tree."""
    try:
        document = _load_document(query_file, ctx.obj, expand)
        emit(document, output)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if "--debug" in sys.argv:
            raise
        raise typer.Exit(1)


@app.command("operation")
def operation_cmd(
    ctx: typer.Context,
    query_file: str = typer.Argument(..., help="GraphQL query file"),
    output: str = typer.Option("console", help="Output format (console|json)"),
):
    """Print the root operation of a document with fragments inlined."""
    try:
        document = _load_document(query_file, ctx.obj, expand=True)
        operation = operations.find_operation(document)
        if operation is None:
            console.print("[red]No query or mutation provided[/red]")
            raise typer.Exit(1)
        emit(Document(nodes=(operation_node(operation),)), output)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if "--debug" in sys.argv:
            raise
        raise typer.Exit(1)


@app.command("validate")
def validate_cmd(
    ctx: typer.Context,
    query_file: str = typer.Argument(..., help="GraphQL query file"),
    schema: str = typer.Option(..., help="Schema file (SDL or introspection JSON)"),
    legacy_mutation_check: Optional[bool] = typer.Option(
        None,
        "--legacy-mutation-check/--no-legacy-mutation-check",
        help="Check mutations against the schema's query type (defaults to config)",
    ),
):
    """Check that the schema has a root type for the document's operation."""
    try:
        cfg = ctx.obj
        document = _load_document(query_file, cfg, expand=False)
        graphql_schema = parser.load_schema_file(schema)
        if legacy_mutation_check is None:
            legacy_mutation_check = cfg.legacy_mutation_check
        result = operations.validate(document, graphql_schema, legacy_mutation_check=legacy_mutation_check)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if "--debug" in sys.argv:
            raise
        raise typer.Exit(1)

    if result is ValidationResult.SUCCESS:
        console.print(f"[green]✓ {result.value}[/green]")
        return
    console.print(f"[yellow]✖ {result.value}[/yellow]")
    raise typer.Exit(2)


@config_app.command("init")
def config_init(
    path: Optional[str] = typer.Option(None, help="Output file path"),
):
    """Write an example config file."""
    try:
        written = config.create_example_config(path)
        console.print(f"[cyan]Config written to {written}[/cyan]")
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
