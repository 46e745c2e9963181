"""
Build commands for themegen CLI.

- build: Generate theme CSS (and the variable syntax snippet)
- inspect: Summarise collections and modes in a token document
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from themegen.core.collection_processor import process_token_document
from themegen.core.errors import ThemegenError
from themegen.core.pipeline import run_build
from themegen.core.sources import JsonFileSource, read_json

from .utils import configure_logging, resolve_manifest

console = Console()
err_console = Console(stderr=True)


def build_command(
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to themegen.toml (default: ./themegen.toml or built-in preset)",
    ),
    tokens: Path | None = typer.Option(
        None,
        "--tokens",
        help="Token JSON (W3C design token format)",
    ),
    styles: Path | None = typer.Option(
        None,
        "--styles",
        help="Style JSON exported from the design tool",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="CSS file to write",
    ),
    snippet: Path | None = typer.Option(
        None,
        "--snippet",
        help="Where to write the variable code syntax snippet",
    ),
    no_snippet: bool = typer.Option(
        False,
        "--no-snippet",
        help="Don't write the variable code syntax snippet",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Generate theme CSS from token and style JSON.

    Examples:
        themegen build                              # Use ./themegen.toml
        themegen build --tokens tokens.json -o theme.css
        themegen build -c tokens/themegen.toml --no-snippet
    """
    configure_logging(verbose)
    try:
        manifest = resolve_manifest(config)
        paths = dataclasses.replace(
            manifest.paths,
            tokens=tokens or manifest.paths.tokens,
            styles=styles or manifest.paths.styles,
            output=output or manifest.paths.output,
            snippet=None if no_snippet else (snippet or manifest.paths.snippet),
        )
        manifest = dataclasses.replace(manifest, paths=paths)
        result = run_build(manifest, JsonFileSource(paths.tokens, paths.styles))
    except ThemegenError as e:
        err_console.print(f"[red]Build failed: {e}[/red]")
        raise typer.Exit(code=1)

    for key in result.skipped:
        console.print(f"[yellow]Skipped collection '{key}' (not in token document)[/yellow]")
    for key in result.auto_configured:
        console.print(f"[yellow]Collection '{key}' built with default settings[/yellow]")
    for path in result.written:
        console.print(f"Wrote {path}")
    console.print("[green]Done![/green]")


def inspect_command(
    tokens: Path = typer.Argument(..., help="Token JSON to inspect"),  # noqa: B008
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to themegen.toml",
    ),
) -> None:
    """
    Show the collections, modes and token counts a build would produce.
    """
    configure_logging()
    try:
        manifest = resolve_manifest(config)
        processed = process_token_document(
            read_json(tokens), manifest.collections, manifest.build
        )
    except ThemegenError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Collections in {tokens.name}")
    table.add_column("Collection")
    table.add_column("Modes")
    table.add_column("Tokens", justify="right")
    for key, collection in processed.collections.items():
        table.add_row(key, ", ".join(collection.modes), str(len(collection.first_mode())))
    console.print(table)

    for key in processed.skipped:
        console.print(f"[yellow]Not in document: {key}[/yellow]")
