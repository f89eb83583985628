"""Click CLI for shardcache — inspect and populate a cache folder by hand."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from shardcache.cache.file_cache import SimpleFileCache
from shardcache.config.hierarchy import load_settings
from shardcache.config.schema import CacheSettings
from shardcache.errors.exceptions import ShardCacheError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: int) -> None:
    """Configure logging based on verbosity level."""
    level = default_level
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _open_cache(ctx: click.Context) -> SimpleFileCache:
    settings: CacheSettings = ctx.obj["settings"]
    return SimpleFileCache.from_folder(settings.root)


@click.group()
@click.version_option(package_name="shardcache")
@click.option("--root", type=click.Path(), default=None, help="Cache root folder.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, root: str | None, verbose: int) -> None:
    """shardcache — content-addressed file cache."""
    try:
        settings = load_settings(root=root)
    except ValidationError as e:
        error_console.print(f"[red]Invalid configuration:[/red] {e}")
        sys.exit(1)
    _setup_logging(verbose, settings.log_level_value)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command("path")
@click.argument("key")
@click.pass_context
def path_cmd(ctx: click.Context, key: str) -> None:
    """Print the file path that KEY is stored at."""
    cache = _open_cache(ctx)
    try:
        file = cache.file_path(key)
    except ShardCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    click.echo(file.as_str)


@cli.command()
@click.argument("key")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--text", type=str, default=None, help="Store this string instead of SOURCE.")
@click.pass_context
def put(ctx: click.Context, key: str, source: BinaryIO, text: str | None) -> None:
    """Store SOURCE (a file, or stdin) under KEY."""
    cache = _open_cache(ctx)
    data = text.encode("utf-8") if text is not None else source.read()
    try:
        cache.put(key, data)
    except ShardCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    logging.getLogger(__name__).info("Stored %d bytes under %r", len(data), key)


@cli.command()
@click.argument("key")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output file path.")
@click.pass_context
def get(ctx: click.Context, key: str, output: str | None) -> None:
    """Write the data stored under KEY to OUTPUT or stdout."""
    cache = _open_cache(ctx)
    try:
        data = cache.get(key)
    except ShardCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if data is None:
        error_console.print(f"[yellow]No entry for key:[/yellow] {key}")
        sys.exit(1)

    if output:
        Path(output).write_bytes(data)
        console.print(f"[green]Written to {output}[/green]")
    else:
        click.echo(data, nl=False)


@cli.command("config")
@click.pass_context
def config_cmd(ctx: click.Context) -> None:
    """Show the resolved configuration."""
    settings: CacheSettings = ctx.obj["settings"]

    table = Table(title="shardcache Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("root", str(settings.root))
    table.add_row("log_level", settings.log_level)

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
