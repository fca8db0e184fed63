"""Command-line interface: plant, water and view a root."""

from __future__ import annotations

import logging
from typing import Optional

import click

from .config import ConfigError, growth_settings, record_path, resolve_grid_size
from .logging_config import setup_logging
from .render import render_tree
from .root import DEFAULT_NAME, Root
from .storage import RootStore, StorageError


def _store() -> RootStore:
    try:
        return RootStore(record_path())
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Log growth details to stderr.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also append logs to this file.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_file: Optional[str]) -> None:
    """Grow a tree in your terminal. Be patient and watch it grow."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)
    if ctx.invoked_subcommand is None:
        click.echo("Error: Missing command! See: `roots help`", err=True)
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)


@cli.command()
@click.argument("name", required=False, default=DEFAULT_NAME)
def plant(name: str) -> None:
    """Plant a new root, replacing any existing one."""
    store = _store()
    root = Root.new(name)
    try:
        path = store.save(root)
    except StorageError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"New root planted at {path}")
    click.echo("Be patient and watch it grow.")


@cli.command()
def water() -> None:
    """Water the root."""
    store = _store()
    try:
        root = store.load()
        root.water()
        store.save(root)
    except StorageError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f'You watered "{root.name}".')


@cli.command()
@click.argument("mode", required=False, type=click.Choice(["rand"]))
@click.option("--width", type=click.IntRange(min=1), default=None, help="Grid width in columns.")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Grid height in rows.")
@click.option("--color/--no-color", default=True, help="Colour the tree with ANSI escapes.")
def view(mode: Optional[str], width: Optional[int], height: Optional[int], color: bool) -> None:
    """Draw the tree as it stands now. `view rand` grows it from a fresh seed."""
    store = _store()
    try:
        root = store.load()
        size = resolve_grid_size(width, height)
        settings = growth_settings()
    except (StorageError, ConfigError) as exc:
        raise click.ClickException(str(exc)) from exc

    if mode == "rand":
        root.randomize_seed()

    tree = root.generate(size.width, size.height, settings=settings)
    click.echo(render_tree(tree, root.name, root.seed, colour=color), color=color)


@cli.command("help")
@click.pass_context
def help_(ctx: click.Context) -> None:
    """Show this message."""
    click.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())


def main() -> None:
    cli(prog_name="roots")
