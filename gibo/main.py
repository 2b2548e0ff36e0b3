"""
gibo — CLI Entry Point

Usage:
    gibo dump Python macOS >> .gitignore
    gibo list [--json]
    gibo update
    gibo root
    gibo version
"""

from __future__ import annotations

import io
import json
import sys
from typing import List, NoReturn, Tuple

import click
from click.shell_completion import CompletionItem

from . import __version__
from .errors import BoilerplateNotFoundError, GiboError, MirrorEnvironmentError
from .logging_config import setup_logging
from .mirror.config import MirrorSettings
from .server import BoilerplateServer


def _fail(message: str) -> NoReturn:
    click.secho(message, fg="red", err=True)
    raise SystemExit(1)


def get_server(ctx: click.Context) -> BoilerplateServer:
    """Build the server once per invocation; a missing cache dir ends the process."""
    if "server" not in ctx.obj:
        try:
            settings = MirrorSettings.from_env()
        except MirrorEnvironmentError as e:
            _fail(e.message)
        ctx.obj["server"] = BoilerplateServer(settings)
    return ctx.obj["server"]


def _complete_names(ctx: click.Context, param: click.Parameter, incomplete: str) -> List[CompletionItem]:
    try:
        server = BoilerplateServer(MirrorSettings.from_env())
    except MirrorEnvironmentError:
        return []
    prefix = incomplete.lower()
    return [
        CompletionItem(name)
        for name in server.list_names()
        if name.lower().startswith(prefix)
    ]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log git and mirror activity to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """gibo — fast access to .gitignore boilerplates."""
    setup_logging(level="DEBUG" if verbose else None)
    ctx.ensure_object(dict)


@cli.command()
@click.argument("names", nargs=-1, required=True, shell_complete=_complete_names)
@click.pass_context
def dump(ctx: click.Context, names: Tuple[str, ...]) -> None:
    """Print one or more boilerplates to stdout."""
    server = get_server(ctx)
    out = sys.stdout.buffer

    printed = 0
    missing = []
    for name in names:
        # Render first so a missing name leaves no separator behind
        rendered = io.BytesIO()
        try:
            server.fetch_and_render(name, rendered)
        except BoilerplateNotFoundError as e:
            click.echo(str(e), err=True)
            missing.append(name)
            continue
        except GiboError as e:
            _fail(f"Error: {e.message}")

        if printed:
            out.write(b"\n")
        out.write(rendered.getvalue())
        out.flush()
        printed += 1

    if missing:
        raise SystemExit(1)


@cli.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as a JSON array")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List available boilerplates."""
    names = get_server(ctx).list_names()

    if as_json:
        click.echo(json.dumps(names, indent=2))
        return

    for name in names:
        click.echo(name)


@cli.command()
@click.pass_context
def update(ctx: click.Context) -> None:
    """Update the boilerplate mirror from GitHub."""
    server = get_server(ctx)
    try:
        message = server.refresh_mirror()
    except GiboError as e:
        _fail(f"Error: {e.message}")
    click.echo(message)


@cli.command()
@click.pass_context
def root(ctx: click.Context) -> None:
    """Show the directory where boilerplates are cached."""
    click.echo(str(get_server(ctx).mirror_root))


@cli.command()
def version() -> None:
    """Show the gibo version."""
    click.echo(f"gibo {__version__}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
