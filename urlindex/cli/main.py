"""
urlindex command-line interface.

Commands:
- init: Write a default configuration for a project
- scan: Show routing modules and their routes as a tree
- routes: List routes, optionally filtered
- snippet: Print the template snippet for one route
- watch: Re-index whenever a routing module changes
"""

from __future__ import annotations

import json
import time
from pathlib import Path

import click

from urlindex import __version__
from urlindex.cli._context import UrlIndexClickException, cli_workspace_scope
from urlindex.config import UrlIndexConfig, config_path, save_config
from urlindex.index.route_index import RescanResult
from urlindex.presentation.picker import build_choices, format_choice
from urlindex.presentation.tree import build_tree, render_tree
from urlindex.types.errors import ErrorCode, UrlIndexError, ValidationError
from urlindex.utils.logger import configure_logging
from urlindex.utils.serialization import serialize_to_primitives

path_argument = click.argument(
    "path", default=".", type=click.Path(exists=True, file_okay=False)
)


def _echo_json(data: object) -> None:
    click.echo(json.dumps(serialize_to_primitives(data), indent=2))


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="urlindex", message="urlindex v%(version)s")
@click.option("--debug", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """urlindex - Route Index for Django urls.py Files.

    Finds path() declarations and namespaced include() calls, and renders
    {% url %} snippets for them.
    """
    configure_logging(debug=debug)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@path_argument
@click.option("--force", is_flag=True, help="Overwrite an existing configuration.")
def init(path: str, force: bool) -> None:
    """Initialize urlindex configuration for a project."""
    target = config_path(path)
    if target.exists() and not force:
        click.echo(f"Configuration already exists: {target} (use --force to overwrite)")
        return
    try:
        written = save_config(path, UrlIndexConfig())
    except UrlIndexError as e:
        raise UrlIndexClickException(e) from e
    click.echo(f"urlindex initialized: {written}")


@cli.command()
@path_argument
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
def scan(path: str, as_json: bool) -> None:
    """Scan a project and show routes grouped by urls.py file."""
    with cli_workspace_scope(path) as service:
        snapshot = service.index.snapshot
        if as_json:
            _echo_json({"files": build_tree(snapshot), "namespaces": snapshot.namespaces})
            return
        if snapshot.is_empty:
            click.echo("No routes found.")
            return
        click.echo(render_tree(build_tree(snapshot)))
        click.echo(f"\n{snapshot.route_count} routes in {len(snapshot)} files")


@cli.command()
@path_argument
@click.option("--filter", "-f", "query", default=None, help="Match name, URL, or file.")
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
def routes(path: str, query: str | None, as_json: bool) -> None:
    """List all routes as a flat list."""
    with cli_workspace_scope(path) as service:
        choices = build_choices(service.index.snapshot, query)
        if as_json:
            _echo_json(choices)
            return
        if not choices:
            click.echo("No routes found.")
            return
        for choice in choices:
            click.echo(format_choice(choice))


@cli.command()
@path_argument
@click.option("--name", "-n", required=True, help="Route name.")
@click.option("--url", "url_path", default=None, help="URL pattern, to disambiguate.")
@click.option("--file", "file_label", default=None, help="File label, e.g. blog/urls.py.")
def snippet(path: str, name: str, url_path: str | None, file_label: str | None) -> None:
    """Print the {% url %} snippet for a route."""
    with cli_workspace_scope(path) as service:
        matches = service.index.find(name=name, url_path=url_path, file_label=file_label)
        if not matches:
            raise UrlIndexClickException(
                ValidationError(
                    f"No route named {name!r}",
                    user_message=f"No route named '{name}' was found.",
                    code=ErrorCode.ROUTE_NOT_FOUND,
                )
            )
        record, entry = matches[0]
        if len(matches) > 1:
            click.echo(
                f"Warning: {len(matches)} routes match; using {record.label}", err=True
            )
        click.echo(service.index.snippet_for(record.file_path, entry))


@cli.command()
@path_argument
def watch(path: str) -> None:
    """Start a file watcher and re-index on urls.py changes."""
    with cli_workspace_scope(path) as service:
        snapshot = service.index.snapshot
        click.echo(f"Indexed {snapshot.route_count} routes in {len(snapshot)} files")

        def on_refresh(result: RescanResult) -> None:
            for failure in result.failures:
                click.echo(f"Warning: skipped {failure.file_path}: {failure.error}", err=True)
            click.echo(
                f"Re-indexed: {result.snapshot.route_count} routes in "
                f"{len(result.snapshot)} files"
            )

        click.echo(f"Watching {Path(service.root)} (Ctrl+C to stop)")
        with service.watch(on_refresh):
            try:
                while True:
                    time.sleep(1.0)
            except KeyboardInterrupt:
                click.echo("Stopped.")


if __name__ == "__main__":
    cli()
