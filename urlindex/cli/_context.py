"""CLI service context.

All CLI commands that need the index should use ``cli_workspace_scope(path)``
instead of building services directly. It loads the project config, runs
the initial refresh, reports unreadable files on STDERR, and turns
urlindex errors into click errors.
"""

from __future__ import annotations

import contextlib
from collections.abc import Generator

import click

from urlindex.index.route_index import RescanResult
from urlindex.services.workspace_service import WorkspaceService
from urlindex.types.errors import UrlIndexError


class UrlIndexClickException(click.ClickException):
    """ClickException carrying the formatted urlindex error."""

    def __init__(self, error: UrlIndexError) -> None:
        super().__init__(error.get_formatted_message())
        self.error = error

    def format_message(self) -> str:
        return self.message


def report_failures(result: RescanResult) -> None:
    for failure in result.failures:
        click.echo(f"Warning: skipped {failure.file_path}: {failure.error}", err=True)


@contextlib.contextmanager
def cli_workspace_scope(path: str, refresh: bool = True) -> Generator[WorkspaceService, None, None]:
    """Context manager providing a refreshed WorkspaceService."""
    try:
        service = WorkspaceService(path)
        if refresh:
            report_failures(service.refresh())
        yield service
    except UrlIndexError as e:
        raise UrlIndexClickException(e) from e
