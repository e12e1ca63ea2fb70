"""Workspace service: one project root, its config, and its route index."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from urlindex.config import UrlIndexConfig, load_config
from urlindex.discovery import find_urls_files, read_source, should_skip_dir
from urlindex.extraction.regex_backend import RegexRouteExtractor
from urlindex.index.route_index import RescanResult, RouteIndex
from urlindex.index.snippets import SnippetGenerator
from urlindex.utils.logger import logger

if TYPE_CHECKING:
    from urlindex.watchers.file_watcher import FileChange, FileWatcher


class WorkspaceService:
    """Coordinates discovery, reading, and indexing for a project root.

    Provides:
    - Index construction from the project's configuration
    - Full refresh (discover + rescan)
    - File watching that triggers debounced refreshes
    """

    def __init__(
        self,
        root: str | Path,
        config: Optional[UrlIndexConfig] = None,
        index: Optional[RouteIndex] = None,
    ):
        """Initialize the workspace.

        Args:
            root: Project root directory.
            config: Settings; loaded from ``<root>/.urlindex/config.json``
                when omitted.
            index: Route index to populate; built from ``config`` when omitted.
        """
        self._root = Path(root).resolve()
        self._config = config if config is not None else load_config(self._root)
        self._index = index or RouteIndex(
            extractor=RegexRouteExtractor(urlpatterns_only=self._config.urlpatterns_only),
            snippet_generator=SnippetGenerator(self._config.snippet_template),
            max_workers=self._config.max_workers,
        )

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config(self) -> UrlIndexConfig:
        return self._config

    @property
    def index(self) -> RouteIndex:
        return self._index

    def discover(self) -> list[str]:
        """Routing modules currently under the root."""
        return find_urls_files(self._root, self._config.file_name, self._config.ignored)

    def refresh(self) -> RescanResult:
        """Discover routing modules and rescan them."""
        result = self._index.rescan(self.discover(), read_source)
        for failure in result.failures:
            logger.info(f"Skipped {failure.file_path} ({failure.category.value})")
        return result

    def is_routing_module(self, path: str | Path) -> bool:
        """Whether a change to ``path`` can affect the index."""
        candidate = Path(path)
        if candidate.name != self._config.file_name:
            return False
        try:
            relative = candidate.resolve().relative_to(self._root)
        except ValueError:
            return False
        ignored = set(self._config.ignored)
        return not any(should_skip_dir(part, ignored) for part in relative.parts[:-1])

    def watch(
        self, on_refresh: Optional[Callable[[RescanResult], None]] = None
    ) -> FileWatcher:
        """Create a watcher that refreshes the index on routing module changes.

        The watcher is returned unstarted; call ``start()`` or use it as a
        context manager.
        """
        from urlindex.watchers.file_watcher import FileWatcher, WatcherOptions

        def handle(changes: list[FileChange]) -> None:
            logger.debug(f"{len(changes)} routing module change(s), refreshing")
            result = self.refresh()
            if on_refresh is not None:
                on_refresh(result)

        options = WatcherOptions(
            file_name=self._config.file_name,
            ignored=list(self._config.ignored),
            debounce_seconds=self._config.debounce_seconds,
        )
        return FileWatcher(self._root, handle, options, accept=self.is_routing_module)
