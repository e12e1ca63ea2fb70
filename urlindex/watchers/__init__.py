"""Watchers module for routing module change detection."""

from urlindex.watchers.file_watcher import (
    FileChange,
    FileWatcher,
    RoutingModuleHandler,
    WatcherOptions,
)

__all__ = [
    "FileChange",
    "FileWatcher",
    "RoutingModuleHandler",
    "WatcherOptions",
]
