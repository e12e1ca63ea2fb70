"""File watcher for routing modules.

Wraps a watchdog Observer. Events for matching files are collected and
delivered in one batch after a quiet period, so saving several files (or a
single save that fires several events) triggers one rescan.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from urlindex.constants import DEFAULT_DEBOUNCE_SECONDS, DEFAULT_IGNORE_DIRS, URLS_FILE_NAME
from urlindex.utils.logger import logger


@dataclass
class WatcherOptions:
    """Which files to watch and how long to wait before reporting."""

    file_name: str = URLS_FILE_NAME
    ignored: list[str] = field(default_factory=lambda: sorted(DEFAULT_IGNORE_DIRS))
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    recursive: bool = True


@dataclass(frozen=True)
class FileChange:
    """A change to a watched file."""

    path: str
    event_type: str


class RoutingModuleHandler(FileSystemEventHandler):
    """Collects events for routing modules and delivers them debounced."""

    def __init__(
        self,
        on_changes: Callable[[list[FileChange]], None],
        options: Optional[WatcherOptions] = None,
        accept: Optional[Callable[[str], bool]] = None,
        root: Optional[str | Path] = None,
    ):
        """Initialize the handler.

        Args:
            on_changes: Called with the batch of changes after the debounce
                window. Runs on a timer thread.
            options: Watch options.
            accept: Extra path filter applied after the file name check.
            root: Watched directory. Ignored directory names are only
                checked below it.
        """
        super().__init__()
        self.on_changes = on_changes
        self.options = options or WatcherOptions()
        self._accept = accept
        self._root = Path(root) if root is not None else None
        self._ignored = set(self.options.ignored)
        self._lock = threading.Lock()
        self._pending: dict[str, FileChange] = {}
        self._timer: Optional[threading.Timer] = None

    def should_process(self, path: str) -> bool:
        """Check if a path is a watched routing module."""
        candidate = Path(path)
        if candidate.name != self.options.file_name:
            return False
        if any(part in self._ignored for part in self._relative_parts(candidate)[:-1]):
            return False
        return self._accept(path) if self._accept is not None else True

    def _relative_parts(self, candidate: Path) -> tuple[str, ...]:
        if self._root is not None and candidate.is_relative_to(self._root):
            return candidate.relative_to(self._root).parts
        return candidate.parts

    def _record(self, path: str, event_type: str) -> None:
        if not self.should_process(path):
            return
        with self._lock:
            self._pending[path] = FileChange(path=path, event_type=event_type)
            if self.options.debounce_seconds <= 0:
                deliver_now = True
            else:
                deliver_now = False
                if self._timer is not None:
                    self._timer.cancel()
                self._timer = threading.Timer(self.options.debounce_seconds, self.flush)
                self._timer.daemon = True
                self._timer.start()
        if deliver_now:
            self.flush()

    def flush(self) -> list[FileChange]:
        """Deliver pending changes immediately. Returns what was delivered."""
        with self._lock:
            changes = list(self._pending.values())
            self._pending.clear()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

        if changes:
            try:
                self.on_changes(changes)
            except Exception as e:
                logger.warning(f"Error in file change callback: {e}")
        return changes

    def cancel(self) -> None:
        """Drop pending changes and stop the debounce timer."""
        with self._lock:
            self._pending.clear()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._record(os.fsdecode(event.src_path), "created")

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._record(os.fsdecode(event.src_path), "modified")

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._record(os.fsdecode(event.src_path), "deleted")

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        self._record(os.fsdecode(event.src_path), "deleted")
        dest = getattr(event, "dest_path", "")
        if dest:
            self._record(os.fsdecode(dest), "created")


class FileWatcher:
    """Watches a directory tree for routing module changes.

    Usage:
        with FileWatcher(root, lambda changes: service.refresh()):
            ...  # runs until the block exits
    """

    def __init__(
        self,
        root: str | Path,
        on_changes: Callable[[list[FileChange]], None],
        options: Optional[WatcherOptions] = None,
        accept: Optional[Callable[[str], bool]] = None,
    ):
        self._root = Path(root)
        self._options = options or WatcherOptions()
        self._handler = RoutingModuleHandler(
            on_changes, self._options, accept=accept, root=self._root
        )
        self._observer: Optional[Observer] = None

    @property
    def handler(self) -> RoutingModuleHandler:
        return self._handler

    @property
    def is_running(self) -> bool:
        return self._observer is not None

    def start(self) -> None:
        """Start watching. No-op when already running."""
        if self._observer is not None:
            return
        observer = Observer()
        observer.schedule(self._handler, str(self._root), recursive=self._options.recursive)
        observer.start()
        self._observer = observer
        logger.debug(f"Watching {self._root} for {self._options.file_name} changes")

    def stop(self) -> None:
        """Stop watching and discard pending changes."""
        observer = self._observer
        if observer is None:
            return
        self._observer = None
        observer.stop()
        observer.join()
        self._handler.cancel()
        logger.debug(f"Stopped watching {self._root}")

    def __enter__(self) -> FileWatcher:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
