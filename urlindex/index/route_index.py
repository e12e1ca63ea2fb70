"""Route index: rescans, snapshots, and queries.

The index owns one IndexSnapshot at a time. ``rescan`` builds the next
snapshot off to the side and publishes it with a single reference swap,
then notifies observers exactly once. Queries read whichever snapshot is
current when they are called.
"""

from __future__ import annotations

import contextvars
import threading
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from urlindex.constants import DEFAULT_MAX_WORKERS
from urlindex.extraction.protocols import RouteExtractor
from urlindex.extraction.regex_backend import RegexRouteExtractor
from urlindex.extraction.types import RouteEntry
from urlindex.index.snapshot import FileRecord, IndexSnapshot
from urlindex.index.snippets import SnippetGenerator
from urlindex.types.errors import UrlIndexError
from urlindex.utils.error_classifier import ErrorCategory, classify_error
from urlindex.utils.logger import generate_request_id, logger, with_correlation_id

if TYPE_CHECKING:
    from urlindex.presentation.tree import TreeNode

Reader = Callable[[str], str]
Observer = Callable[[], None]


@dataclass(frozen=True)
class ScanFailure:
    """A file that could not be read during a rescan."""

    file_path: str
    error: str
    category: ErrorCategory
    retryable: bool

    @classmethod
    def from_exception(cls, file_path: str, error: BaseException) -> ScanFailure:
        classification = classify_error(error)
        return cls(
            file_path=file_path,
            error=f"{type(error).__name__}: {error}",
            category=classification.category,
            retryable=classification.is_retryable,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "error": self.error,
            "category": self.category.value,
            "retryable": self.retryable,
        }


@dataclass(frozen=True)
class RescanResult:
    """Outcome of one rescan."""

    snapshot: IndexSnapshot
    failures: tuple[ScanFailure, ...] = ()
    scanned: int = 0
    elapsed_ms: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        return {
            "generation": self.snapshot.generation,
            "files": len(self.snapshot),
            "routes": self.snapshot.route_count,
            "scanned": self.scanned,
            "failures": [f.to_dict() for f in self.failures],
            "elapsed_ms": self.elapsed_ms,
        }


def route_matches(record: FileRecord, entry: RouteEntry, query: str) -> bool:
    """Case-insensitive substring match on name, URL path, or file label."""
    needle = query.lower()
    return (
        needle in entry.name.lower()
        or needle in entry.url_path.lower()
        or needle in record.label.lower()
    )


class RouteIndex:
    """Index of routes across a set of routing modules.

    Usage:
        index = RouteIndex()
        index.subscribe(lambda: print("changed"))
        index.rescan(find_urls_files(root), read_source)
        for record, entry in index.routes("blog"):
            print(index.snippet_for(record.file_path, entry))

    Thread safety: rescans are serialized by a re-entrant lock; a rescan
    requested from another thread waits for the running one to finish. An
    observer may call ``rescan`` itself; that rescan runs to completion and
    its notification follows the current one. Reads never lock.
    """

    def __init__(
        self,
        extractor: Optional[RouteExtractor] = None,
        snippet_generator: Optional[SnippetGenerator] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._extractor = extractor or RegexRouteExtractor()
        self._snippets = snippet_generator or SnippetGenerator()
        self._max_workers = max(1, max_workers)
        self._snapshot = IndexSnapshot()
        self._rescan_lock = threading.RLock()
        self._pending_notifications = 0
        self._notifying = False
        self._observers: list[Observer] = []
        self._observers_lock = threading.Lock()

    @property
    def snapshot(self) -> IndexSnapshot:
        """The currently published snapshot."""
        return self._snapshot

    @property
    def extractor(self) -> RouteExtractor:
        return self._extractor

    # ================================================================
    # Observers
    # ================================================================

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a change observer. Returns a function that unsubscribes it.

        Observers are called with no arguments once per rescan, after the
        new snapshot is published. They should re-read the index.
        """
        with self._observers_lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._observers_lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _dispatch_notifications(self) -> None:
        """Run one observer round per pending publish, oldest first.

        Called with the rescan lock held. A rescan started by an observer
        publishes its snapshot immediately, but its round is queued until the
        round in progress has finished.
        """
        if self._notifying:
            return
        self._notifying = True
        try:
            while self._pending_notifications:
                self._pending_notifications -= 1
                self._notify()
        finally:
            self._notifying = False

    def _notify(self) -> None:
        with self._observers_lock:
            observers = list(self._observers)
        for observer in observers:
            try:
                observer()
            except Exception as e:
                logger.warning(f"Index observer {observer!r} failed: {e}")

    # ================================================================
    # Rescan
    # ================================================================

    def rescan(self, files: Iterable[str], reader: Reader) -> RescanResult:
        """Rebuild the index from ``files``.

        Files not in ``files`` drop out of the index. Files that fail to read
        are logged, reported in the result, and skipped. Namespace bindings
        are merged into the table carried over from the previous snapshot.

        Args:
            files: Routing module paths to scan.
            reader: Returns the text of a file; may raise per file.

        Returns:
            RescanResult with the published snapshot and any read failures.
        """
        paths = list(dict.fromkeys(files))

        with self._rescan_lock:
            with with_correlation_id(generate_request_id(), operation="rescan"):
                start = time.monotonic()
                previous = self._snapshot
                logger.debug(
                    f"Rescanning {len(paths)} files (generation {previous.generation + 1})"
                )

                records: dict[str, FileRecord] = {}
                namespaces: dict[str, str] = dict(previous.namespaces)
                failures: list[ScanFailure] = []

                for path, text, failure in self._read_all(paths, reader):
                    if failure is not None:
                        failures.append(failure)
                        continue
                    result = self._extractor.extract_all(text)
                    namespaces.update(result.namespaces)
                    if result.has_routes:
                        records[path] = FileRecord(file_path=path, entries=result.entries)

                snapshot = IndexSnapshot.build(previous.generation + 1, records, namespaces)
                self._snapshot = snapshot
                elapsed_ms = int((time.monotonic() - start) * 1000)

                logger.debug(
                    f"Indexed {snapshot.route_count} routes in {len(snapshot)} files "
                    f"({len(failures)} failures, {elapsed_ms}ms)"
                )
                self._pending_notifications += 1
                self._dispatch_notifications()

        return RescanResult(
            snapshot=snapshot,
            failures=tuple(failures),
            scanned=len(paths),
            elapsed_ms=elapsed_ms,
        )

    def _read_all(
        self, paths: list[str], reader: Reader
    ) -> list[tuple[str, str, Optional[ScanFailure]]]:
        """Read all files concurrently; results come back in input order."""
        if not paths:
            return []
        workers = min(self._max_workers, len(paths))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="urlindex-read") as pool:
            futures = [
                pool.submit(contextvars.copy_context().run, self._read_one, path, reader)
                for path in paths
            ]
            return [future.result() for future in futures]

    @staticmethod
    def _read_one(path: str, reader: Reader) -> tuple[str, str, Optional[ScanFailure]]:
        try:
            return path, reader(path), None
        except (OSError, UnicodeDecodeError, UrlIndexError) as e:
            logger.warning(f"Error reading {path}: {e}")
            return path, "", ScanFailure.from_exception(path, e)
        except Exception as e:
            logger.opt(exception=e).error(f"Unexpected error reading {path}")
            return path, "", ScanFailure.from_exception(path, e)

    # ================================================================
    # Queries
    # ================================================================

    def files(self) -> list[FileRecord]:
        """Indexed files, in scan order."""
        return self._snapshot.files()

    def entries_for(self, file_path: str) -> tuple[RouteEntry, ...]:
        """Entries of one file; empty when the file is not indexed."""
        return self._snapshot.entries_for(file_path)

    def children(self, node: Optional[TreeNode] = None) -> list[TreeNode]:
        """Tree view: files at the top level, their routes below."""
        from urlindex.presentation.tree import get_children

        return get_children(self._snapshot, node)

    def routes(self, query: Optional[str] = None) -> list[tuple[FileRecord, RouteEntry]]:
        """Every (file, entry) pair, optionally filtered by ``query``."""
        pairs = self._snapshot.iter_routes()
        if not query:
            return list(pairs)
        return [(record, entry) for record, entry in pairs if route_matches(record, entry, query)]

    def find(
        self,
        name: Optional[str] = None,
        url_path: Optional[str] = None,
        file_label: Optional[str] = None,
    ) -> list[tuple[FileRecord, RouteEntry]]:
        """Routes whose fields equal every given criterion."""
        return [
            (record, entry)
            for record, entry in self._snapshot.iter_routes()
            if (name is None or entry.name == name)
            and (url_path is None or entry.url_path == url_path)
            and (file_label is None or record.label == file_label)
        ]

    def snippet_for(
        self,
        file_path: str,
        entry: RouteEntry,
        snapshot: Optional[IndexSnapshot] = None,
    ) -> str:
        """Render the snippet for ``entry``, owned by ``file_path``."""
        snap = snapshot if snapshot is not None else self._snapshot
        return self._snippets.render_for_file(file_path, entry, snap.namespaces)
