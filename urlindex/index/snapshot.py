"""Immutable index snapshots.

A snapshot is built once per rescan and never mutated afterwards. The
route index publishes a new one by swapping a single reference, so any
reader holding a snapshot sees one consistent generation.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from urlindex.extraction.types import RouteEntry
from urlindex.index.keys import display_label, subpath_key


@dataclass(frozen=True)
class FileRecord:
    """A routing module and its route entries, in source order."""

    file_path: str
    entries: tuple[RouteEntry, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError(f"FileRecord for {self.file_path} has no entries")

    @property
    def label(self) -> str:
        return display_label(self.file_path)

    @property
    def subpath_key(self) -> str:
        return subpath_key(self.file_path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "label": self.label,
            "entries": [e.to_dict() for e in self.entries],
        }


@dataclass(frozen=True)
class IndexSnapshot:
    """One published generation of the route index.

    Attributes:
        generation: 0 for the initial empty index, incremented per rescan.
        records: file path -> FileRecord, in scan order.
        namespaces: subpath key -> namespace, accumulated over all rescans.
    """

    generation: int = 0
    records: Mapping[str, FileRecord] = field(default_factory=lambda: MappingProxyType({}))
    namespaces: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(
        cls,
        generation: int,
        records: dict[str, FileRecord],
        namespaces: dict[str, str],
    ) -> IndexSnapshot:
        """Freeze freshly built tables into a snapshot."""
        return cls(
            generation=generation,
            records=MappingProxyType(dict(records)),
            namespaces=MappingProxyType(dict(namespaces)),
        )

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def route_count(self) -> int:
        return sum(len(r.entries) for r in self.records.values())

    def files(self) -> list[FileRecord]:
        return list(self.records.values())

    def entries_for(self, file_path: str) -> tuple[RouteEntry, ...]:
        """Entries of one file; empty for files not in the index."""
        record = self.records.get(file_path)
        return record.entries if record else ()

    def iter_routes(self) -> Iterator[tuple[FileRecord, RouteEntry]]:
        """Every (file, entry) pair, file order then source order."""
        for record in self.records.values():
            for entry in record.entries:
                yield record, entry

    def namespace_for(self, key: str) -> str | None:
        return self.namespaces.get(key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "generation": self.generation,
            "files": [r.to_dict() for r in self.records.values()],
            "namespaces": dict(self.namespaces),
        }
