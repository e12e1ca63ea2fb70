"""Flat route list for interactive selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from urlindex.extraction.types import RouteEntry
from urlindex.index.route_index import route_matches
from urlindex.index.snapshot import FileRecord, IndexSnapshot


@dataclass(frozen=True)
class PickItem:
    """What a selection list shows for one route."""

    label: str
    description: str
    detail: str


@dataclass(frozen=True)
class RouteChoice:
    """A selectable route: the entry and the file that declares it."""

    record: FileRecord
    entry: RouteEntry

    @property
    def file_path(self) -> str:
        return self.record.file_path

    def as_pick_item(self) -> PickItem:
        return PickItem(
            label=self.entry.name or self.entry.url_path,
            description=self.entry.url_path,
            detail=self.record.label,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.entry.name,
            "url_path": self.entry.url_path,
            "file": self.record.label,
            "file_path": self.record.file_path,
        }


def build_choices(snapshot: IndexSnapshot, query: Optional[str] = None) -> list[RouteChoice]:
    """All routes in ``snapshot``, filtered by name, URL path, or file label."""
    return [
        RouteChoice(record=record, entry=entry)
        for record, entry in snapshot.iter_routes()
        if not query or route_matches(record, entry, query)
    ]


def format_choice(choice: RouteChoice) -> str:
    """One-line rendering: ``label  description  (detail)``."""
    item = choice.as_pick_item()
    return f"{item.label:<30} {item.description:<40} ({item.detail})"
