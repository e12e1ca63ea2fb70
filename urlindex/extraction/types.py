"""Output types for route extraction.

These are the only values the extractor hands to the index. All of them
are immutable so that a published index snapshot can share them freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RouteEntry:
    """One ``path(...)`` declaration found in a routing module.

    ``url_path`` is the literal pattern text, never normalized. ``name`` is
    the value of the ``name=`` keyword, or ``""`` when the declaration has
    none.
    """

    url_path: str
    name: str = ""

    @property
    def label(self) -> str:
        """Tree label, ``<url_path>[<name>]``."""
        return f"{self.url_path}[{self.name}]"

    def to_dict(self) -> dict[str, Any]:
        return {"url_path": self.url_path, "name": self.name}


@dataclass(frozen=True)
class NamespaceBinding:
    """An ``include((module, app), namespace=...)`` declaration.

    ``key`` is the module reference after the path rewrite, so that it can be
    compared with the subpath key of a ``urls.py`` file.
    """

    key: str
    namespace: str


@dataclass(frozen=True)
class ExtractionResult:
    """Everything extracted from the text of a single file."""

    entries: tuple[RouteEntry, ...] = ()
    namespaces: dict[str, str] = field(default_factory=dict)

    @property
    def has_routes(self) -> bool:
        return bool(self.entries)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entries": [e.to_dict() for e in self.entries],
            "namespaces": dict(self.namespaces),
        }
