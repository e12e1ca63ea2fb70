"""Extractor protocol.

The index only depends on this interface. The regex extractor is the one
implementation today; a tokenizer-based extractor can be registered in its
place without touching the index.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from urlindex.extraction.types import ExtractionResult, RouteEntry


@runtime_checkable
class RouteExtractor(Protocol):
    """Turns the text of one routing module into route records."""

    @property
    def name(self) -> str:
        """Extractor identifier (e.g. ``'regex'``)."""
        ...

    def extract_routes(self, text: str) -> list[RouteEntry]:
        """Route declarations, in source order."""
        ...

    def extract_namespaces(self, text: str) -> dict[str, str]:
        """Namespace table fragment: rewritten module reference -> namespace."""
        ...

    def extract_all(self, text: str) -> ExtractionResult:
        """Routes and namespaces in a single call."""
        ...
