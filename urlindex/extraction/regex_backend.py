"""Regex-based route extractor.

Pure text matching over one file's contents. Nothing here touches the
file system or raises on malformed input: text that does not match the
declaration grammar simply produces no records.
"""

from __future__ import annotations

from urlindex.extraction.patterns import (
    NAMESPACE_PATTERN,
    ROUTE_PATTERN,
    rewrite_module_ref,
    urlpatterns_block,
)
from urlindex.extraction.types import ExtractionResult, NamespaceBinding, RouteEntry


def extract_routes(text: str, urlpatterns_only: bool = False) -> list[RouteEntry]:
    """Extract route declarations from ``text`` in source order.

    Args:
        text: Full contents of a routing module.
        urlpatterns_only: Restrict the scan to the first
            ``urlpatterns = [...]`` block. A file without one yields nothing.

    Returns:
        One RouteEntry per non-overlapping match.
    """
    if urlpatterns_only:
        block = urlpatterns_block(text)
        if block is None:
            return []
        text = block

    return [
        RouteEntry(url_path=match.group(1), name=match.group(2) or "")
        for match in ROUTE_PATTERN.finditer(text)
    ]


def iter_namespace_bindings(text: str) -> list[NamespaceBinding]:
    """All namespaced includes in ``text``, duplicates kept, in source order."""
    return [
        NamespaceBinding(key=rewrite_module_ref(match.group(1)), namespace=match.group(2))
        for match in NAMESPACE_PATTERN.finditer(text)
    ]


def extract_namespaces(text: str) -> dict[str, str]:
    """Extract the namespace table fragment declared in ``text``.

    Later includes of the same module overwrite earlier ones.
    """
    return {b.key: b.namespace for b in iter_namespace_bindings(text)}


def extract_all(text: str, urlpatterns_only: bool = False) -> ExtractionResult:
    """Routes and namespaces of one file."""
    return ExtractionResult(
        entries=tuple(extract_routes(text, urlpatterns_only=urlpatterns_only)),
        namespaces=extract_namespaces(text),
    )


class RegexRouteExtractor:
    """RouteExtractor backed by the module-level regex functions."""

    def __init__(self, urlpatterns_only: bool = False) -> None:
        self._urlpatterns_only = urlpatterns_only

    @property
    def name(self) -> str:
        return "regex"

    @property
    def urlpatterns_only(self) -> bool:
        return self._urlpatterns_only

    def extract_routes(self, text: str) -> list[RouteEntry]:
        return extract_routes(text, urlpatterns_only=self._urlpatterns_only)

    def extract_namespaces(self, text: str) -> dict[str, str]:
        return extract_namespaces(text)

    def extract_all(self, text: str) -> ExtractionResult:
        return extract_all(text, urlpatterns_only=self._urlpatterns_only)
