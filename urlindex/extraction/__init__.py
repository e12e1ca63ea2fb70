"""Route extraction from routing module text.

Usage:
    from urlindex.extraction import extract_all
    result = extract_all(text)
    for entry in result.entries:
        print(entry.url_path, entry.name)
"""

from urlindex.extraction.patterns import (
    NAMESPACE_PATTERN,
    ROUTE_PATTERN,
    rewrite_module_ref,
    urlpatterns_block,
)
from urlindex.extraction.protocols import RouteExtractor
from urlindex.extraction.regex_backend import (
    RegexRouteExtractor,
    extract_all,
    extract_namespaces,
    extract_routes,
    iter_namespace_bindings,
)
from urlindex.extraction.types import ExtractionResult, NamespaceBinding, RouteEntry

__all__ = [
    "ExtractionResult",
    "NAMESPACE_PATTERN",
    "NamespaceBinding",
    "ROUTE_PATTERN",
    "RegexRouteExtractor",
    "RouteEntry",
    "RouteExtractor",
    "extract_all",
    "extract_namespaces",
    "extract_routes",
    "iter_namespace_bindings",
    "rewrite_module_ref",
    "urlpatterns_block",
]
