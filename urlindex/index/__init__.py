"""Route index: snapshot, rescan, queries, snippets."""

from urlindex.index.keys import display_label, subpath_key
from urlindex.index.route_index import (
    Observer,
    Reader,
    RescanResult,
    RouteIndex,
    ScanFailure,
    route_matches,
)
from urlindex.index.snapshot import FileRecord, IndexSnapshot
from urlindex.index.snippets import (
    SnippetGenerator,
    generate_snippet,
    route_reference,
    validate_template,
)

__all__ = [
    "FileRecord",
    "IndexSnapshot",
    "Observer",
    "Reader",
    "RescanResult",
    "RouteIndex",
    "ScanFailure",
    "SnippetGenerator",
    "display_label",
    "generate_snippet",
    "route_matches",
    "route_reference",
    "subpath_key",
    "validate_template",
]
