"""Hypothesis property-based tests for the extractor.

Properties tested:
- Any well-formed single-line declaration yields exactly one entry
- Declarations without name= yield an empty name
- Entry order follows declaration order
- Module reference rewriting touches only the first dot
"""

from hypothesis import given
from hypothesis import strategies as st

from urlindex.extraction import RouteEntry, extract_routes, rewrite_module_ref

# =============================================================================
# Strategy Definitions
# =============================================================================

url_paths = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz0123456789/<>:_-.^$",
    min_size=1,
    max_size=40,
)

route_names = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz0123456789_-:",
    min_size=1,
    max_size=30,
)

handlers = st.from_regex(r"[a-z_][a-z0-9_.]{0,20}", fullmatch=True)

keywords = st.sampled_from(["path", "re_path"])

quotes = st.sampled_from(["'", '"'])

module_refs = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_.", min_size=1, max_size=30)


# =============================================================================
# Properties
# =============================================================================


@given(keywords, quotes, url_paths, handlers, route_names)
def test_named_declaration_yields_one_entry(keyword, quote, url, handler, name):
    text = f"{keyword}({quote}{url}{quote}, {handler}, name={quote}{name}{quote})"
    assert extract_routes(text) == [RouteEntry(url, name)]


@given(keywords, quotes, url_paths, handlers)
def test_unnamed_declaration_yields_empty_name(keyword, quote, url, handler):
    text = f"{keyword}({quote}{url}{quote}, {handler})"
    assert extract_routes(text) == [RouteEntry(url, "")]


@given(st.lists(st.tuples(url_paths, route_names), min_size=1, max_size=10))
def test_entries_follow_declaration_order(routes):
    text = "urlpatterns = [\n" + "".join(
        f'    path("{url}", view, name="{name}"),\n' for url, name in routes
    ) + "]\n"
    assert extract_routes(text) == [RouteEntry(url, name) for url, name in routes]


@given(module_refs)
def test_rewrite_replaces_at_most_one_dot(ref):
    rewritten = rewrite_module_ref(ref)
    assert rewritten.count("/") == (1 if "." in ref else 0)
    assert rewritten.count(".") == max(ref.count(".") - 1, 0)
    assert rewritten.replace("/", ".", 1) == ref
