"""Text patterns for routing declarations.

The grammar is deliberately loose: it targets the declaration styles found
in real ``urls.py`` files, not the full Python grammar. Handler expressions
are skipped rather than parsed, so a comma or ``)`` nested inside the
handler position cuts the match short.
"""

from __future__ import annotations

import re

# path('<url>', <handler>[, name='<name>'])
# Not anchored on a word boundary: ``re_path(`` matches as well.
ROUTE_PATTERN: re.Pattern[str] = re.compile(
    r"path\s*\(\s*['\"]([^'\"]+)['\"]\s*,\s*[^,)]+\s*"
    r"(?:,\s*name\s*=\s*['\"]([^'\"]+)['\"])?"
)

# include(('<module>', '<app>'), namespace='<namespace>')
NAMESPACE_PATTERN: re.Pattern[str] = re.compile(
    r"include\s*\(\s*\(\s*['\"]([^'\"]+)['\"]\s*,\s*[^)]*\)\s*,\s*"
    r"namespace\s*=\s*['\"]([^'\"]+)['\"]"
)

# First ``urlpatterns = [...]`` block, non-greedy up to the first ``]``.
URLPATTERNS_BLOCK_PATTERN: re.Pattern[str] = re.compile(
    r"urlpatterns\s*=\s*\[(?:.|\n)*?\]"
)


def rewrite_module_ref(module_ref: str) -> str:
    """Turn an included module reference into a namespace table key.

    Only the first dot is rewritten: ``"app.sub.urls"`` becomes
    ``"app/sub.urls"``. Keys for two-segment references (``"blog.urls"``)
    line up with :func:`urlindex.index.keys.subpath_key`.
    """
    return module_ref.replace(".", "/", 1)


def urlpatterns_block(text: str) -> str | None:
    """Return the first ``urlpatterns = [...]`` block in ``text``, if any."""
    match = URLPATTERNS_BLOCK_PATTERN.search(text)
    return match.group(0) if match else None
