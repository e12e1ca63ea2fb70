"""Snippet generation for a selected route.

A snippet is a single line referencing a route by name, qualified with its
namespace when the route's file was included under one.
"""

from __future__ import annotations

import string
from collections.abc import Mapping

from urlindex.constants import DEFAULT_SNIPPET_TEMPLATE
from urlindex.extraction.types import RouteEntry
from urlindex.index.keys import subpath_key
from urlindex.types.errors import ErrorCode, ValidationError


def route_reference(key: str, name: str, namespaces: Mapping[str, str]) -> str:
    """``"<namespace>:<name>"`` when ``key`` is bound, else ``name``."""
    namespace = namespaces.get(key)
    if namespace is not None:
        return f"{namespace}:{name}"
    return name


TEMPLATE_FIELDS = frozenset({"name", "reference"})


def validate_template(template: str) -> str:
    """Check that ``template`` only uses bare ``{name}``/``{reference}`` fields."""
    try:
        for _, field_name, format_spec, conversion in string.Formatter().parse(template):
            if field_name is None:
                continue
            if field_name not in TEMPLATE_FIELDS or format_spec or conversion:
                raise ValueError(f"unsupported field {{{field_name}}}")
    except ValueError as e:
        raise ValidationError(
            f"Invalid snippet template {template!r}: {e}",
            user_message="Snippet template may only use {name} and {reference}; "
            "write literal braces as {{ and }}.",
            code=ErrorCode.INVALID_ARGS,
        ) from e
    return template


class SnippetGenerator:
    """Renders snippets from a template.

    Usage:
        generator = SnippetGenerator()
        generator.render("blog/urls", RouteEntry("<int:pk>/", "detail"), {"blog/urls": "blog"})
        # const url_detail = "{% url 'blog:detail' %}";
    """

    def __init__(self, template: str = DEFAULT_SNIPPET_TEMPLATE) -> None:
        self._template = validate_template(template)

    @property
    def template(self) -> str:
        return self._template

    def render(self, key: str, entry: RouteEntry, namespaces: Mapping[str, str]) -> str:
        # Empty names are rendered as-is.
        return self._template.format(
            name=entry.name,
            reference=route_reference(key, entry.name, namespaces),
        )

    def render_for_file(
        self, file_path: str, entry: RouteEntry, namespaces: Mapping[str, str]
    ) -> str:
        return self.render(subpath_key(file_path), entry, namespaces)


_default_generator = SnippetGenerator()


def generate_snippet(key: str, entry: RouteEntry, namespaces: Mapping[str, str]) -> str:
    """Render ``entry`` with the default template."""
    return _default_generator.render(key, entry, namespaces)
