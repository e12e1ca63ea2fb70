"""
urlindex - Route discovery for Django-style ``urls.py`` files.

Scans a project tree for ``urls.py`` modules and builds an index of:
- URL patterns declared with ``path(...)`` / ``re_path(...)``
- Route names (``name="..."``)
- Namespaces declared through ``include((module, app), namespace=...)``

The index answers tree-shaped and flat queries and renders a template
snippet (``{% url 'ns:name' %}``) for any route, ready to paste into
a template or script.
"""

__version__ = "0.1.0"
