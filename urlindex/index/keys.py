"""Identifiers derived from a routing module's file path.

Both helpers look only at the last two path segments and accept either
separator, so keys built from Windows paths match keys built from the
``include()`` module references (which always use ``/``).
"""

from __future__ import annotations

import re

from urlindex.constants import MODULE_SUFFIX

_SEPARATORS = re.compile(r"[\\/]")


def _tail(file_path: str) -> list[str]:
    return _SEPARATORS.split(file_path)[-2:]


def display_label(file_path: str) -> str:
    """Short label for a file: ``<parent dir>/<file name>``."""
    return "/".join(_tail(file_path))


def subpath_key(file_path: str) -> str:
    """Namespace table key for a file.

    ``/srv/site/blog/urls.py`` -> ``blog/urls``. The trailing ``.py`` is
    removed when present; nothing else is normalized.
    """
    key = "/".join(_tail(file_path))
    if key.endswith(MODULE_SUFFIX):
        key = key[: -len(MODULE_SUFFIX)]
    return key
