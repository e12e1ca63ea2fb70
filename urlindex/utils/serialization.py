"""Conversion of index values to JSON-ready primitives.

Used by the CLI's ``--json`` output. Handles the frozen dataclasses and
read-only mappings that make up an index snapshot.
"""

import math
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any


def serialize_to_primitives(data: Any) -> Any:
    """Convert index values to JSON-serializable primitives.

    Handles:
    - Primitives (str, int, float, bool, None): returned as-is
    - Special floats (inf, nan): converted to None
    - datetime: ISO format string
    - Enum: its value
    - Objects with to_dict(): that method's result, recursively
    - dataclass: dict of its fields, recursively
    - Mapping (including MappingProxyType): dict with stringified keys
    - list/tuple/set: list

    Examples:
        >>> from urlindex.extraction.types import RouteEntry
        >>> serialize_to_primitives(RouteEntry("posts/", "post-list"))
        {'url_path': 'posts/', 'name': 'post-list'}
    """
    if data is None or isinstance(data, (str, bool, int)):
        return data

    if isinstance(data, float):
        if math.isnan(data) or math.isinf(data):
            return None
        return data

    if isinstance(data, datetime):
        return data.isoformat()

    if isinstance(data, Enum):
        return data.value

    if hasattr(data, "to_dict"):
        return serialize_to_primitives(data.to_dict())

    if is_dataclass(data) and not isinstance(data, type):
        return {f.name: serialize_to_primitives(getattr(data, f.name)) for f in fields(data)}

    if isinstance(data, Mapping):
        return {str(k): serialize_to_primitives(v) for k, v in data.items()}

    if isinstance(data, (list, tuple, set, frozenset)):
        return [serialize_to_primitives(item) for item in data]

    return str(data)
