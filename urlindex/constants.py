"""Shared constants for urlindex.

Centralizes discovery defaults, size limits, and the snippet template.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


# Route modules are discovered by exact file name.
URLS_FILE_NAME: str = "urls.py"

# Suffix stripped from the last path segment when building subpath keys.
MODULE_SUFFIX: str = ".py"

# Files larger than this are reported as read failures (1 MB).
MAX_FILE_SIZE: int = 1_000_000

# Read pool size used by RouteIndex.rescan.
DEFAULT_MAX_WORKERS: int = 8

# Debounce window for file watcher events, in seconds.
DEFAULT_DEBOUNCE_SECONDS: float = 0.5

# Directories to skip during discovery.
DEFAULT_IGNORE_DIRS: set[str] = {
    "node_modules",
    ".git",
    "__pycache__",
    ".venv",
    "venv",
    "env",
    "site-packages",
    "dist",
    "build",
    ".tox",
    ".eggs",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
}

# Command descriptor attached to leaf tree nodes.
COPY_SNIPPET_COMMAND: str = "urlindex.copySnippet"

# ``{name}`` is the route name, ``{reference}`` the (possibly namespaced) name.
DEFAULT_SNIPPET_TEMPLATE: str = "const url_{name} = \"{{% url '{reference}' %}}\";"

# Per-project configuration location, relative to the scanned root.
CONFIG_DIR_NAME: str = ".urlindex"
CONFIG_FILE_NAME: str = "config.json"
CONFIG_VERSION: str = "1"
