"""File discovery and reading for routing modules.

These are the I/O collaborators of the route index: ``find_urls_files``
decides which files a rescan covers, ``read_source`` turns a path into
text. The index never walks directories or opens files itself.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from urlindex.constants import DEFAULT_IGNORE_DIRS, MAX_FILE_SIZE, URLS_FILE_NAME
from urlindex.types.errors import ErrorCode, FileReadError, RecoveryAction, ResourceError
from urlindex.utils.logger import logger


def should_skip_dir(name: str, ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS) -> bool:
    """Ignored directories and hidden directories are not descended into."""
    return name in set(ignore_dirs) or (name.startswith(".") and name not in (".", ".."))


def find_urls_files(
    root: str | Path,
    file_name: str = URLS_FILE_NAME,
    ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS,
) -> list[str]:
    """Find routing modules under ``root``.

    Args:
        root: Directory to search.
        file_name: Exact file name to match.
        ignore_dirs: Directory names to prune from the walk.

    Returns:
        Sorted absolute paths of every file named ``file_name``.

    Raises:
        ResourceError: ``root`` is not a directory.
    """
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        raise ResourceError(
            f"Scan root is not a directory: {root_path}",
            user_message=f"Directory not found: {root_path}",
            code=ErrorCode.DIRECTORY_NOT_FOUND,
            recovery_actions=[RecoveryAction("Pass the root of a Django project")],
        )

    ignored = set(ignore_dirs)
    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = [d for d in dirnames if not should_skip_dir(d, ignored)]
        if file_name in filenames:
            found.append(os.path.join(dirpath, file_name))

    found.sort()
    logger.debug(f"Found {len(found)} {file_name} files under {root_path}")
    return found


def read_source(file_path: str) -> str:
    """Read a routing module as UTF-8 text.

    Raises:
        OSError: The file cannot be opened.
        UnicodeDecodeError: The file is not valid UTF-8.
        FileReadError: The file exceeds MAX_FILE_SIZE.
    """
    path = Path(file_path)
    size = path.stat().st_size
    if size > MAX_FILE_SIZE:
        raise FileReadError(
            file_path,
            f"file is {size} bytes (limit {MAX_FILE_SIZE})",
            code=ErrorCode.FILE_TOO_LARGE,
        )
    return path.read_text(encoding="utf-8")
