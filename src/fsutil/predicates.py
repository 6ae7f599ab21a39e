"""Filesystem predicates used by the storage layer."""

import logging
import os
import stat

from fsutil.exceptions import FsutilError

logger = logging.getLogger(__name__)


def is_dir(path: str) -> bool:
    """True if path exists and is a directory. Never raises."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def is_file(path: str) -> bool:
    """True if path exists and is a regular file. Never raises."""
    try:
        return stat.S_ISREG(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def is_non_empty_file(path: str) -> bool:
    """True if path is a regular file holding at least one byte."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(st.st_mode) and st.st_size > 0


def is_empty_dir(path: str) -> bool:
    """
    Check whether a directory tree contains no regular files.

    Nested directories without files do not count as content; hidden files
    do. Symlinks are not followed. The walk stops at the first regular file.

    Args:
        path: Root of the tree

    Returns:
        True if no regular file exists anywhere below path

    Raises:
        FsutilError: The tree could not be walked (missing root, permission
            denied, not a directory)
    """
    pending = [path]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        pending.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        logger.debug(f"{path} is not empty, found {entry.path}")
                        return False
        except OSError as e:
            raise FsutilError(f"Cannot walk {current}: {e}", current) from e
    return True


def file_contains(path: str, needle: str) -> bool:
    """True if any line of the file contains needle. Unreadable files yield False."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                if needle in line:
                    return True
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
    return False
