"""File copy helpers that carry permission bits along."""

import os
import shutil

from fsutil.exceptions import FsutilError
from fsutil.predicates import is_file


def copy_file(src: str, dst: str):
    """
    Copy content and permission bits from src to dst.

    Raises:
        FsutilError: src is not a regular file, dst already exists, or the
            copy itself failed
    """
    if not is_file(src):
        raise FsutilError(f"{src} is not a regular file", src)

    try:
        with open(src, "rb") as fsrc, open(dst, "xb") as fdst:
            shutil.copyfileobj(fsrc, fdst)
        shutil.copymode(src, dst)
    except FileExistsError as e:
        raise FsutilError(f"Destination {dst} already exists", dst) from e
    except OSError as e:
        raise FsutilError(f"Copy {src} -> {dst} failed: {e}", dst) from e


def copy_file_force(src: str, dst: str):
    """
    Like copy_file, but replaces an existing regular file at dst.

    dst is only removed once src is known to be a copyable regular file.
    """
    if not is_file(src):
        raise FsutilError(f"{src} is not a regular file", src)

    if is_file(dst):
        if os.path.samefile(src, dst):
            raise FsutilError(f"{src} and {dst} are the same file", dst)
        try:
            os.remove(dst)
        except OSError as e:
            raise FsutilError(f"Cannot replace {dst}: {e}", dst) from e
    copy_file(src, dst)
