"""
Secure file deletion with overwrite.

Overwriting is a best-effort mitigation only. On SSDs, flash media with wear
leveling, and journaling or copy-on-write filesystems, old blocks may survive
the overwrite; nothing here claims certified erasure.
"""

import logging
import os
import secrets
from typing import Callable

from fsutil.config import Config
from fsutil.exceptions import ShredError, ShredRemoveError

logger = logging.getLogger(__name__)


class Shredder:
    """Overwrite a file with random data, then unlink it."""

    def __init__(
        self,
        passes: int = Config.SHRED_PASSES,
        chunk_size: int = Config.SHRED_CHUNK_SIZE,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ):
        _check_passes(passes)
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

        self.passes = passes
        self.chunk_size = chunk_size
        self._random_bytes = random_bytes

    def shred(self, path: str):
        """
        Securely delete a file.

        The file is opened write-only (never created) and overwritten from
        the start with fresh random bytes on every pass. The directory entry
        is removed only once every pass has been written and synced.

        Args:
            path: File to destroy

        Raises:
            ShredError: Opening or overwriting failed; the file is left in place
            ShredRemoveError: Content was destroyed but unlinking failed
        """
        try:
            fd = os.open(path, os.O_WRONLY)
        except OSError as e:
            raise ShredError(f"Cannot open {path} for overwrite: {e}", path) from e

        # A failing close counts as a failed overwrite
        try:
            with os.fdopen(fd, "wb", buffering=0) as fh:
                size = os.fstat(fh.fileno()).st_size
                for pass_num in range(1, self.passes + 1):
                    self._overwrite(fh, size)
                    logger.debug(f"Shred pass {pass_num}/{self.passes} done for {path}")
        except OSError as e:
            raise ShredError(f"Overwrite of {path} failed: {e}", path) from e

        try:
            os.unlink(path)
        except OSError as e:
            raise ShredRemoveError(
                f"{path} was overwritten but could not be removed: {e}", path
            ) from e

        logger.info(f"Shredded {path} ({self.passes} passes)")

    def _overwrite(self, fh, size: int):
        fh.seek(0)
        written = 0
        while written < size:
            written += fh.write(self._random_bytes(self.chunk_size))
        fh.flush()
        os.fsync(fh.fileno())


def _check_passes(passes):
    if isinstance(passes, bool) or not isinstance(passes, int):
        raise ValueError(f"passes must be an integer, got {passes!r}")
    if passes < 1:
        raise ValueError(f"passes must be >= 1, got {passes}")


def shred(path: str, passes: int = Config.SHRED_PASSES):
    """Overwrite ``path`` ``passes`` times with random data and remove it."""
    Shredder(passes=passes).shred(path)
