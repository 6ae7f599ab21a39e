"""Custom exceptions for filesystem operations."""

import logging
from typing import Optional


class FsutilError(Exception):
    """Base exception that logs errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        logging.getLogger(__name__).error(f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class ShredError(FsutilError):
    """Overwrite failed; the file was left in place."""

    pass


class ShredRemoveError(ShredError):
    """Content was overwritten but the directory entry could not be removed."""

    pass
