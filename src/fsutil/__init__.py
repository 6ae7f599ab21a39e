"""
Filesystem utilities for the Cypher storage layer.

Path canonicalization, secure (overwrite-then-unlink) deletion and the small
predicates the storage code branches on.
"""

from fsutil.config import Config
from fsutil.exceptions import FsutilError, ShredError, ShredRemoveError
from fsutil.filecopy import copy_file, copy_file_force
from fsutil.paths import PathResolver, clean_filename, clean_path, expand_homedir, user_home
from fsutil.predicates import file_contains, is_dir, is_empty_dir, is_file, is_non_empty_file
from fsutil.shred import Shredder, shred
from fsutil.umask import umask

__version__ = Config.VERSION

__all__ = [
    "Config",
    "FsutilError",
    "ShredError",
    "ShredRemoveError",
    "PathResolver",
    "clean_filename",
    "clean_path",
    "expand_homedir",
    "user_home",
    "Shredder",
    "shred",
    "is_dir",
    "is_file",
    "is_non_empty_file",
    "is_empty_dir",
    "file_contains",
    "copy_file",
    "copy_file_force",
    "umask",
    "__version__",
]
