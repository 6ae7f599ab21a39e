"""Path canonicalization and filename sanitization."""

import logging
import os
import re
from typing import Callable, Mapping, Optional

from fsutil.config import Config

logger = logging.getLogger(__name__)

# Anything outside [A-Za-z0-9_@.-]
_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w@.-]", re.ASCII)

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _os_home() -> Optional[str]:
    """Home directory of the current OS user, or None if it cannot be found."""
    home = os.path.expanduser("~")
    if not home or home == "~":
        return None
    return home


class PathResolver:
    """
    Turns user supplied paths into absolute, lexically cleaned paths.

    Process state (environment, working directory, OS home lookup) is
    injected and read on every call, so a resolver can be driven entirely
    from tests. The defaults read live process state.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        getcwd: Optional[Callable[[], str]] = None,
        home_lookup: Optional[Callable[[], Optional[str]]] = None,
        env_var: str = Config.HOMEDIR_ENV_VAR,
    ):
        self._environ = environ
        self._getcwd = getcwd or os.getcwd
        self._home_lookup = home_lookup or _os_home
        self.env_var = env_var

    def user_home(self) -> Optional[str]:
        """
        Determine the home directory used for "~" expansion.

        The override variable wins when set and non-empty, otherwise the OS
        home is used.

        Returns:
            Home directory, or None when neither source yields one
        """
        environ = os.environ if self._environ is None else self._environ
        override = environ.get(self.env_var, "")
        if override:
            return override

        try:
            return self._home_lookup() or None
        except (KeyError, OSError) as e:
            logger.debug(f"Home directory lookup failed: {e}")
            return None

    def expand_homedir(self, path: str) -> str:
        """Replace a leading "~" (alone or followed by a separator) with the home directory."""
        if not path.startswith("~"):
            return path
        if path != "~" and path[1:2] not in _SEPARATORS:
            # ~user and ~foo are not ours to expand
            return path

        home = self.user_home()
        if home is None:
            logger.warning(f"Cannot determine home directory, leaving {path!r} unexpanded")
            return path

        rest = path[1:].lstrip("".join(_SEPARATORS))
        if not rest:
            return home
        return os.path.join(home, rest)

    def resolve(self, path: str) -> str:
        """
        Canonicalize a path.

        Expands the home directory first, then collapses repeated separators
        and resolves "." and ".." lexically (symlinks are not followed), and
        finally anchors relative results at the working directory.

        Args:
            path: Relative or absolute path, may start with "~"

        Returns:
            Absolute, cleaned path in native separator form. If the working
            directory cannot be read the cleaned relative path is returned.
        """
        path = self.expand_homedir(path or os.curdir)
        cleaned = _normpath(path)
        if os.path.isabs(cleaned):
            return cleaned

        try:
            cwd = self._getcwd()
        except OSError as e:
            logger.warning(f"Cannot determine working directory for {path!r}: {e}")
            return cleaned

        return _normpath(os.path.join(cwd, cleaned))


def _normpath(path: str) -> str:
    cleaned = os.path.normpath(path)
    # POSIX normpath keeps exactly two leading slashes; the storage layer
    # expects a single root.
    if os.sep == "/" and cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def user_home() -> Optional[str]:
    """Home directory honoring the override variable."""
    return PathResolver().user_home()


def expand_homedir(path: str) -> str:
    """Expand a leading "~" using the live environment."""
    return PathResolver().expand_homedir(path)


def clean_path(path: str) -> str:
    """Resolve a path against the live environment and working directory."""
    return PathResolver().resolve(path)


def clean_filename(name: str) -> str:
    """
    Make a string safe to use as a filename.

    Every character outside the ASCII letters, digits and "_@.-" becomes one
    "_" (runs are not merged). Underscores and spaces at either end are then
    stripped.

    Example:
        >>> clean_filename('"§$%&aÜÄ*&b%§"\\'Ä"c%$"\\'"')
        'a____b______c'
    """
    return _UNSAFE_FILENAME_CHARS.sub("_", name).strip("_ ")
