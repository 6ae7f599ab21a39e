"""Process umask, overridable through the environment."""

import logging
import os

from fsutil.config import Config

logger = logging.getLogger(__name__)


def umask() -> int:
    """
    Umask to apply to files the application creates.

    Reads an octal string (e.g. "022") from the override variable on every
    call and falls back to Config.DEFAULT_UMASK when it is unset or invalid.
    """
    raw = os.getenv(Config.UMASK_ENV_VAR, "").strip()
    if raw:
        try:
            return int(raw, 8) & 0o777
        except ValueError:
            logger.warning(f"Ignoring invalid {Config.UMASK_ENV_VAR}={raw!r}")
    return Config.DEFAULT_UMASK
