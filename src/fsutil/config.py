import os


class Config:
    """
    Filesystem utility configuration constants.

    Values that callers may redirect at runtime (home directory, umask) are
    exposed as environment variable names and read at call time, not here.
    """

    # ============================================
    # VERSION & ENVIRONMENT
    # ============================================

    VERSION = "0.1.0"
    APP_NAME = "Cypher fsutil"

    # ============================================
    # ENVIRONMENT OVERRIDES
    # ============================================

    HOMEDIR_ENV_VAR = "CYPHER_HOMEDIR"  # Replaces the OS home for "~" expansion
    UMASK_ENV_VAR = "CYPHER_UMASK"  # Octal string, e.g. "022"
    LOG_LEVEL_ENV_VAR = "CYPHER_LOG_LEVEL"

    # ============================================
    # SHREDDING
    # ============================================

    SHRED_PASSES = 3  # Overwrite passes before unlinking
    SHRED_CHUNK_SIZE = 4096  # Bytes of random data per write

    # ============================================
    # FILE PERMISSIONS
    # ============================================

    DEFAULT_UMASK = 0o077

    # ============================================
    # LOGGING
    # ============================================

    LOG_LEVEL = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # ============================================
    # METHODS
    # ============================================

    @classmethod
    def get_shred_info(cls) -> dict:
        """Shredding parameters for display/logging."""
        return {
            "passes": cls.SHRED_PASSES,
            "chunk_size": cls.SHRED_CHUNK_SIZE,
        }


# ============================================
# VALIDATION
# ============================================


def validate_config():
    """
    Validate configuration parameters.

    Raises:
        ValueError: If a parameter is out of range
    """
    errors = []

    if Config.SHRED_PASSES < 1:
        errors.append("SHRED_PASSES must be >= 1")

    if Config.SHRED_CHUNK_SIZE < 1:
        errors.append("SHRED_CHUNK_SIZE must be >= 1")

    if not 0 <= Config.DEFAULT_UMASK <= 0o777:
        errors.append("DEFAULT_UMASK must be within 0o000-0o777")

    if Config.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"Unknown log level {Config.LOG_LEVEL!r}")

    if errors:
        raise ValueError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


# Run validation on import
try:
    validate_config()
except ValueError as e:
    import logging

    logging.warning(f"Configuration validation warning: {e}")
