"""Configuration utilities for PRIMKIT.

The helper functions take no configuration beyond their own parameters. The
only setting lives here: the log level used by `primkit.logging` when the
caller does not pass one explicitly.
"""

import logging
import os

from primkit.errors import InvalidLogLevelError

LOG_LEVEL_ENV_VAR = "PRIMKIT_LOG_LEVEL"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The numeric logging level named by `PRIMKIT_LOG_LEVEL` (case-insensitive),
        or `DEFAULT_LOG_LEVEL` when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable does not name a logging level.
    """
    if not (raw := os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise InvalidLogLevelError(raw)
    return level
