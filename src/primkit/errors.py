"""Error definitions for PRIMKIT."""

from typing import Any

# ============================================================================
#                           General errors
# ============================================================================


class PrimkitError(Exception):
    """Base class for PRIMKIT errors."""


class InvalidArgumentError(PrimkitError, ValueError):
    """Raised when a call parameter is structurally invalid.

    This is the only failure the helper functions signal on purpose. All other
    odd inputs (empty strings, empty sequences, negative numbers) follow the
    edge-case policy of the individual function.
    """

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid value for '{argument}': {value!r} ({reason})")
        self.argument = argument
        self.value = value
        self.reason = reason


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidLogLevelError(PrimkitError, ValueError):
    """Raised when PRIMKIT_LOG_LEVEL does not name a logging level."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Invalid log level: {level}")
        self.level = level
