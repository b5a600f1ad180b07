"""Console logging for applications that use PRIMKIT.

PRIMKIT itself only emits DEBUG records through module loggers and attaches a
`NullHandler` to the package logger. A host application that wants to see
them (along with records from its other libraries) can call
`configure_logging`, which installs a Rich console handler on the root
logger. Each line is tagged with the top-level package it came from, e.g.
"[primkit]" or "[urllib3]"; the application's own records stay untagged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from primkit.config import get_log_level

# pylint: disable=too-few-public-methods

HANDLER_NAME = "primkit-console"
ROOT_LOGGER_NAME = "root"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class PackagePrefixFilter(logging.Filter):
    """Set `record.prefix` to the bracketed top-level package of the record.

    Records from ``app_name`` (and from the root logger) get an empty prefix.
    The record is always let through.
    """

    def __init__(self, app_name: str | None = None) -> None:
        super().__init__()
        self.app_name = app_name

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.split(".")[0]
        if package in (self.app_name, ROOT_LOGGER_NAME):
            record.prefix = ""
        else:
            record.prefix = f"[{package}]"
        return True


def console_handler(
    level: int = logging.WARNING,
    *,
    app_name: str | None = None,
    debug_mode: bool = False,
    color: bool = True,
) -> RichHandler:
    """Build the Rich console handler used by `configure_logging`.

    Args:
        level: Minimum level for console output (DEBUG in debug_mode).
        app_name: Top-level package whose records are left untagged.
        debug_mode: Show timestamps, full logger names and source paths
            instead of package tags.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler writing to stderr, named `HANDLER_NAME`.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.set_name(HANDLER_NAME)

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(PackagePrefixFilter(app_name))
    return handler


def configure_logging(
    level: int | None = None,
    *,
    app_name: str | None = None,
    debug_mode: bool = False,
    color: bool = True,
    logger_levels: Mapping[str, int] | None = None,
) -> RichHandler:
    """Install the console handler on the root logger.

    Calling this again replaces the handler installed by the previous call,
    so repeated configuration never duplicates output.

    Args:
        level: Console level. Read from `PRIMKIT_LOG_LEVEL` when None.
        app_name: Top-level package of the calling application.
        debug_mode: Passed through to `console_handler`.
        color: Passed through to `console_handler`.
        logger_levels: Per-logger level overrides, e.g. ``{"urllib3": logging.ERROR}``.

    Returns:
        RichHandler: The handler now attached to the root logger.

    Raises:
        InvalidLogLevelError: If `level` is None and the environment names an
            unknown level.
    """
    if level is None:
        level = get_log_level()

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)

    handler = console_handler(
        level, app_name=app_name, debug_mode=debug_mode, color=color
    )
    root.addHandler(handler)
    root.setLevel(handler.level)
    for name, logger_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(logger_level)
    return handler
