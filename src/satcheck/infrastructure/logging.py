"""Centralized logging for satcheck using Loguru.

Examples
--------
>>> from satcheck.infrastructure.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.warning("Ignore set unavailable: {reason}", reason="not a git repository")

Configure once at startup::

    from satcheck.infrastructure.logging import configure_logging
    configure_logging(level="DEBUG", use_rich=True)
"""

from __future__ import annotations

import sys
from contextlib import suppress
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_CURRENT_CONFIG: dict[str, object] | None = None
_HANDLER_IDS: list[int] = []


def configure_logging(
    level: LogLevel = "WARNING",
    use_rich: bool = True,
    force_reconfigure: bool = False,
) -> None:
    """Configure global logging for satcheck.

    Idempotent: calling it again with the same settings does nothing.

    Parameters
    ----------
    level : LogLevel, default="WARNING"
        Minimum log level to output
    use_rich : bool, default=True
        Route records through a rich RichHandler, plain stderr otherwise
    force_reconfigure : bool, default=False
        Reinstall handlers even if settings are unchanged
    """
    global _CURRENT_CONFIG

    current_config: dict[str, object] = {"level": level, "use_rich": use_rich}
    if not force_reconfigure and current_config == _CURRENT_CONFIG:
        return

    # Remove only our previously added handlers (not external ones)
    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    if use_rich:
        rich_handler = RichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=False,
            show_path=False,
        )
        handler_id = logger.add(sink=rich_handler, level=level, format="{message}")
    else:
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format="{level: <8} | {extra[module]} | {message}",
            colorize=False,
        )
    _HANDLER_IDS.append(handler_id)

    _CURRENT_CONFIG = current_config


def _ensure_configured() -> None:
    """Install default handlers on first use."""
    if _CURRENT_CONFIG is None:
        # Drop loguru's default stderr handler so records are not printed twice
        with suppress(ValueError):
            logger.remove(0)
        configure_logging()


@lru_cache(maxsize=128)
def get_logger(name: str) -> Logger:
    """Get a logger bound with the module name (cached).

    Parameters
    ----------
    name : str
        Logger name, typically __name__ from the calling module

    Returns
    -------
    loguru.Logger
        Logger instance bound with ``module=name``
    """
    _ensure_configured()
    return logger.bind(module=name)
