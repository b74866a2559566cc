"""Logging utilities for flightgraph.

All submodules log through the single ``flightgraph`` logger defined here.  By
default the logger is silent (a ``NullHandler`` is installed); a hosting
application enables output via :func:`configure_logging`.
"""

import logging


# Package-wide logger --------------------------------------------------------
logger = logging.getLogger("flightgraph")
logger.addHandler(logging.NullHandler())


def configure_logging(enabled: bool = True, level: int | str = logging.INFO) -> None:
    """Configure the global ``flightgraph`` logger.

    Parameters
    ----------
    enabled:
        If ``True`` (default) a ``StreamHandler`` is installed.  If ``False``
        logging output is suppressed.
    level:
        Logging level used when enabling the handler, either a number or a
        level name such as ``"DEBUG"``.  Per-field adaptation decisions are
        emitted at ``DEBUG``.
    """

    # Remove any existing handlers so configuration calls are idempotent.
    logger.handlers.clear()

    if enabled:
        if isinstance(level, str):
            level = logging.getLevelName(level.strip().upper())
            if not isinstance(level, int):
                level = logging.INFO
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)


def configure_logging_from_settings(settings) -> None:
    """Enable the logger at ``settings.log_level``."""
    configure_logging(True, getattr(settings, "log_level", "WARNING"))


__all__ = ["logger", "configure_logging", "configure_logging_from_settings"]
