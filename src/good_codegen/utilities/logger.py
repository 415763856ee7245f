from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(levelname)s %(name)s - %(message)s"

PACKAGE_LOGGER = "good_codegen"


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a level: none is WARNING, one INFO, more DEBUG."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def configure_library_logging(
    level: int = logging.INFO, format: str = DEFAULT_FORMAT, **kwargs
) -> logging.Logger:
    """Set the good_codegen logger level and add a root handler if none exists.

    Applications that already configured logging keep their handlers; only
    the package logger level is adjusted.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=format, **kwargs)
    return package_logger
