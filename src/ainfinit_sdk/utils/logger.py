"""
Logging helpers for the Ainfinit SDK

The SDK only creates module loggers under the ``ainfinit_sdk`` namespace and
never configures the root logger. ``enable_debug_logging`` is what the client
calls when ``debug`` is switched on in its configuration.
"""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "ainfinit_sdk"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the SDK logger, or a child of it for ``name``"""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def enable_debug_logging(
    handler: Optional[logging.Handler] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Turn on DEBUG output for the whole SDK

    A stream handler is attached only if the SDK logger has none yet, so
    calling this repeatedly does not duplicate output.

    Args:
        handler: Handler to attach instead of the default stderr stream handler
        fmt: Log record format for the default handler

    Returns:
        The configured SDK logger
    """
    logger = get_logger()
    logger.setLevel(logging.DEBUG)

    if handler is not None:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    elif not logger.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(fmt))
        logger.addHandler(stream)

    return logger
