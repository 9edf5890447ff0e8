import logging
import sys

import structlog


PACKAGE_LOGGER = "xor_breaker"

LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def get_logger(name: str):
    """
    structlog logger on top of a stdlib logger. Nothing is configured globally,
    so until configure_logging runs only warnings and errors get through,
    via the logging module's last-resort handler on stderr.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(verbosity: int = 0) -> None:
    """Send the package's log events to stderr so stdout only carries results."""
    level = LEVELS.get(min(verbosity, 2), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s  %(levelname)s  %(message)s", "%H:%M:%S"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def reset_logging() -> None:
    """Undo configure_logging."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
