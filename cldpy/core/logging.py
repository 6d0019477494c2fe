"""Logger helpers shared by every cldpy module."""

import logging


LOGGER_NAMES = (
    'cldpy',
    'cldpy.api',
    'cldpy.client',
    'cldpy.upload',
    'cldpy.upload.file',
)


def get_logger(name: str) -> logging.Logger:
    """Return a cldpy logger that defers to the application's logging setup.

    Records propagate to the root logger, so a plain basicConfig() is
    enough to see them. While the root logger has no handlers the logger
    stays at WARNING, which keeps library output quiet by default.

    Args:
        name: Dotted logger name, e.g. 'cldpy.upload'
    """
    log = logging.getLogger(name)
    log.propagate = True

    # Application has not configured logging
    if not logging.getLogger().handlers and log.level == logging.NOTSET:
        log.setLevel(logging.WARNING)

    return log


def setup_logging(level=logging.INFO):
    """
    Set the level of every cldpy logger.

    Handlers are left to the application; this only decides which
    records cldpy emits.

    Args:
        level: Logging level (default: logging.INFO)
    """
    for logger_name in LOGGER_NAMES:
        log = logging.getLogger(logger_name)
        log.setLevel(level)
        log.propagate = True
