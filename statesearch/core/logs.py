"""
Logging setup for statesearch.

Library modules log through ``logging.getLogger(__name__)`` under the
``statesearch`` namespace and stay silent unless the application (or the
benchmark CLI) calls :func:`configure_logging`.
"""

import logging
import os
from typing import Optional, Union

ROOT_LOGGER = "statesearch"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(
    level: Union[int, str] = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the statesearch logger.

    Args:
        level: Logging level, as an int or a name such as "DEBUG"
        log_file: Optional file path to save logs to. If None, only console output.

    Returns:
        The configured ``statesearch`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)

    # Clear existing stream handlers to avoid duplicates on repeated calls
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
