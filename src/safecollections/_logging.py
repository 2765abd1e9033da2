from __future__ import annotations

import logging


def null_logger(name: str) -> logging.Logger:
    """
    Create and return a logger with a NullHandler.

    The library never configures logging itself; records only surface when the
    host application attaches its own handlers.

    Parameters:
        name (str): The name of the logger to be created.

    Returns:
        logging.Logger: A logger object configured with a NullHandler.
    """
    logger = logging.getLogger(name)
    logger.addHandler(logging.NullHandler())
    return logger
