"""
utils/__init__.py - Shared Helpers

Logger factory used by every crawler component. Each logger writes to
its own file under Logs/ and mirrors INFO records to the console.
"""

import os
import logging


LOG_DIR = "Logs"


def get_logger(name, filename=None):
    """
    Return a named logger with file and console handlers.

    Args:
        name: Logger name shown in every record
        filename: Log file stem under Logs/ (defaults to name), lets
            several loggers share one file (e.g. all workers)
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)

    fh = logging.FileHandler(os.path.join(LOG_DIR, f"{filename if filename else name}.log"))
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)

    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger
