"""
Logger factory for hdnode modules
"""
import logging
import sys
from pathlib import Path
from typing import Optional

__all__ = ["get_logger"]

DEFAULT_FORMAT = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'


def get_logger(name: str, log_level: str = "WARNING", log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Returns the named logger, attaching a stdout handler (and a file handler if log_file is given) on first use.

    The default level is WARNING: derivation retries and reseeds are the only events hdnode reports, and key
    material is never passed to a logger.
    """
    logger = logging.getLogger(name)

    # Handlers are attached once per named logger
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, log_level.upper()))
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
