"""
Logging Configuration
Routes the 'roulettecurves' loggers to the console and, optionally, a file.

At DEBUG level the Shape Controller logs one line per regenerated curve, so a
file is the practical way to inspect an animation run.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "roulettecurves"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Libraries that are chatty below WARNING
QUIET_LOGGERS = ("pyvista", "matplotlib")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configures the application logger. Safe to call again; previous handlers
    are replaced.

    Args:
        level: Level of the application loggers and of every handler.
        log_file: Optional path of a log file; missing parent folders are created.

    Returns:
        The 'roulettecurves' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}, file: {log_file or 'none'}.")
    return logger
