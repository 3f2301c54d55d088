"""
Logger setup for the trap host and relay entry points.

Library modules only call logging.getLogger(__name__). Entry points attach
handlers once to the package loggers ("basefee_sentinel", "backend") and the
module loggers propagate into them.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from .config import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    logger_name: str = "basefee_sentinel",
    level: Optional[Union[str, int]] = None,
    logs_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Attach console and rotating-file handlers to a package logger.

    Args:
        logger_name: Package logger to configure
        level: Overrides config.log_level when given
        logs_dir: Overrides config.logs_dir when given

    Returns:
        The configured logger. Calling again for the same name is a no-op.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger

    level = level if level is not None else config.log_level
    logs_dir = Path(logs_dir) if logs_dir is not None else config.logs_dir
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [
        logging.StreamHandler(),
        logging.handlers.RotatingFileHandler(
            logs_dir / f"{logger_name}.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        ),
    ]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
