import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from app.core.config import LOG_FILE, LOG_LEVEL, resolve_log_level


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Configures the root logger with a console and optional file handler.

    Args:
        level (Optional[str]): Log level name. Defaults to LOG_LEVEL;
            unknown names fall back to INFO.
        log_file (Optional[str]): Path of a rotating log file. Defaults to
            LOG_FILE; no file handler when unset.

    Returns:
        logging.Logger: The configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(resolve_log_level(level or LOG_LEVEL))

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or LOG_FILE
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=5)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
