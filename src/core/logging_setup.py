"""Logging configuration shared by the web console and the CLI"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.config_manager import ConfigManager

LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB max per log file
LOG_BACKUP_COUNT = 5  # Number of rotated log files to keep
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Named loggers used across the package
LOGGER_NAMES = ("ActionButton", "ButtonStyle", "HtmlDefuser", "Navigation")


def setup_logging(config: ConfigManager) -> None:
    """Attach console (and optionally rotating file) handlers to the package loggers"""
    level_name = str(config.get_setting("logging.level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = []

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)
    ch.setFormatter(formatter)
    handlers.append(ch)

    log_file = config.get_setting("logging.file")
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(formatter)
        handlers.append(fh)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            for handler in handlers:
                logger.addHandler(handler)
