# codediff/utils/logger.py

import logging
import os
from pathlib import Path
from platformdirs import user_log_dir

APP_NAME = "Code Diff Checker"
APP_AUTHOR = "codediff"
DEBUG_ENV = "CODEDIFF_DEBUG"
LOG_FILENAME = "codediff.debug.log"


def _debug_level(value):
    """Level for a CODEDIFF_DEBUG value: "1"/"true" mean DEBUG, level names are honoured."""
    if not value:
        return None
    name = value.strip().upper()
    if name in ("1", "TRUE", "YES", "ON"):
        return logging.DEBUG
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def log_file_path() -> Path:
    return Path(user_log_dir(appname=APP_NAME, appauthor=APP_AUTHOR)) / LOG_FILENAME


def setup_logger():
    logger = logging.getLogger(APP_NAME)
    level = _debug_level(os.environ.get(DEBUG_ENV))

    # Default: silence everything unless CODEDIFF_DEBUG is set
    if level is None:
        logger.setLevel(logging.CRITICAL)
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        logger.propagate = False
        return logger

    # Debug mode: write diff runs and I/O failures to the user log dir
    logger.setLevel(level)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        log_file = log_file_path()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(module)s - %(message)s"))
        logger.addHandler(fh)
    return logger

logger = setup_logger()
