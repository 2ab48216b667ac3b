import logging
import os
from logging.handlers import TimedRotatingFileHandler

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s: %(name)s: %(message)s"


def default_formatter(fmt=None):
    return logging.Formatter(fmt or DEFAULT_FORMAT)


def setup_logging(app):
    """
    Attach console and daily-rotating file handlers to the package logger.

    Handlers are replaced on every call so repeated app creation (tests,
    reloader) does not duplicate output.
    """
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger("portfolio_api")
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = False

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(default_formatter())
    logger.addHandler(stream_handler)

    if app.config.get("LOG_TO_FILE", True):
        log_dir = app.config.get("LOG_DIR", "logs")
        os.makedirs(log_dir, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            filename=os.path.join(log_dir, "api.log"),
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        file_handler.setFormatter(default_formatter())
        logger.addHandler(file_handler)

    return logger
