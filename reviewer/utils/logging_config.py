import logging
import os
import sys
from datetime import datetime

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that must propagate to the root handlers.
_PROPAGATED_LOGGERS = ("reviewer", "uvicorn", "uvicorn.error", "uvicorn.access", "main")


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours each record by level."""

    cyan = "\x1b[36m"
    green = "\x1b[32m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    COLORS = {
        logging.DEBUG: cyan,
        logging.INFO: green,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def format(self, record):
        color = self.COLORS.get(record.levelno)
        log_fmt = f"{color}{LOG_FORMAT}{self.reset}" if color else LOG_FORMAT
        return logging.Formatter(log_fmt, datefmt=DATE_FORMAT).format(record)


def resolve_level(name, default=logging.INFO):
    """Numeric level for a level name such as "DEBUG"; unknown names give default."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def setup_logging(level=logging.INFO, log_dir="logs"):
    """Install console (stderr) and dated file handlers on the root logger."""
    root_logger = logging.getLogger()

    # Drop handlers from a previous call so records are not duplicated
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter())
    root_logger.addHandler(console_handler)

    os.makedirs(log_dir, exist_ok=True)
    file_handler = logging.FileHandler(
        os.path.join(log_dir, f"reviewer_{datetime.now().strftime('%Y%m%d')}.log")
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(file_handler)

    for logger_name in _PROPAGATED_LOGGERS:
        named = logging.getLogger(logger_name)
        named.setLevel(level)
        named.propagate = True

    root_logger.info("Logging initialized (console + file in %s).", log_dir)
