import logging
import sys
from logging.handlers import RotatingFileHandler

from . import settings

LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


# Color-coded console handler
class ColorFormatter(logging.Formatter):
    COLORS = {
        "DECODER": "\033[95m",  # magenta
        "TIME": "\033[94m",     # blue
        "CSV": "\033[92m",      # green
        "GENERAL": "\033[97m",  # white
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.name, "\033[97m")
        formatted = super().format(record)
        return f"{color}{formatted}{self.RESET}"


def setup_logging(level=None, log_file=None, stream=None):
    """Configure the root logger for a conversion run.

    Console output always goes to stderr (or ``stream``) because stdout may be
    carrying the CSV itself. Calling this again replaces the handlers it
    installed earlier instead of stacking new ones.
    """
    level = level or settings.log_level()
    if isinstance(level, str) and not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level}")
    log_file = log_file or settings.log_file()
    stream = stream or sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_powerlog", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    if hasattr(stream, "isatty") and stream.isatty():
        console_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._powerlog = True
    root_logger.addHandler(console_handler)

    if log_file:
        # Rotating file handler (keeps last 5 logs, each up to 5MB)
        file_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=5, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        file_handler._powerlog = True
        root_logger.addHandler(file_handler)

    return root_logger
