from os import getenv

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TIMEZONE = "Asia/Tokyo"


def default_timezone() -> str:
    return getenv("POWERLOG_TIMEZONE") or DEFAULT_TIMEZONE


def log_level() -> str:
    return (getenv("POWERLOG_LOG_LEVEL") or "INFO").upper()


def log_file():
    # unset or empty means console only
    return getenv("POWERLOG_LOG_FILE") or None
