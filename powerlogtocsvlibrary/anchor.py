"""Start-time lookup for power logs.

The logger names its files ``powerlog-YYYYMMDD-HHMMSS.dat`` using local wall
clock time. Combined with a timezone this gives the absolute epoch time (in
milliseconds) of the first record, which the converter uses as the anchor of
the timestamp column.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Optional

import pytz

from .errors import UnresolvedAnchorError

logger = logging.getLogger("TIME")

FILE_NAME_PATTERN = re.compile(r"powerlog-(\d{8})-(\d{6})\.dat")
START_TIME_FORMAT = "%Y%m%d %H%M%S"


def lookup_timezone(timezone: str):
    try:
        return pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError as e:
        raise UnresolvedAnchorError(f"Invalid timezone string: {timezone}") from e


def extract_start_time(name: str) -> Optional[str]:
    """Return the embedded start time as ``"YYYYMMDD HHMMSS"``, if any."""
    match = FILE_NAME_PATTERN.search(name)
    if match is None:
        return None
    date, time = match.groups()
    return f"{date} {time}"


def to_unix_millis(text: str, timezone: str) -> int:
    tz = lookup_timezone(timezone)
    try:
        naive = datetime.strptime(text, START_TIME_FORMAT)
    except ValueError as e:
        raise UnresolvedAnchorError(f"Invalid datetime format: {text}") from e

    # Wall clock times inside a DST gap or fold resolve to standard time.
    local = tz.localize(naive, is_dst=False)
    return int(local.timestamp()) * 1000


def resolve_anchor(name: str, timezone: str) -> Optional[int]:
    """Return the start time of ``name`` in epoch milliseconds, or None.

    None means the converter falls back to relative timestamps; the reason is
    logged as a warning when the name or timezone could not be used.
    """
    try:
        lookup_timezone(timezone)
    except UnresolvedAnchorError as e:
        logger.warning(str(e))
        return None

    text = extract_start_time(name)
    if text is None:
        logger.info(f"No start time in file name {name}; using relative timestamps")
        return None

    try:
        anchor = to_unix_millis(text, timezone)
    except UnresolvedAnchorError as e:
        logger.warning(f"Invalid datetime format in file name: {name} ({e})")
        return None

    logger.debug(f"Resolved start time {text} ({timezone}) to {anchor}")
    return anchor
