"""
Datetime Utilities Module

Utilities for showing Canvas ISO 8601 timestamps in a local timezone and for
building the date window used when listing announcements.
"""

import os
import logging
from datetime import date, datetime, timedelta
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

logger = logging.getLogger("canvas_reader.datetime_utils")

# Default timezone for display (Eastern Time)
DEFAULT_TIMEZONE = "America/New_York"

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"

# How far back announcements are listed when the course has no start date
ANNOUNCEMENT_LOOKBACK_DAYS = 365


def display_timezone() -> str:
    return os.getenv("CANVAS_TIMEZONE") or DEFAULT_TIMEZONE


def format_timestamp(value: Optional[str], timezone: Optional[str] = None) -> str:
    """
    Format a Canvas timestamp for display.

    Canvas returns UTC datetimes such as "2024-03-01T15:00:00Z". Those are
    converted to the display timezone and shown as "YYYY-MM-DD HH:MM". Anything
    that is not a full ISO 8601 datetime (plain dates, free text) is returned
    unchanged.

    Args:
        value: Timestamp string from the API
        timezone: IANA timezone name (default: CANVAS_TIMEZONE or America/New_York)

    Returns:
        Display string, or "" if value is empty

    Examples:
        >>> format_timestamp("2024-03-01T15:00:00Z", "America/New_York")
        '2024-03-01 10:00'

        >>> format_timestamp("2024-03-01")
        '2024-03-01'
    """
    if not value:
        return ""
    if "T" not in value:
        return value

    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Not an ISO 8601 datetime, showing verbatim: {value}")
        return value

    if dt.tzinfo is None:
        return dt.strftime(DISPLAY_FORMAT)

    try:
        tz = ZoneInfo(timezone or display_timezone())
    except Exception as e:
        logger.warning(f"Unknown timezone {timezone!r}, using UTC: {e}")
        tz = ZoneInfo("UTC")
    return dt.astimezone(tz).strftime(DISPLAY_FORMAT)


def announcement_window(start_at: Optional[str], today: Optional[date] = None) -> Tuple[str, str]:
    """
    Return (start_date, end_date) for the announcements endpoint.

    The window opens at the course start date when known, otherwise
    ANNOUNCEMENT_LOOKBACK_DAYS before today, and closes today.

    Examples:
        >>> announcement_window("2024-01-08T05:00:00Z", date(2024, 3, 1))
        ('2024-01-08', '2024-03-01')
    """
    today = today or date.today()
    start = None
    if start_at:
        try:
            start = datetime.fromisoformat(start_at.replace("Z", "+00:00")).date()
        except ValueError:
            logger.warning(f"Could not parse course start date: {start_at}")
    if start is None or start > today:
        start = today - timedelta(days=ANNOUNCEMENT_LOOKBACK_DAYS)
    return start.isoformat(), today.isoformat()
