"""
Date helpers for written/creation instants and release dates.

The data store hands out plain dates (``2025-11-21``) for written and release
dates and full ISO timestamps (``2025-11-21T18:04:11.532+00:00``) for record
creation. Everything is normalised to naive datetimes so that the era cutoff,
which is a wall-clock instant, compares cleanly against both.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union
import logging

from ..core.config import DISPLAY_CONFIG

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, None]


def parse_instant(value: DateLike) -> Optional[datetime]:
    """
    Parse a date or timestamp into a naive datetime.

    Plain dates become midnight of that day. Timezone-aware timestamps are
    converted to UTC before the offset is dropped.

    Args:
        value: ISO 8601 string, date, datetime or None

    Returns:
        Parsed datetime, or None if the value is empty or unparseable
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat() only learned the "Z" suffix in 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unparseable date value: {value!r}")
            return None
    else:
        logger.debug(f"Unsupported date type: {type(value).__name__}")
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_date(value: DateLike, fmt: Optional[str] = None) -> str:
    """
    Format a date for display (``MM/DD/YYYY`` by default).

    Args:
        value: Anything parse_instant() accepts
        fmt: Optional strftime format overriding DISPLAY_CONFIG

    Returns:
        Formatted date, or the configured unknown-date text
    """
    instant = parse_instant(value)
    if instant is None:
        return DISPLAY_CONFIG["UNKNOWN_DATE"]
    return instant.strftime(fmt or DISPLAY_CONFIG["DATE_FORMAT"])
