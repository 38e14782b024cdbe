"""
Time Tool

Date/time parsing for observation timestamps using only the standard
library. Upstream feeds emit ISO strings without seconds
("2026-02-05T09:00"), archives emit split NDBC columns; both end up as
naive datetimes.

Functions:
- parse_iso_datetime(value): Parse ISO datetime string to datetime object
- ndbc_datetime(year, month, day, hour, minute): Build a datetime from NDBC columns

All functions are safe (never raise on bad input, return None instead).
"""

import logging
from datetime import datetime
from typing import Any, Optional

logger = logging.getLogger(__name__)


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    """
    Parse ISO datetime string to a naive datetime.

    Supports formats:
    - "2026-02-05T00:30"
    - "2026-02-05T00:30:00Z"
    - "2026-02-05 00:30:00"
    - "2026-02-05T00:30:00+01:00" (offset dropped)

    Args:
        value: datetime, string, or other value

    Returns:
        datetime object or None if parsing fails

    Example:
        >>> parse_iso_datetime("2026-02-05T09:00").hour
        9
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value

    value_str = str(value).strip()

    if not value_str:
        return None

    formats = [
        "%Y-%m-%dT%H:%M",              # 2026-02-05T00:30 (Open-Meteo)
        "%Y-%m-%dT%H:%M:%SZ",          # 2026-02-05T00:30:00Z
        "%Y-%m-%dT%H:%M:%S",           # 2026-02-05T00:30:00
        "%Y-%m-%d %H:%M:%S",           # 2026-02-05 00:30:00
        "%Y-%m-%d %H:%M",              # 2026-02-05 00:30
    ]

    for fmt in formats:
        try:
            return datetime.strptime(value_str, fmt)
        except ValueError:
            continue

    try:
        if value_str.endswith('Z'):
            value_str = value_str[:-1]
        return datetime.fromisoformat(value_str).replace(tzinfo=None)
    except ValueError:
        pass

    logger.debug(f"Failed to parse datetime: {value}")
    return None


def ndbc_datetime(year: Any, month: Any, day: Any, hour: Any = 0, minute: Any = 0) -> Optional[datetime]:
    """
    Build a datetime from NDBC split columns.

    Two-digit years (pre-1999 "YY" files) are read as 19xx.

    Returns:
        datetime or None when any component is missing or out of range

    Example:
        >>> ndbc_datetime("2012", "01", "01", "00", "50")
        datetime.datetime(2012, 1, 1, 0, 50)
        >>> ndbc_datetime("98", "7", "4") is not None
        True
    """
    try:
        parts = [int(float(p)) for p in (year, month, day, hour or 0, minute or 0)]
    except (TypeError, ValueError):
        return None

    if parts[0] < 100:
        parts[0] += 1900

    try:
        return datetime(*parts)
    except ValueError:
        logger.debug(f"Invalid NDBC date parts: {parts}")
        return None
