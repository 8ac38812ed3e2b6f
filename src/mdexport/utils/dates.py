#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/utils/dates.py
"""Date detection and ISO-8601 formatting for front matter values."""

from __future__ import annotations

import datetime
import re
from typing import Any, Optional

from mdexport.constants import DATE_SNIFF_FORMATS

# Wiki-native timestamps: YYYYMMDDhhmmss with optional milliseconds
_WIKI_TIMESTAMP_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})(\d{3})?$")
_ISO_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")


def parse_date(value: Any) -> Optional[datetime.datetime]:
    """Return ``value`` as a datetime if it looks like a calendar date.

    Accepts datetime and date objects, ISO-8601 strings (with ``Z`` or an
    offset), wiki timestamps such as ``20240131120000000`` and the formats in
    ``DATE_SNIFF_FORMATS``. Numbers and booleans are never dates.

    Parameters
    ----------
    value : Any
        Candidate value

    Returns
    -------
    datetime.datetime or None
        Parsed value, or None if it is not a valid date

    """
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    candidate = value.strip()
    if not candidate:
        return None

    if _ISO_PREFIX_RE.match(candidate):
        try:
            return datetime.datetime.fromisoformat(candidate.replace("Z", "+00:00"))
        except ValueError:
            pass

    match = _WIKI_TIMESTAMP_RE.match(candidate)
    if match:
        year, month, day, hour, minute, second, millis = match.groups()
        try:
            return datetime.datetime(
                int(year),
                int(month),
                int(day),
                int(hour),
                int(minute),
                int(second),
                int(millis or 0) * 1000,
                tzinfo=datetime.timezone.utc,
            )
        except ValueError:
            return None

    for fmt in DATE_SNIFF_FORMATS:
        try:
            return datetime.datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    return None


def to_iso_timestamp(value: datetime.datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


__all__ = ["parse_date", "to_iso_timestamp"]
