"""Packed date/time codec for NML EXTENDEDDATA fields.

STARTDATE packs a calendar date as ``year << 16 | month << 8 | day``.
STARTTIME is a count of seconds since midnight. Inputs are not range
checked: out-of-range values decode to whatever the arithmetic yields.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from traktor_setlist.nml.models import NMLDate, NMLTime

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# STARTDATE
# ---------------------------------------------------------------------------

def decode_date(packed: int) -> NMLDate:
    """Unpack a STARTDATE integer into year/month/day."""
    return NMLDate(
        year=packed >> 16,
        month=(packed >> 8) % 256,
        day=packed % 256,
    )


def encode_date(date: NMLDate) -> int:
    """Inverse of decode_date()."""
    return date.year * 65536 + date.month * 256 + date.day


# ---------------------------------------------------------------------------
# STARTTIME
# ---------------------------------------------------------------------------

def _hours(total: float) -> int:
    return math.floor(total / 3600)


def _minutes(total: float) -> int:
    return math.floor((total - 3600 * _hours(total)) / 60)


def _seconds(total: float) -> int:
    # floor() drops any fractional part so components stay integral
    return math.floor(total % 60)


def decode_time(total_seconds: float) -> NMLTime:
    """Split a seconds count into hours/minutes/seconds.

    Uses floor division and floor modulo, so negative input yields a
    negative hour count with non-negative minutes and seconds.
    """
    return NMLTime(
        hours=_hours(total_seconds),
        minutes=_minutes(total_seconds),
        seconds=_seconds(total_seconds),
    )


def encode_time(time: NMLTime) -> int:
    """Inverse of decode_time() for non-negative integer input."""
    return time.hours * 3600 + time.minutes * 60 + time.seconds


def format_time(total_seconds: float, strip_hours: bool) -> str:
    """Format seconds as HH:MM:SS, or MM:SS when ``strip_hours`` is set."""
    hh = f"{_hours(total_seconds):02d}"
    mm = f"{_minutes(total_seconds):02d}"
    ss = f"{_seconds(total_seconds):02d}"
    if strip_hours:
        return f"{mm}:{ss}"
    return f"{hh}:{mm}:{ss}"


# ---------------------------------------------------------------------------
# Combined instant
# ---------------------------------------------------------------------------

def to_datetime(date: NMLDate, time: NMLTime) -> datetime | None:
    """Combine a decoded date and time into one naive datetime.

    Month and day overflow roll into the neighbouring months (month 13 is
    January of the next year, day 0 the last day of the previous month).
    Returns None if the instant is outside datetime's range.
    """
    year, month_index = divmod(date.year * 12 + date.month - 1, 12)
    try:
        base = datetime(year, month_index + 1, 1)
        return base + timedelta(
            days=date.day - 1,
            hours=time.hours,
            minutes=time.minutes,
            seconds=time.seconds,
        )
    except (ValueError, OverflowError) as exc:
        logger.warning(
            "Unrepresentable start instant %s %s: %s",
            date.model_dump(), time.model_dump(), exc,
        )
        return None
