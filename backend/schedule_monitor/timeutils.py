"""
Time helpers
Relative schedule labels, UTC offset shifts and delay arithmetic
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from .models import PLACEHOLDER

STRICT_HHMM = re.compile(r"^\d{2}:\d{2}$")
CLOCK_TEXT = re.compile(r"^\d{1,2}:\d{2}$")


def convert_time(time_str: str, from_utc_offset: int, to_utc_offset: int) -> str:
    """Shift an HH:MM time between UTC offsets. Anything not HH:MM is returned unchanged."""
    if not isinstance(time_str, str) or not STRICT_HHMM.match(time_str):
        return time_str

    hours, minutes = (int(part) for part in time_str.split(":"))
    new_hour = (hours + (to_utc_offset - from_utc_offset)) % 24
    if new_hour < 0:
        new_hour += 24

    return f"{new_hour:02d}:{minutes:02d}"


def normalize_time_label(label: Optional[str], now: datetime) -> str:
    """
    Turn a schedule time label into HH:MM.

    "in 12 minutes" / "12'" -> now + 12 minutes
    "20:30" / "9:05"        -> kept, zero-padded
    missing                 -> "N/A"
    """
    if label is None:
        return PLACEHOLDER
    label = label.strip()
    if not label:
        return PLACEHOLDER
    if CLOCK_TEXT.match(label):
        hours, minutes = label.split(":")
        return f"{int(hours):02d}:{minutes}"

    minutes_match = re.search(r"\d+", label)
    if not minutes_match:
        return label

    start = now + timedelta(minutes=int(minutes_match.group(0)))
    return start.strftime("%H:%M")


def scheduled_datetime(time_str: str, now: datetime) -> Optional[datetime]:
    """Place an H:MM/HH:MM time on today's date. None if it can't be parsed."""
    if not isinstance(time_str, str) or not CLOCK_TEXT.match(time_str.strip()):
        return None
    hours, minutes = (int(part) for part in time_str.strip().split(":"))
    if hours > 23 or minutes > 59:
        return None
    return now.replace(hour=hours, minute=minutes, second=0, microsecond=0)


def minutes_since(time_str: str, now: datetime) -> Optional[int]:
    """Whole minutes elapsed since the scheduled time today (negative if still ahead)."""
    start = scheduled_datetime(time_str, now)
    if start is None:
        return None
    return int((now - start).total_seconds() // 60)


def site_now(utc_offset: int) -> datetime:
    """Current wall-clock time at the site's UTC offset, as a naive datetime."""
    return datetime.now(timezone(timedelta(hours=utc_offset))).replace(tzinfo=None)


def utc_timestamp(site_time: datetime, utc_offset: int) -> str:
    """ISO-8601 UTC timestamp for a naive site-local datetime."""
    aware = site_time.replace(tzinfo=timezone(timedelta(hours=utc_offset)))
    return aware.astimezone(timezone.utc).isoformat()
