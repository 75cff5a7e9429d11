# moodtracker/domain/filters.py
from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from moodtracker.domain.models import JournalEntry, to_utc
from moodtracker.exceptions import EntryDataError

TIME_RANGES = ("day", "week", "month", "all")


def _one_month_earlier(now: datetime) -> datetime:
    # Mar 31 -> Feb 28/29: clamp the day to the previous month's length
    year, month = (now.year, now.month - 1) if now.month > 1 else (now.year - 1, 12)
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def filter_by_time_range(
    entries: Iterable[JournalEntry],
    time_range: str = "all",
    now: Optional[datetime] = None,
) -> List[JournalEntry]:
    """
    Keep the entries inside a time range, oldest first.

    - day  : same UTC calendar date as now
    - week : timestamp >= now - 7 days
    - month: timestamp >= now - 1 calendar month
    - all  : everything
    """
    if time_range not in TIME_RANGES:
        raise EntryDataError(
            f"Unknown time range '{time_range}'. Expected one of: {', '.join(TIME_RANGES)}"
        )

    now = to_utc(now) if now else datetime.now(timezone.utc)
    items = list(entries)

    if time_range == "day":
        today = now.date()
        items = [e for e in items if e.utc_timestamp.date() == today]
    elif time_range == "week":
        since = now - timedelta(days=7)
        items = [e for e in items if e.utc_timestamp >= since]
    elif time_range == "month":
        since = _one_month_earlier(now)
        items = [e for e in items if e.utc_timestamp >= since]

    return sorted(items, key=lambda e: e.utc_timestamp)
