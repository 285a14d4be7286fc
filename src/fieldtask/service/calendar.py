# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from fieldtask.logging import get_logger
from fieldtask.model.calendar_day import CalendarDay
from fieldtask.time import date_from_day_key_optional, date_to_day_key

logger = get_logger(__name__)


def generate_days(year: int, month: int) -> list[CalendarDay]:
    """
    Build the selectable day keys for a month, first to last.

    Any (year, month) pair the calendar cannot resolve yields an empty list.
    """
    try:
        start = pendulum.date(year, month, 1)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(
            "cannot resolve calendar month", year=year, month=month, error=str(e)
        )
        return []

    return [
        date_to_day_key(start.add(days=offset)) for offset in range(start.days_in_month)
    ]


def month_of_day(day: CalendarDay) -> Optional[tuple[int, int]]:
    """The (year, month) a day key falls in, or None for an invalid key."""
    date = date_from_day_key_optional(day)
    if date is None:
        return None
    return (date.year, date.month)
