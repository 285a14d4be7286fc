# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from fieldtask.model.calendar_day import CalendarDay

DAY_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_day_key(date: pendulum.Date) -> CalendarDay:
    # isoformat zero-pads years below 1000, keeping keys sortable
    return date.isoformat()


def date_from_day_key(day: CalendarDay) -> pendulum.Date:
    match = DAY_KEY_PATTERN.match(day)
    if match is None:
        raise ValueError(f"not a YYYY-MM-DD day key: {day!r}")
    year, month, day_of_month = (int(part) for part in match.groups())
    return pendulum.date(year, month, day_of_month)


def date_from_day_key_optional(day: CalendarDay) -> Optional[pendulum.Date]:
    """Parse a day key, returning None when it is not a valid calendar date."""
    try:
        return date_from_day_key(day)
    except (ValueError, TypeError):
        return None


def day_key_to_display_day(day: CalendarDay) -> str:
    """Two digit day of month, e.g. '12'. Unparseable keys are returned as is."""
    date = date_from_day_key_optional(day)
    if date is None:
        return day
    return date.format("DD")


def day_key_to_display_weekday(day: CalendarDay, language: str = "en") -> str:
    """Abbreviated weekday, e.g. 'Thu'. Unparseable keys are returned as is."""
    date = date_from_day_key_optional(day)
    if date is None:
        return day
    return date.format("ddd", locale=language_to_locale(language))


def day_key_to_display_long_date(day: CalendarDay, language: str = "en") -> str:
    """Long date, e.g. 'December 12, 2024'. Unparseable keys are returned as is."""
    date = date_from_day_key_optional(day)
    if date is None:
        return day
    if language == "es":
        return date.format("D [de] MMMM [de] YYYY", locale="es")
    return date.format("MMMM D, YYYY", locale="en")


def language_to_locale(language: str) -> str:
    if language in ("en", "es"):
        return language
    return "en"
