# SPDX-License-Identifier: MIT

import re
from typing import Optional

import typer

from fieldtask.model.calendar_day import CalendarDay
from fieldtask.time import date_from_day_key_optional, date_to_day_key, today_local


def parse_day(day_param: Optional[str | int]) -> Optional[CalendarDay]:
    """
    Parse a day argument into a YYYY-MM-DD day key.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) or a signed
    day offset from today such as 1 or -1.
    """
    if day_param is None:
        return None

    day = str(day_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", day):
        date = date_from_day_key_optional(day)
        if date is None:
            raise typer.BadParameter(f"Not a calendar date: '{day}'")
        return date_to_day_key(date)

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^[+-]?\d+$", day):
        try:
            return date_to_day_key(today_local().add(days=int(day)))
        except (ValueError, OverflowError) as e:
            raise typer.BadParameter(f"Invalid day offset: {e}")

    if day == "today" or day == "t":
        return date_to_day_key(today_local())
    if day == "yesterday" or day == "y":
        return date_to_day_key(today_local().subtract(days=1))
    if day == "tomorrow" or day == "o":
        return date_to_day_key(today_local().add(days=1))
    raise typer.BadParameter(
        "Incorrect day format (valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)"
    )


def parse_language(language_param: Optional[str]) -> Optional[str]:
    if language_param is None:
        return None
    return language_param.strip().lower()

