# SPDX-License-Identifier: MIT

from collections.abc import Collection

from rich.columns import Columns
from rich.console import Console
from rich.text import Text

from fieldtask.color import DAY_WITH_TASKS_COLOR, EMPTY_DAY_COLOR, SELECTED_DAY_COLOR
from fieldtask.model.calendar_day import CalendarDay
from fieldtask.time import day_key_to_display_day, day_key_to_display_weekday


def day_cell(day: CalendarDay, selected: bool, has_tasks: bool, language: str) -> Text:
    """A two line cell: day of month over abbreviated weekday."""
    if selected:
        style = SELECTED_DAY_COLOR
    elif has_tasks:
        style = DAY_WITH_TASKS_COLOR
    else:
        style = EMPTY_DAY_COLOR

    cell = Text(justify="center", style=style)
    cell.append(f" {day_key_to_display_day(day)} \n")
    cell.append(f" {day_key_to_display_weekday(day, language)} ")
    return cell


def day_selector_view(
    console: Console,
    days: list[CalendarDay],
    selected_day: CalendarDay,
    days_with_tasks: Collection[CalendarDay],
    language: str = "en",
) -> None:
    """
    Display the horizontal strip of selectable days for a month.

    The selected day is highlighted, days with tasks are emphasised and days
    without tasks are dimmed.
    """
    if len(days) == 0:
        return

    cells = [
        day_cell(day, day == selected_day, day in days_with_tasks, language)
        for day in days
    ]
    console.print(Columns(cells, padding=(0, 1)))
