# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from fieldtask.configuration import Configuration
from fieldtask.logging import get_logger
from fieldtask.model.calendar_day import CalendarDay
from fieldtask.model.selection import SelectionState
from fieldtask.repository.configuration import CONFIGURATION_REPO
from fieldtask.repository.schedule import SCHEDULE_REPO
from fieldtask.service.calendar import generate_days, month_of_day
from fieldtask.service.localization import is_supported_language
from fieldtask.service.schedule import clock_entries, days_with_tasks, resolve_day
from fieldtask.service.selection import select, selection_from_config
from fieldtask.terminal.parse import parse_day, parse_language
from fieldtask.terminal.validate import validate_month, validate_year
from fieldtask.view.views.clock import clock_view
from fieldtask.view.views.day_selector import day_selector_view
from fieldtask.view.views.task import task_details_view

logger = get_logger(__name__)

DAY_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
LANGUAGE_HELP = "language code for task text, e.g. en or es"

DayArgument = Annotated[
    Optional[str],
    typer.Argument(parser=parse_day, help=DAY_HELP, show_default=False),
]
LanguageOption = Annotated[
    Optional[str],
    typer.Option("--language", "-l", parser=parse_language, help=LANGUAGE_HELP),
]
YearOption = Annotated[
    Optional[int], typer.Option("--year", "-y", callback=validate_year)
]
MonthOption = Annotated[
    Optional[int], typer.Option("--month", "-m", callback=validate_month)
]


def _selection(
    config: Configuration, day: Optional[CalendarDay], language: Optional[str]
) -> SelectionState:
    selection = select(selection_from_config(config), day=day, language=language)
    if not is_supported_language(selection["language"]):
        logger.warning(
            "language has no task translations", language=selection["language"]
        )
    return selection


def _calendar_month(
    config: Configuration,
    selection: SelectionState,
    day: Optional[CalendarDay],
    year: Optional[int],
    month: Optional[int],
) -> tuple[int, int]:
    """
    Month shown in the day selector.

    An explicit --year/--month wins, then the month of an explicit day, then
    the configured calendar month.
    """
    default_year = config["calendar_year"]
    default_month = config["calendar_month"]
    if day is not None:
        day_month = month_of_day(selection["selected_day"])
        if day_month is not None:
            default_year, default_month = day_month
    return (
        year if year is not None else default_year,
        month if month is not None else default_month,
    )


def days(
    year: YearOption = None,
    month: MonthOption = None,
    language: LanguageOption = None,
) -> None:
    """Show the selectable days of a month."""
    config = CONFIGURATION_REPO.get_config()
    selection = _selection(config, None, language)
    calendar_year, calendar_month = _calendar_month(
        config, selection, None, year, month
    )

    month_days = generate_days(calendar_year, calendar_month)
    console = Console()
    day_selector_view(
        console,
        month_days,
        selection["selected_day"],
        days_with_tasks(SCHEDULE_REPO, month_days),
        selection["language"],
    )


def tasks(
    day: DayArgument = None,
    language: LanguageOption = None,
    year: YearOption = None,
    month: MonthOption = None,
    hide_days: Annotated[
        bool, typer.Option("--hide-days", "-hd", help="Do not show the day selector")
    ] = False,
) -> None:
    """Show the task details for a day."""
    config = CONFIGURATION_REPO.get_config()
    selection = _selection(config, day, language)

    console = Console()
    if not hide_days:
        calendar_year, calendar_month = _calendar_month(
            config, selection, day, year, month
        )
        month_days = generate_days(calendar_year, calendar_month)
        day_selector_view(
            console,
            month_days,
            selection["selected_day"],
            days_with_tasks(SCHEDULE_REPO, month_days),
            selection["language"],
        )

    task_details_view(
        console,
        selection["selected_day"],
        resolve_day(SCHEDULE_REPO, selection),
        selection["language"],
    )


def clock(
    day: DayArgument = None,
    language: LanguageOption = None,
) -> None:
    """Show the clock log for a day."""
    config = CONFIGURATION_REPO.get_config()
    selection = _selection(config, day, language)

    console = Console()
    clock_view(
        console,
        selection["selected_day"],
        clock_entries(SCHEDULE_REPO, selection["selected_day"], selection["language"]),
        selection["language"],
    )
