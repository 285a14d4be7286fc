# SPDX-License-Identifier: MIT

from typing import Optional

from fieldtask.configuration import Configuration
from fieldtask.model.calendar_day import CalendarDay
from fieldtask.model.selection import SelectionState
from fieldtask.model.task import LanguageCode
from fieldtask.template.selection import get_selection_template


def select(
    selection: SelectionState,
    day: Optional[CalendarDay] = None,
    language: Optional[LanguageCode] = None,
) -> SelectionState:
    """Return a new selection with the given day and/or language changed."""
    new_selection: SelectionState = {
        "selected_day": selection["selected_day"],
        "language": selection["language"],
    }
    if day is not None:
        new_selection["selected_day"] = day
    if language is not None:
        new_selection["language"] = language
    return new_selection


def selection_from_config(config: Configuration) -> SelectionState:
    selection = get_selection_template()
    return select(
        selection,
        day=config.get("selected_day"),
        language=config.get("language"),
    )
