# SPDX-License-Identifier: MIT

from typing import TypedDict

from fieldtask.model.calendar_day import CalendarDay
from fieldtask.model.task import LanguageCode


class SelectionState(TypedDict):
    selected_day: CalendarDay
    language: LanguageCode
