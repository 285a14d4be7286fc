# SPDX-License-Identifier: MIT

from collections.abc import Iterable
from typing import Any

from fieldtask.model.calendar_day import CalendarDay
from fieldtask.model.selection import SelectionState
from fieldtask.model.task import (
    ClockEntry,
    LanguageCode,
    LocalizedText,
    TaskDisplay,
    TaskRecord,
)
from fieldtask.model.task_status import StatusTier, TaskStatus
from fieldtask.repository.schedule import ScheduleRepository

_STATUS_TIERS: dict[str, str] = {
    TaskStatus.FINISHED: StatusTier.SUCCESS,
    TaskStatus.NOT_DONE: StatusTier.DANGER,
    TaskStatus.STOPPED: StatusTier.WARNING,
    TaskStatus.FUTURE: StatusTier.INFO,
}


def tasks_for(index: ScheduleRepository, day: CalendarDay) -> list[TaskRecord]:
    """Tasks scheduled on a day in stored order; an empty list if there are none."""
    return index.get(day)


def localized(text: LocalizedText, language: LanguageCode) -> str:
    """Text for exactly this language, or an empty string. Never falls back."""
    if not isinstance(text, dict) or not isinstance(language, str):
        return ""
    return text.get(language) or ""


def color_for(status: Any) -> str:
    """Display tier of a status. Unrecognized statuses map to the neutral tier."""
    if not isinstance(status, str):
        return StatusTier.NEUTRAL
    return _STATUS_TIERS.get(status, StatusTier.NEUTRAL)


def resolve_display(task: TaskRecord, language: LanguageCode) -> TaskDisplay:
    return {
        "title": localized(task.get("title", {}), language),
        "time": task.get("time", ""),
        "description": localized(task.get("description", {}), language),
        "status": task.get("status", TaskStatus.UNKNOWN),
        "tier": color_for(task.get("status")),
    }


def resolve_clock_entry(task: TaskRecord, language: LanguageCode) -> ClockEntry:
    return {
        "title": localized(task.get("title", {}), language),
        "time": task.get("time", ""),
    }


def resolve_day(
    index: ScheduleRepository, selection: SelectionState
) -> list[TaskDisplay]:
    return [
        resolve_display(task, selection["language"])
        for task in tasks_for(index, selection["selected_day"])
    ]


def clock_entries(
    index: ScheduleRepository, day: CalendarDay, language: LanguageCode
) -> list[ClockEntry]:
    return [resolve_clock_entry(task, language) for task in tasks_for(index, day)]


def days_with_tasks(
    index: ScheduleRepository, days: Iterable[CalendarDay]
) -> set[CalendarDay]:
    return {day for day in days if index.has_tasks(day)}
