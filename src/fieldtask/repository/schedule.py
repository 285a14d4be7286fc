# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from copy import deepcopy
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, TypeAlias

from yaml import YAMLError, dump, load

# Non-resolving loader: every scalar stays a string, so free-text times such
# as 8:00 and unquoted date keys are read exactly as written
try:
    from yaml import CBaseLoader as BaseLoader
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import BaseLoader, Dumper  # type: ignore[assignment]

from fieldtask import configuration
from fieldtask.logging import get_logger
from fieldtask.model.calendar_day import CalendarDay
from fieldtask.model.task import LocalizedText, TaskRecord
from fieldtask.template.task import get_task_template

logger = get_logger(__name__)

ScheduleIndex: TypeAlias = Mapping[CalendarDay, tuple[TaskRecord, ...]]


def freeze_schedule(
    schedule: Mapping[CalendarDay, Sequence[TaskRecord]],
) -> ScheduleIndex:
    """Copy a schedule into a read-only day -> task tuple mapping."""
    return MappingProxyType(
        {day: tuple(deepcopy(list(tasks))) for day, tasks in schedule.items()}
    )


class ScheduleRepository(ABC):
    """Read-only access to the tasks scheduled on each calendar day."""

    @property
    @abstractmethod
    def index(self) -> ScheduleIndex: ...

    def get(self, day: CalendarDay) -> list[TaskRecord]:
        """Tasks for a day in stored order, or an empty list."""
        tasks = self.index.get(day)
        if tasks is None:
            return []
        return deepcopy(list(tasks))

    def has_tasks(self, day: CalendarDay) -> bool:
        return len(self.index.get(day, ())) > 0

    def get_all_days(self) -> list[CalendarDay]:
        return sorted(self.index.keys())


class StaticScheduleRepository(ScheduleRepository):
    def __init__(self, schedule: Mapping[CalendarDay, Sequence[TaskRecord]]) -> None:
        self._index = freeze_schedule(schedule)

    @property
    def index(self) -> ScheduleIndex:
        return self._index


class YamlScheduleRepository(ScheduleRepository):
    """
    Schedule loaded once from a YAML file.

    The file path defaults to configuration.DATA_SCHEDULE_PATH, resolved on
    first access. A missing or malformed file yields an empty schedule.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._index: Optional[ScheduleIndex] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_SCHEDULE_PATH

    @property
    def index(self) -> ScheduleIndex:
        if self._index is None:
            self.__load_data()
        if self._index is None:
            raise ValueError()
        return self._index

    def __load_data(self) -> None:
        self._index = freeze_schedule(self.__read_schedule())

    def __read_schedule(self) -> dict[CalendarDay, list[TaskRecord]]:
        if not self.path.is_file():
            logger.warning("schedule file not found", path=str(self.path))
            return {}

        try:
            raw_data = load(self.path.read_text(encoding="utf-8"), Loader=BaseLoader)
        except (OSError, YAMLError) as e:
            logger.warning("schedule file unreadable", path=str(self.path), error=str(e))
            return {}

        if not isinstance(raw_data, dict) or not isinstance(
            raw_data.get("schedule"), dict
        ):
            logger.warning("schedule file has no schedule mapping", path=str(self.path))
            return {}

        schedule: dict[CalendarDay, list[TaskRecord]] = {}
        for raw_day, raw_tasks in raw_data["schedule"].items():
            day = str(raw_day)
            if not isinstance(raw_tasks, list):
                logger.warning("skipping day without task list", day=day)
                continue
            schedule[day] = [
                self.__convert_task_for_deserialization(raw_task)
                for raw_task in raw_tasks
                if isinstance(raw_task, dict)
            ]

        logger.debug("schedule loaded", path=str(self.path), days=len(schedule))
        return schedule

    def __convert_task_for_deserialization(self, raw_task: dict[str, Any]) -> TaskRecord:
        task = get_task_template()
        task["title"] = self.__convert_localized_text(raw_task.get("title"))
        task["description"] = self.__convert_localized_text(
            raw_task.get("description")
        )
        if raw_task.get("time") is not None:
            task["time"] = str(raw_task["time"])
        if raw_task.get("status") is not None:
            task["status"] = str(raw_task["status"])
        return task

    def __convert_localized_text(self, raw_text: Any) -> LocalizedText:
        if not isinstance(raw_text, dict):
            return {}
        return {
            str(language): str(text)
            for language, text in raw_text.items()
            if text is not None
        }


def write_schedule_file(
    path: Path, schedule: Mapping[CalendarDay, Sequence[TaskRecord]]
) -> None:
    serializable_schedule = {
        "schedule": {day: deepcopy(list(tasks)) for day, tasks in schedule.items()}
    }
    path.write_text(
        dump(serializable_schedule, Dumper=Dumper, allow_unicode=True, sort_keys=False),
        encoding="utf-8",
    )


SCHEDULE_REPO = YamlScheduleRepository()
