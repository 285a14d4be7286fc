# SPDX-License-Identifier: MIT

from fieldtask.model.task import TaskRecord
from fieldtask.model.task_status import TaskStatus


def get_task_template() -> TaskRecord:
    return {
        "title": {},
        "time": "",
        "description": {},
        "status": TaskStatus.UNKNOWN,
    }
