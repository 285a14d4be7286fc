# SPDX-License-Identifier: MIT

from fieldtask.configuration import DEFAULT_LANGUAGE, DEFAULT_SELECTED_DAY
from fieldtask.model.selection import SelectionState


def get_selection_template() -> SelectionState:
    return {
        "selected_day": DEFAULT_SELECTED_DAY,
        "language": DEFAULT_LANGUAGE,
    }
