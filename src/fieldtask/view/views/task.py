# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from fieldtask.color import PLACEHOLDER_COLOR, tier_color
from fieldtask.model.task import TaskDisplay
from fieldtask.service.localization import Label, label, language_name
from fieldtask.view.views.header import header


def task_card(task: TaskDisplay) -> Panel:
    color = tier_color(task["tier"])

    body = Text()
    body.append(task["title"], style="bold")
    body.append("\n")
    body.append(task["time"], style="italic")
    if task["description"]:
        body.append("\n")
        body.append(task["description"])

    return Panel(body, box=box.ROUNDED, border_style=color, style=color)


def task_details_view(
    console: Console,
    selected_day: str,
    tasks: list[TaskDisplay],
    language: str = "en",
) -> None:
    """
    Display the task cards for the selected day.

    Args:
        console: Console to print to
        selected_day: Day key of the selected day
        tasks: Resolved tasks for the selected day, in schedule order
        language: Language used for the view chrome
    """
    header(
        console,
        label(Label.TASK_DETAILS_TITLE, language),
        f"{selected_day}  {label(Label.LANGUAGE, language)}: {language_name(language)}",
    )

    if len(tasks) == 0:
        console.print(
            Padding(
                f"[{PLACEHOLDER_COLOR}]{label(Label.NO_TASKS_AVAILABLE, language)}[/{PLACEHOLDER_COLOR}]",
                (1, 1),
            )
        )
        return

    for task in tasks:
        console.print(task_card(task))
