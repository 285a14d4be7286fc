# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from fieldtask.color import CLOCK_ENTRY_COLOR, PLACEHOLDER_COLOR
from fieldtask.model.task import ClockEntry
from fieldtask.service.localization import Label, label
from fieldtask.time import day_key_to_display_long_date
from fieldtask.view.views.header import header


def clock_view(
    console: Console,
    selected_day: str,
    entries: list[ClockEntry],
    language: str = "en",
) -> None:
    header(console, label(Label.CLOCK_TITLE, language))

    date = day_key_to_display_long_date(selected_day, language)
    heading = label(Label.CLOCK_TASKS_FOR, language, date=date)
    console.print(Padding(Text(heading, style="bold"), (1, 1, 0, 1)))

    if len(entries) == 0:
        console.print(
            Padding(
                f"[{PLACEHOLDER_COLOR}]{label(Label.CLOCK_NO_TASKS, language)}[/{PLACEHOLDER_COLOR}]",
                (1, 1),
            )
        )
        return

    clock_table = Table(box=box.SIMPLE)
    clock_table.add_column("task")
    clock_table.add_column("time")
    for entry in entries:
        clock_table.add_row(
            Text(entry["title"], style=CLOCK_ENTRY_COLOR),
            entry["time"],
        )
    console.print(clock_table)
