# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from fieldtask import configuration
from fieldtask.repository.configuration import CONFIGURATION_REPO
from fieldtask.service.localization import language_name
from fieldtask.terminal.custom_typer import AliasedTyperGroup
from fieldtask.terminal.parse import parse_day, parse_language
from fieldtask.terminal.validate import validate_log_level, validate_month, validate_year

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "language", f"{config['language']} ({language_name(config['language'])})"
    )
    table.add_row("selected_day", config["selected_day"])
    table.add_row("calendar_year", str(config["calendar_year"]))
    table.add_row("calendar_month", str(config["calendar_month"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("schedule_path", str(configuration.DATA_SCHEDULE_PATH))
    table.add_row("log_level", config.get("log_level", "WARNING"))
    table.add_row(
        "log_json",
        "✓ Enabled" if config.get("log_json", False) else "✗ Disabled",
    )

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set(
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", parser=parse_language),
    ] = None,
    selected_day: Annotated[
        Optional[str],
        typer.Option(
            "--selected-day",
            "-d",
            parser=parse_day,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    calendar_year: Annotated[
        Optional[int],
        typer.Option("--calendar-year", "-y", callback=validate_year),
    ] = None,
    calendar_month: Annotated[
        Optional[int],
        typer.Option("--calendar-month", "-m", callback=validate_month),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory for the schedule data file"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Reset data path to the default"),
    ] = False,
    schedule_path: Annotated[
        Optional[str],
        typer.Option("--schedule-path", help="Read the schedule from this YAML file"),
    ] = None,
    remove_schedule_path: Annotated[
        bool,
        typer.Option(
            "--remove-schedule-path", help="Read the schedule from the data path"
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
    log_json: Annotated[
        Optional[bool],
        typer.Option("--log-json/--no-log-json", help="Output logs as JSON"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if data_path is not None and remove_data_path:
        Console().print("[red]Cannot set and remove the data path at once[/red]")
        raise typer.Exit(1)
    if schedule_path is not None and remove_schedule_path:
        Console().print("[red]Cannot set and remove the schedule path at once[/red]")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        language=language,
        selected_day=selected_day,
        calendar_year=calendar_year,
        calendar_month=calendar_month,
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        schedule_path=schedule_path,
        remove_schedule_path=remove_schedule_path,
        log_level=log_level,
        log_json=log_json,
    )
    CONFIGURATION_REPO.flush()

    view()
