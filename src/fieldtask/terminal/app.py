# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from fieldtask.terminal import configuration
from fieldtask.terminal.custom_typer import OrderedAliasedTyperGroup
from fieldtask.terminal.location import locate
from fieldtask.terminal.schedule import clock, days, tasks
from fieldtask.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="fieldtask - Field inspection schedule in the CLI",
    no_args_is_help=True,
)
app.command(name="tasks, t")(tasks)
app.command(name="clock, cl")(clock)
app.command(name="days, d")(days)
app.command(name="locate, lo")(locate)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    fieldtask - Field inspection schedule in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
