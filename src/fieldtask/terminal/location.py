# SPDX-License-Identifier: MIT

import threading
from typing import Annotated, Optional

import typer
from rich.console import Console

from fieldtask.model.location import DEFAULT_LOCATION, LocationUnavailable
from fieldtask.service.location import LocationChannel
from fieldtask.terminal.validate import validate_latitude, validate_longitude


def locate(
    latitude: Annotated[
        Optional[float],
        typer.Option("--latitude", "-lat", callback=validate_latitude),
    ] = None,
    longitude: Annotated[
        Optional[float],
        typer.Option("--longitude", "-lon", callback=validate_longitude),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option(
            "--timeout",
            "-to",
            min=0,
            help="Seconds to wait for a location fix (waits indefinitely if unset)",
        ),
    ] = None,
) -> None:
    """Resolve the current location, falling back to the office location."""
    if (latitude is None) != (longitude is None):
        raise typer.BadParameter("--latitude and --longitude must be given together")

    channel = LocationChannel()
    provider: Optional[threading.Thread] = None
    if latitude is not None and longitude is not None:
        # Fixes arrive on the provider's thread, as a device callback would
        provider = threading.Thread(
            target=channel.deliver, args=(latitude, longitude), daemon=True
        )
        provider.start()
    else:
        channel.mark_unavailable()

    location = channel.result(timeout)
    if provider is not None:
        # Provider threads are not left running past the command
        provider.join(timeout)

    console = Console()
    if isinstance(location, LocationUnavailable):
        console.print("[bright_black]Location unavailable, using office location[/bright_black]")
        location = DEFAULT_LOCATION
    console.print(f"{location['latitude']:.4f}, {location['longitude']:.4f}")
