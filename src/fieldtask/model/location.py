# SPDX-License-Identifier: MIT

from typing import TypedDict


class Location(TypedDict):
    latitude: float
    longitude: float


class LocationUnavailable:
    """Explicit signal that no location was, or will be, delivered."""

    def __repr__(self) -> str:
        return "LOCATION_UNAVAILABLE"


LOCATION_UNAVAILABLE = LocationUnavailable()

# Long Beach office, used to center the map when no fix is available
DEFAULT_LOCATION: Location = {"latitude": 33.7812, "longitude": -118.1892}
