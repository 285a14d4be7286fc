# SPDX-License-Identifier: MIT

import threading
from typing import Optional

from fieldtask.logging import get_logger
from fieldtask.model.location import (
    LOCATION_UNAVAILABLE,
    Location,
    LocationUnavailable,
)

logger = get_logger(__name__)


class LocationChannel:
    """
    One-shot delivery of a device location.

    The first delivery (or unavailable signal) resolves the channel; the
    channel is stopped from then on and later deliveries are dropped.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._resolved = threading.Event()
        self._value: Location | LocationUnavailable = LOCATION_UNAVAILABLE

    @property
    def is_stopped(self) -> bool:
        return self._resolved.is_set()

    def deliver(self, latitude: float, longitude: float) -> bool:
        with self._lock:
            if self._resolved.is_set():
                logger.debug(
                    "location update ignored", latitude=latitude, longitude=longitude
                )
                return False
            self._value = {"latitude": float(latitude), "longitude": float(longitude)}
            self._resolved.set()
        logger.info("location received", latitude=latitude, longitude=longitude)
        return True

    def mark_unavailable(self) -> bool:
        with self._lock:
            if self._resolved.is_set():
                return False
            self._value = LOCATION_UNAVAILABLE
            self._resolved.set()
        logger.info("location unavailable")
        return True

    def result(
        self, timeout: Optional[float] = None
    ) -> Location | LocationUnavailable:
        """Wait for the channel to resolve. A timeout yields LOCATION_UNAVAILABLE."""
        if not self._resolved.wait(timeout):
            logger.debug("location wait timed out", timeout=timeout)
            return LOCATION_UNAVAILABLE
        return self._value
