import threading

from fieldtask.model.location import LOCATION_UNAVAILABLE, LocationUnavailable
from fieldtask.service.location import LocationChannel


def test_first_delivery_wins():
    channel = LocationChannel()

    assert channel.deliver(33.78, -118.19)
    assert not channel.deliver(1.0, 2.0)

    assert channel.is_stopped
    assert channel.result() == {"latitude": 33.78, "longitude": -118.19}


def test_unavailable_signal():
    channel = LocationChannel()

    assert channel.mark_unavailable()
    assert not channel.deliver(1.0, 2.0)

    assert channel.result() is LOCATION_UNAVAILABLE


def test_unavailable_after_delivery_is_ignored():
    channel = LocationChannel()
    channel.deliver(1.0, 2.0)

    assert not channel.mark_unavailable()
    assert channel.result() == {"latitude": 1.0, "longitude": 2.0}


def test_timeout_without_delivery_is_unavailable():
    channel = LocationChannel()

    result = channel.result(timeout=0.01)

    assert isinstance(result, LocationUnavailable)
    assert not channel.is_stopped


def test_delivery_from_another_thread():
    channel = LocationChannel()
    provider = threading.Thread(target=channel.deliver, args=(10, 20))
    provider.start()

    result = channel.result(timeout=5)
    provider.join()

    assert result == {"latitude": 10.0, "longitude": 20.0}


def test_concurrent_deliveries_resolve_once():
    channel = LocationChannel()
    outcomes: list[bool] = []
    lock = threading.Lock()

    def deliver(value: float) -> None:
        delivered = channel.deliver(value, value)
        with lock:
            outcomes.append(delivered)

    providers = [threading.Thread(target=deliver, args=(i,)) for i in range(8)]
    for provider in providers:
        provider.start()
    for provider in providers:
        provider.join()

    assert outcomes.count(True) == 1
    location = channel.result(timeout=1)
    assert location["latitude"] == location["longitude"]
