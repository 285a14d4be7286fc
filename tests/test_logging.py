import json

from fieldtask.logging import get_logger, setup_logging


def test_json_output_writes_one_object_per_event_to_stderr(capsys):
    setup_logging(json_output=True, log_level="INFO")

    get_logger("fieldtask.test").info("schedule loaded", days=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "schedule loaded"
    assert event["days"] == 3
    assert event["level"] == "info"
    assert "timestamp" in event


def test_console_output_filters_below_level(capsys):
    setup_logging(log_level="WARNING")

    logger = get_logger("fieldtask.test")
    logger.info("hidden event")
    logger.warning("schedule file not found", path="/missing.yaml")

    err = capsys.readouterr().err
    assert "hidden event" not in err
    assert "schedule file not found" in err
    assert "/missing.yaml" in err
