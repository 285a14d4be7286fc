"""
Pytest configuration and shared fixtures.
"""

from copy import deepcopy

import pytest
from typer.testing import CliRunner

from fieldtask import configuration
from fieldtask.initialize import initialize
from fieldtask.logging import setup_logging
from fieldtask.repository.configuration import CONFIGURATION_REPO
from fieldtask.repository.schedule import StaticScheduleRepository
from fieldtask.seed import SEED_SCHEDULE
from fieldtask.view import state as view_state


@pytest.fixture(autouse=True)
def quiet_logging():
    setup_logging(log_level="WARNING")
    view_state.set_show_header(True)
    yield
    view_state.set_show_header(True)


@pytest.fixture
def seed_schedule():
    """Deep copy of the built-in December 2024 schedule."""
    return deepcopy(SEED_SCHEDULE)


@pytest.fixture
def seed_repository(seed_schedule):
    return StaticScheduleRepository(seed_schedule)


@pytest.fixture
def sample_task():
    """A single task record with English and Spanish text."""
    return {
        "title": {"en": "Sample Inspection", "es": "Inspección de muestra"},
        "time": "7:45 AM",
        "description": {
            "en": "Walk the perimeter fence.",
            "es": "Recorrer la cerca perimetral.",
        },
        "status": "stopped",
    }


@pytest.fixture
def app_paths(tmp_path, monkeypatch):
    """Point config and data paths at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(
        configuration, "DATA_SCHEDULE_PATH", data_path / "schedule.yaml"
    )
    CONFIGURATION_REPO.reset()
    yield tmp_path
    CONFIGURATION_REPO.reset()


@pytest.fixture
def cli(app_paths, seed_repository, monkeypatch):
    """Initialized application with the seed schedule, and a CLI runner."""
    initialize()
    setup_logging(log_level="WARNING")
    monkeypatch.setattr(
        "fieldtask.terminal.schedule.SCHEDULE_REPO", seed_repository
    )
    return CliRunner()
