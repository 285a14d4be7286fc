# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "fieldtask"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_SCHEDULE_PATH: Path = DATA_PATH / "schedule.yaml"

DEFAULT_LANGUAGE = "en"
DEFAULT_SELECTED_DAY = "2024-12-12"
DEFAULT_CALENDAR_YEAR = 2024
DEFAULT_CALENDAR_MONTH = 12


class Configuration(TypedDict):
    language: str
    selected_day: str
    calendar_year: int
    calendar_month: int
    show_header: bool
    data_path: Optional[str]
    schedule_path: NotRequired[Optional[str]]
    log_level: NotRequired[str]
    log_json: NotRequired[bool]


def get_default_configuration() -> Configuration:
    return {
        "language": DEFAULT_LANGUAGE,
        "selected_day": DEFAULT_SELECTED_DAY,
        "calendar_year": DEFAULT_CALENDAR_YEAR,
        "calendar_month": DEFAULT_CALENDAR_MONTH,
        "show_header": True,
        "data_path": None,
        "schedule_path": None,
        "log_level": "WARNING",
        "log_json": False,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the
    schedule repository is read.
    """
    global DATA_PATH, DATA_SCHEDULE_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_SCHEDULE_PATH = DATA_PATH / "schedule.yaml"

    schedule_path_setting = config.get("schedule_path")
    if schedule_path_setting is not None:
        DATA_SCHEDULE_PATH = Path(schedule_path_setting)
