# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from fieldtask import configuration
from fieldtask.logging import get_logger, setup_logging
from fieldtask.repository.configuration import CONFIGURATION_REPO
from fieldtask.repository.schedule import write_schedule_file
from fieldtask.seed import SEED_SCHEDULE
from fieldtask.view import state as view_state

logger = get_logger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    setup_logging(
        json_output=config.get("log_json", False),
        log_level=config.get("log_level", "WARNING"),
    )
    view_state.set_show_header(config["show_header"])

    __ensure_data_files()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    # Only seed the default location; a configured schedule_path is left as is
    default_schedule_path = configuration.DATA_PATH / "schedule.yaml"
    if (
        configuration.DATA_SCHEDULE_PATH == default_schedule_path
        and not default_schedule_path.is_file()
    ):
        write_schedule_file(default_schedule_path, SEED_SCHEDULE)
        logger.info("seed schedule written", path=str(default_schedule_path))
