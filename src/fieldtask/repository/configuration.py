# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from fieldtask import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Back-fill any setting added after the config file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Drop the cached config so the next access re-reads the file."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        language: Optional[str] = None,
        selected_day: Optional[str] = None,
        calendar_year: Optional[int] = None,
        calendar_month: Optional[int] = None,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        schedule_path: Optional[str] = None,
        remove_schedule_path: bool = False,
        log_level: Optional[str] = None,
        log_json: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if language is not None:
            self.config["language"] = language
        if selected_day is not None:
            self.config["selected_day"] = selected_day
        if calendar_year is not None:
            self.config["calendar_year"] = calendar_year
        if calendar_month is not None:
            self.config["calendar_month"] = calendar_month
        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if schedule_path is not None:
            self.config["schedule_path"] = schedule_path
        if remove_schedule_path:
            self.config["schedule_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level
        if log_json is not None:
            self.config["log_json"] = log_json


CONFIGURATION_REPO = ConfigurationRepository()
