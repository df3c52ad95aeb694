# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskgate import configuration


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
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.get_default_configuration()
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if not isinstance(self._config, dict):
            raise ValueError(
                f"{configuration.APP_CONFIG_PATH} does not contain a configuration mapping"
            )

        # Back-fill keys added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def clear(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        default_task_type: Optional[str] = None,
        deadline_display_format: Optional[str] = None,
        log_level: Optional[str] = None,
        log_to_file: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if default_task_type is not None:
            self.config["default_task_type"] = default_task_type
        if deadline_display_format is not None:
            self.config["deadline_display_format"] = deadline_display_format
        if log_level is not None:
            self.config["log_level"] = log_level
        if log_to_file is not None:
            self.config["log_to_file"] = log_to_file


CONFIGURATION_REPO = ConfigurationRepository()
