# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import TypedDict

import platformdirs

APP_NAME = "taskgate"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"
LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)


class Configuration(TypedDict):
    default_task_type: str
    deadline_display_format: str
    log_level: str
    log_to_file: bool


def get_default_configuration() -> Configuration:
    return {
        "default_task_type": "other",
        "deadline_display_format": "DD/MM/YYYY",
        "log_level": "INFO",
        "log_to_file": False,
    }
