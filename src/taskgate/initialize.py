# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from taskgate import configuration
from taskgate.logging_setup import setup_logging
from taskgate.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_file()

    config = CONFIGURATION_REPO.get_config()
    console_level = logging.getLevelNamesMapping().get(
        config["log_level"].upper(), logging.INFO
    )
    setup_logging(
        console_level=console_level,
        log_dir=configuration.LOG_PATH if config["log_to_file"] else None,
    )


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
