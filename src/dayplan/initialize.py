# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from dayplan import configuration
from dayplan.repository.configuration import CONFIGURATION_REPO
from dayplan.repository.preference import PREFERENCE_REPO
from dayplan.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_dark_mode(PREFERENCE_REPO.get_preferences()["dark_mode"])


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_DAYS_DIR.is_dir():
        configuration.DATA_DAYS_DIR.mkdir(parents=True, exist_ok=True)
