# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "dayplan"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_DAYS_DIR: Path = DATA_PATH / "days"
DATA_PREFERENCES_PATH: Path = DATA_PATH / "preferences.yaml"

WeekStart = Literal["sunday", "monday"]


class Configuration(TypedDict):
    data_path: Optional[str]
    week_start: WeekStart
    notes_debounce_ms: int
    zoom_debounce_ms: int
    min_zoom: float
    max_zoom: float
    default_focus_minutes: int
    log_level: str
    desktop_notifications: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "week_start": "sunday",
        "notes_debounce_ms": 1000,
        "zoom_debounce_ms": 300,
        "min_zoom": 0.5,
        "max_zoom": 3.0,
        "default_focus_minutes": 25,
        "log_level": "WARNING",
        "desktop_notifications": True,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_DAYS_DIR, DATA_PREFERENCES_PATH

    DATA_PATH = data_path
    DATA_DAYS_DIR = DATA_PATH / "days"
    DATA_PREFERENCES_PATH = DATA_PATH / "preferences.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(
        APP_CONFIG_PATH.read_text(), Loader=Loader
    )
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
