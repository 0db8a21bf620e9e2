# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from dayplan import configuration


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
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
            )

        if self._config is None:
            self._config = configuration.get_default_configuration()
            return

        # Migration: back-fill keys added after the config file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        week_start: Optional[configuration.WeekStart] = None,
        notes_debounce_ms: Optional[int] = None,
        zoom_debounce_ms: Optional[int] = None,
        min_zoom: Optional[float] = None,
        max_zoom: Optional[float] = None,
        default_focus_minutes: Optional[int] = None,
        log_level: Optional[str] = None,
        desktop_notifications: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if week_start is not None:
            self.config["week_start"] = week_start
        if notes_debounce_ms is not None:
            self.config["notes_debounce_ms"] = notes_debounce_ms
        if zoom_debounce_ms is not None:
            self.config["zoom_debounce_ms"] = zoom_debounce_ms
        if min_zoom is not None:
            self.config["min_zoom"] = min_zoom
        if max_zoom is not None:
            self.config["max_zoom"] = max_zoom
        if default_focus_minutes is not None:
            self.config["default_focus_minutes"] = default_focus_minutes
        if log_level is not None:
            self.config["log_level"] = log_level
        if desktop_notifications is not None:
            self.config["desktop_notifications"] = desktop_notifications


CONFIGURATION_REPO = ConfigurationRepository()
