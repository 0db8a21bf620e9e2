# SPDX-License-Identifier: MIT

import asyncio
from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from dayplan import configuration
from dayplan.model.preferences import Preferences
from dayplan.template.preferences import get_preferences_template


class PreferenceRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._preferences: Optional[Preferences] = None
        self.is_dirty = False

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_PREFERENCES_PATH

    @property
    def preferences(self) -> Preferences:
        if self._preferences is None:
            self.__load_data()
        if self._preferences is None:
            raise ValueError()
        return self._preferences

    def __load_data(self) -> None:
        preferences = get_preferences_template()
        if self.path.is_file():
            stored = load(self.path.read_text(), Loader=Loader)
            if stored is not None:
                preferences.update(stored)
        self._preferences = preferences

    def __save_data(self, preferences: Preferences) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump(dict(preferences), Dumper=Dumper))

    def flush(self) -> bool:
        if self._preferences is not None and self.is_dirty:
            self.__save_data(self._preferences)
            self.is_dirty = False
            return True
        return False

    async def save(self) -> bool:
        return await asyncio.to_thread(self.flush)

    def get_preferences(self) -> Preferences:
        return deepcopy(self.preferences)

    def update_preferences(
        self,
        zoom_level: Optional[float] = None,
        dark_mode: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if zoom_level is not None:
            self.preferences["zoom_level"] = zoom_level
        if dark_mode is not None:
            self.preferences["dark_mode"] = dark_mode


PREFERENCE_REPO = PreferenceRepository()
