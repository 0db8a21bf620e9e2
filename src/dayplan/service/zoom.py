# SPDX-License-Identifier: MIT

import logging
import math

from dayplan.repository.preference import PreferenceRepository
from dayplan.service.debounce import DebounceChannel
from dayplan.template.preferences import DEFAULT_ZOOM_LEVEL

logger = logging.getLogger(__name__)

ZOOM_STEP = 0.1


class ZoomController:
    """Zoom level kept within limits, saved once repeated presses pause."""

    def __init__(
        self,
        repository: PreferenceRepository,
        min_zoom: float = 0.5,
        max_zoom: float = 3.0,
        debounce_ms: int = 300,
    ) -> None:
        self.repository = repository
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.channel = DebounceChannel("zoom", debounce_ms)
        self.level = self.__load_level()

    def __load_level(self) -> float:
        level = self.repository.get_preferences()["zoom_level"]
        if (
            not isinstance(level, (int, float))
            or math.isnan(level)
            or not self.min_zoom <= level <= self.max_zoom
        ):
            logger.warning("Invalid zoom level %r loaded, resetting to 1.0", level)
            return DEFAULT_ZOOM_LEVEL
        return float(level)

    def zoom_in(self) -> float:
        if self.level < self.max_zoom:
            self.level = round(min(self.max_zoom, self.level + ZOOM_STEP), 2)
            self.channel.schedule(self.save)
        return self.level

    def zoom_out(self) -> float:
        if self.level > self.min_zoom:
            self.level = round(max(self.min_zoom, self.level - ZOOM_STEP), 2)
            self.channel.schedule(self.save)
        return self.level

    async def reset(self) -> float:
        self.level = DEFAULT_ZOOM_LEVEL
        # An explicit reset must not be overwritten by a stale pending save
        self.channel.cancel()
        await self.save()
        return self.level

    async def save(self) -> None:
        self.repository.update_preferences(zoom_level=self.level)
        await self.repository.save()

    def percent(self) -> int:
        return round(self.level * 100)
