# SPDX-License-Identifier: MIT

from typing import TypedDict


class Preferences(TypedDict):
    zoom_level: float
    dark_mode: bool
