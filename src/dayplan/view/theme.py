# SPDX-License-Identifier: MIT

from typing import TypedDict

from dayplan.model.calendar_count import BadgeState
from dayplan.view.state import get_dark_mode


class Palette(TypedDict):
    title: str
    accent: str
    muted: str
    completed: str
    selected: str
    today: str
    other_month: str
    badges: dict[BadgeState, str]


LIGHT_PALETTE: Palette = {
    "title": "bold dark_orange",
    "accent": "blue",
    "muted": "grey50",
    "completed": "grey62 strike",
    "selected": "bold black on gold1",
    "today": "bold underline",
    "other_month": "grey62",
    "badges": {
        "none": "",
        "all-complete": "bold green4",
        "partial-complete": "bold dark_orange3",
        "none-complete": "bold red3",
    },
}

DARK_PALETTE: Palette = {
    "title": "bold orange1",
    "accent": "plum1",
    "muted": "grey50",
    "completed": "bright_black strike",
    "selected": "bold black on plum1",
    "today": "bold underline",
    "other_month": "grey39",
    "badges": {
        "none": "",
        "all-complete": "bold green",
        "partial-complete": "bold yellow",
        "none-complete": "bold red",
    },
}


def get_palette() -> Palette:
    if get_dark_mode():
        return DARK_PALETTE
    return LIGHT_PALETTE
