# SPDX-License-Identifier: MIT

from dayplan.model.preferences import Preferences

DEFAULT_ZOOM_LEVEL = 1.0


def get_preferences_template() -> Preferences:
    return {
        "zoom_level": DEFAULT_ZOOM_LEVEL,
        "dark_mode": False,
    }
