# SPDX-License-Identifier: MIT

import atexit

from dayplan.repository.configuration import CONFIGURATION_REPO
from dayplan.repository.preference import PREFERENCE_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    PREFERENCE_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
