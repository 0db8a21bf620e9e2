# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

BadgeState = Literal["none", "all-complete", "partial-complete", "none-complete"]


class CalendarCount(TypedDict):
    total: int
    completed: int
    has_notes: bool
