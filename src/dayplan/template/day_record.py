# SPDX-License-Identifier: MIT

from dayplan.model.day_record import DayRecord
from dayplan.time import DateKey


def get_day_record_template(date_key: DateKey) -> DayRecord:
    return {
        "date": date_key,
        "todos": [],
        "notes": "",
    }
