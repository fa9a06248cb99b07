"""Calendar-month arithmetic and unix timestamp bounds."""

import calendar
from datetime import date
from typing import TypeVar

D = TypeVar("D", bound=date)

# 9999-12-31T23:59:59Z, the last second datetime can represent
MAX_UNIX_SECONDS = 253402300799


def is_valid_unix_seconds(value: int) -> bool:
    return 0 <= value <= MAX_UNIX_SECONDS


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: D, months: int) -> D:
    """Shift a date/datetime by whole calendar months.

    When the original day does not exist in the target month the result is
    clamped to that month's last day: Jan 31 + 1 month is Feb 29 (leap) or
    Feb 28, never early March. Time of day and tzinfo are kept.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, days_in_month(year, month))
    return value.replace(year=year, month=month, day=day)
