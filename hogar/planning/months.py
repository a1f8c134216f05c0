"""Calendar month arithmetic."""

import calendar
from datetime import date


def add_months(day: date, months: int) -> date:
    """
    Move `day` forward by whole calendar months, rolling the year over.

    The day of month is clamped to the last day of the target month, so
    January 31 plus one month is the last day of February.
    """
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
