"""
Recurrence pattern value object for preventive maintenance.
"""

import calendar
from datetime import datetime, timedelta
from enum import Enum


def add_months(moment: datetime, months: int) -> datetime:
    """
    Shift a datetime by whole calendar months.

    The day of month is clamped to the last day of the target month, so
    January 31 plus one month lands on February 28 (29 in leap years).
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class RecurrencePattern(str, Enum):
    """Fixed interval at which a maintenance schedule comes due again."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    ANNUALLY = "Annually"

    def next_occurrence(self, moment: datetime) -> datetime:
        """Advance moment by exactly one unit of this recurrence."""
        if self is RecurrencePattern.DAILY:
            return moment + timedelta(days=1)
        if self is RecurrencePattern.WEEKLY:
            return moment + timedelta(days=7)
        if self is RecurrencePattern.MONTHLY:
            return add_months(moment, 1)
        if self is RecurrencePattern.QUARTERLY:
            return add_months(moment, 3)
        return add_months(moment, 12)
