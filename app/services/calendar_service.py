# app/services/calendar_service.py
"""
Business-day arithmetic for hearing scheduling.

A business day is any day that is not a Saturday or Sunday; court holiday
calendars are not taken into account. Every function here is pure.
"""
import datetime
import re
from typing import Union

from app.core.config import settings
from app.core.errors import InputValidationError

# working days between the enrolment reminder and the hearing
ENROLMENT_REMINDER_BUSINESS_DAYS = 4

# ASCII digits only: str.isdigit and \d also accept other Unicode digits
ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

DateLike = Union[datetime.date, datetime.datetime]


def _day(value: DateLike) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def is_weekend(value: DateLike) -> bool:
    # Saturday (5) and Sunday (6)
    return _day(value).weekday() in (5, 6)


def weekday_name(value: DateLike) -> str:
    return WEEKDAY_NAMES[_day(value).weekday()]


def next_working_day(value: datetime.date) -> datetime.date:
    current = value
    while True:
        current += datetime.timedelta(days=1)
        if not is_weekend(current):
            return current


def previous_working_day(value: datetime.date) -> datetime.date:
    current = value
    while True:
        current -= datetime.timedelta(days=1)
        if not is_weekend(current):
            return current


def subtract_business_days(value: datetime.date, n: int) -> datetime.date:
    """Step back one calendar day at a time until `n` business days are counted.

    The loop stops on a day it has just counted, so the result is always a
    business day (for n >= 1).
    """
    current = value
    counted = 0
    while counted < n:
        current -= datetime.timedelta(days=1)
        if not is_weekend(current):
            counted += 1
    return current


def enrolment_reminder_date(hearing_date: datetime.date) -> datetime.date:
    return subtract_business_days(hearing_date, ENROLMENT_REMINDER_BUSINESS_DAYS)


def parse_calendar_date(value: Union[str, datetime.date]) -> datetime.date:
    """Parse a plain `YYYY-MM-DD` string.

    Raises InputValidationError for malformed strings and impossible days
    such as 2026-02-31.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise InputValidationError(f"Expected a YYYY-MM-DD date, got {value!r}")
    text = value.strip()
    if not ISO_DATE_RE.fullmatch(text):
        raise InputValidationError(f"Malformed date '{value}', expected YYYY-MM-DD")
    try:
        return datetime.date.fromisoformat(text)
    except ValueError as e:
        raise InputValidationError(f"Invalid calendar date '{value}': {e}") from e


def to_storage(value: datetime.date) -> datetime.datetime:
    """Pin a calendar day to the configured UTC hour (naive, as stored)."""
    return datetime.datetime.combine(value, datetime.time(hour=settings.HEARING_TIME_OF_DAY_HOUR))
