# app/core/clock.py
import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime.datetime:
        ...

    def today(self) -> datetime.date:
        ...


class SystemClock:
    """Wall clock in naive UTC, matching how timestamps are stored."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)

    def today(self) -> datetime.date:
        return self.now().date()


class FixedClock:
    """Clock frozen at a given instant. Used by tests and back-dated imports."""

    def __init__(self, instant: datetime.datetime):
        self.instant = instant

    def now(self) -> datetime.datetime:
        return self.instant

    def today(self) -> datetime.date:
        return self.instant.date()
