# app/services/hearing_status.py
"""
Hearing status state machine.

    UPCOMING <-> PAST_UNREPORTED      driven by the hearing date vs today
    *        ->  REPORTED             only when an outcome is recorded
    REPORTED ->  UPCOMING / PAST_...  only when the outcome is removed

There is no background sweep: a hearing whose date passes while nobody
touches it keeps its stored status until the next write (update or outcome
operation) re-derives it.
"""
import datetime
from dataclasses import dataclass
from typing import Any, Dict, Union

from app.core.clock import Clock
from app.core.errors import InputValidationError
from app.models.enums import HearingStatus


@dataclass(frozen=True)
class Derived:
    """Status follows from the hearing date."""


@dataclass(frozen=True)
class ExplicitStatus:
    """Caller-supplied status; wins over date derivation."""
    status: HearingStatus


StatusDirective = Union[Derived, ExplicitStatus]


def resolve_status_directive(fields: Dict[str, Any]) -> StatusDirective:
    """Pop `status` out of an update payload and turn it into a directive."""
    if "status" not in fields:
        return Derived()
    value = fields.pop("status")
    if value is None:
        raise InputValidationError("status cannot be null")
    try:
        return ExplicitStatus(HearingStatus(value))
    except ValueError as e:
        raise InputValidationError(f"Unknown hearing status '{value}'") from e


class HearingStatusMachine:
    def __init__(self, clock: Clock):
        self.clock = clock

    def _is_past(self, hearing_date: datetime.datetime) -> bool:
        # calendar-day comparison, time of day ignored
        return hearing_date.date() < self.clock.today()

    def derive(self, current: HearingStatus, hearing_date: datetime.datetime, has_outcome: bool) -> HearingStatus:
        if has_outcome:
            return current
        if self._is_past(hearing_date):
            return HearingStatus.PAST_UNREPORTED
        if current == HearingStatus.PAST_UNREPORTED:
            return HearingStatus.UPCOMING
        return current

    def apply(
        self,
        directive: StatusDirective,
        current: HearingStatus,
        hearing_date: datetime.datetime,
        has_outcome: bool,
    ) -> HearingStatus:
        if isinstance(directive, ExplicitStatus):
            return directive.status
        return self.derive(current, hearing_date, has_outcome)

    def on_outcome_recorded(self) -> HearingStatus:
        return HearingStatus.REPORTED

    def on_outcome_removed(self, hearing_date: datetime.datetime) -> HearingStatus:
        if self._is_past(hearing_date):
            return HearingStatus.PAST_UNREPORTED
        return HearingStatus.UPCOMING
