# app/services/hearing_service.py
import datetime
import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.clock import Clock, SystemClock
from app.core.errors import InputValidationError, InvalidScheduleError, NotFoundError
from app.models.enums import HearingStatus, HearingType
from app.models.hearing import Hearing
from app.models.hearing_outcome import HearingOutcome
from app.schemas.hearing import HearingCreate, HearingStatistics, HearingUpdate
from app.services import calendar_service
from app.services.case_service import CaseService
from app.services.hearing_status import ExplicitStatus, HearingStatusMachine, resolve_status_directive

# columns that may be omitted from an update but never nulled
NON_NULLABLE_FIELDS = {"type", "is_prepared", "reminder_enabled", "enrolment_done"}


class HearingService:
    """Schedules hearings and keeps their derived fields consistent."""

    def __init__(self, db: Session, clock: Optional[Clock] = None):
        self.db = db
        self.clock = clock or SystemClock()
        self.status_machine = HearingStatusMachine(self.clock)
        self.cases = CaseService(db)

    def _validate_schedule(self, raw_date) -> datetime.date:
        day = calendar_service.parse_calendar_date(raw_date)
        if calendar_service.is_weekend(day):
            weekday = calendar_service.weekday_name(day)
            logging.warning(f"Rejected hearing date {day.isoformat()} ({weekday})")
            raise InvalidScheduleError(
                f"{day.isoformat()} is a {weekday}. Hearings cannot be scheduled on a weekend, "
                f"please choose a business day."
            )
        return day

    def _has_outcome(self, hearing_id: int) -> bool:
        return (
            self.db.query(HearingOutcome.id)
            .filter(HearingOutcome.hearing_id == hearing_id)
            .first()
            is not None
        )

    def create_hearing(self, case_id: int, payload: HearingCreate, actor_id: Optional[str] = None) -> Hearing:
        self.cases.require_case(case_id)
        day = self._validate_schedule(payload.date)

        status = payload.status or HearingStatus.UPCOMING
        if status == HearingStatus.REPORTED:
            raise InputValidationError("A hearing becomes REPORTED only by recording its outcome")

        hearing = Hearing(
            case_id=case_id,
            date=calendar_service.to_storage(day),
            time=payload.time,
            type=payload.type,
            jurisdiction=payload.jurisdiction,
            chamber=payload.chamber,
            city=payload.city,
            status=status,
            preparation_notes=payload.preparation_notes,
            is_prepared=payload.is_prepared,
            reminder_enabled=payload.reminder_enabled,
            enrolment_reminder_date=calendar_service.to_storage(calendar_service.enrolment_reminder_date(day)),
            enrolment_done=False,
            created_by=actor_id,
        )
        self.db.add(hearing)
        self.db.commit()
        self.db.refresh(hearing)
        logging.info(f"Hearing {hearing.id} scheduled for case {case_id} on {day.isoformat()}")
        return hearing

    def get_hearing(self, hearing_id: int) -> Hearing:
        hearing = self.db.get(Hearing, hearing_id)
        if not hearing:
            raise NotFoundError(f"Hearing {hearing_id} not found")
        return hearing

    def list_hearings(
        self,
        case_id: Optional[int] = None,
        status: Optional[HearingStatus] = None,
        type: Optional[HearingType] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> List[Hearing]:
        query = self.db.query(Hearing)
        if case_id is not None:
            query = query.filter(Hearing.case_id == case_id)
        if status is not None:
            query = query.filter(Hearing.status == status)
        if type is not None:
            query = query.filter(Hearing.type == type)
        # bounds are inclusive calendar days
        if date_from:
            start = calendar_service.parse_calendar_date(date_from)
            query = query.filter(Hearing.date >= datetime.datetime.combine(start, datetime.time.min))
        if date_to:
            end = calendar_service.parse_calendar_date(date_to)
            query = query.filter(Hearing.date <= datetime.datetime.combine(end, datetime.time.max))
        return query.order_by(Hearing.date.asc(), Hearing.id.asc()).all()

    def list_case_hearings(self, case_id: int) -> List[Hearing]:
        self.cases.require_case(case_id)
        return self.list_hearings(case_id=case_id)

    def update_hearing(self, hearing_id: int, payload: HearingUpdate) -> Hearing:
        """Apply a partial update.

        A new date is re-validated, the enrolment reminder recomputed and the
        status re-derived, unless the same call also sets `status`, in which
        case the explicit value is kept as given. Without a date, `status`
        and the reminder date only change when explicitly supplied.
        """
        hearing = self.get_hearing(hearing_id)
        fields = payload.model_dump(exclude_unset=True)
        directive = resolve_status_directive(fields)
        has_outcome = self._has_outcome(hearing.id)

        # REPORTED holds exactly while an outcome exists
        if isinstance(directive, ExplicitStatus):
            if directive.status == HearingStatus.REPORTED and not has_outcome:
                raise InputValidationError("A hearing becomes REPORTED only by recording its outcome")
            if directive.status != HearingStatus.REPORTED and has_outcome:
                raise InputValidationError(
                    f"Hearing {hearing.id} has an outcome; remove it before setting status {directive.status.value}"
                )
        for key in NON_NULLABLE_FIELDS & fields.keys():
            if fields[key] is None:
                raise InputValidationError(f"{key} cannot be null")

        if "date" in fields:
            raw_date = fields.pop("date")
            if raw_date is None:
                raise InputValidationError("date cannot be null")
            day = self._validate_schedule(raw_date)
            hearing.date = calendar_service.to_storage(day)
            hearing.enrolment_reminder_date = calendar_service.to_storage(
                calendar_service.enrolment_reminder_date(day)
            )
            hearing.status = self.status_machine.apply(directive, hearing.status, hearing.date, has_outcome)
        elif isinstance(directive, ExplicitStatus):
            hearing.status = directive.status

        for key, value in fields.items():
            setattr(hearing, key, value)

        self.db.commit()
        self.db.refresh(hearing)
        logging.info(f"Hearing {hearing.id} updated ({', '.join(sorted(payload.model_fields_set)) or 'no fields'})")
        return hearing

    def delete_hearing(self, hearing_id: int) -> None:
        hearing = self.get_hearing(hearing_id)
        self.db.delete(hearing)
        self.db.commit()
        logging.info(f"Hearing {hearing_id} deleted")

    def get_statistics(self) -> HearingStatistics:
        counts = dict(
            self.db.query(Hearing.status, func.count(Hearing.id)).group_by(Hearing.status).all()
        )
        return HearingStatistics(
            total=sum(counts.values()),
            upcoming=counts.get(HearingStatus.UPCOMING, 0),
            reported=counts.get(HearingStatus.REPORTED, 0),
            past_unreported=counts.get(HearingStatus.PAST_UNREPORTED, 0),
        )
