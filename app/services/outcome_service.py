# app/services/outcome_service.py
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.clock import Clock, SystemClock
from app.core.errors import ConflictError, InputValidationError, NotFoundError
from app.models.enums import OutcomeType
from app.models.hearing import Hearing
from app.models.hearing_outcome import HearingOutcome
from app.schemas.outcome import OutcomeCreate, OutcomeUpdate
from app.services import calendar_service
from app.services.hearing_status import HearingStatusMachine


class OutcomeService:
    def __init__(self, db: Session, clock: Optional[Clock] = None):
        self.db = db
        self.status_machine = HearingStatusMachine(clock or SystemClock())

    def _get_hearing(self, hearing_id: int) -> Hearing:
        hearing = self.db.get(Hearing, hearing_id)
        if not hearing:
            raise NotFoundError(f"Hearing {hearing_id} not found")
        return hearing

    def _postponement_date(self, outcome_type: OutcomeType, raw_date):
        if outcome_type == OutcomeType.POSTPONEMENT:
            if not raw_date:
                raise InputValidationError("A postponement needs the new hearing date")
            return calendar_service.to_storage(calendar_service.parse_calendar_date(raw_date))
        if raw_date:
            raise InputValidationError(f"new_date only applies to POSTPONEMENT, not {outcome_type.value}")
        return None

    def record_outcome(self, hearing_id: int, payload: OutcomeCreate, actor_id: Optional[str] = None) -> HearingOutcome:
        hearing = self._get_hearing(hearing_id)
        outcome = HearingOutcome(
            hearing_id=hearing.id,
            type=payload.type,
            new_date=self._postponement_date(payload.type, payload.new_date),
            postponement_reason=payload.postponement_reason,
            strike_off_reason=payload.strike_off_reason,
            deliberation_text=payload.deliberation_text,
            created_by=actor_id,
        )
        self.db.add(outcome)
        try:
            # unique index on hearing_id settles concurrent recorders
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            logging.warning(f"Duplicate outcome rejected for hearing {hearing_id}")
            raise ConflictError(f"Hearing {hearing_id} already has an outcome") from e

        hearing.status = self.status_machine.on_outcome_recorded()
        self.db.commit()
        self.db.refresh(outcome)
        logging.info(f"Outcome {outcome.type.value} recorded for hearing {hearing_id}")
        return outcome

    def get_outcome(self, hearing_id: int) -> HearingOutcome:
        self._get_hearing(hearing_id)
        outcome = (
            self.db.query(HearingOutcome)
            .filter(HearingOutcome.hearing_id == hearing_id)
            .first()
        )
        if not outcome:
            raise NotFoundError(f"No outcome recorded for hearing {hearing_id}")
        return outcome

    def update_outcome(self, hearing_id: int, payload: OutcomeUpdate) -> HearingOutcome:
        # hearing status is left alone: editing an outcome does not change the hearing's state
        outcome = self.get_outcome(hearing_id)
        fields = payload.model_dump(exclude_unset=True)

        if "type" in fields and fields["type"] is None:
            raise InputValidationError("type cannot be null")
        outcome_type = fields.pop("type", None) or outcome.type
        if "new_date" in fields:
            new_date = self._postponement_date(outcome_type, fields.pop("new_date"))
        elif outcome_type == OutcomeType.POSTPONEMENT:
            new_date = self._postponement_date(outcome_type, outcome.new_date)
        else:
            new_date = None

        outcome.type = outcome_type
        outcome.new_date = new_date
        for key, value in fields.items():
            setattr(outcome, key, value)

        self.db.commit()
        self.db.refresh(outcome)
        logging.info(f"Outcome of hearing {hearing_id} updated")
        return outcome

    def remove_outcome(self, hearing_id: int) -> None:
        outcome = self.get_outcome(hearing_id)
        hearing = self._get_hearing(hearing_id)
        self.db.delete(outcome)
        hearing.status = self.status_machine.on_outcome_removed(hearing.date)
        self.db.commit()
        logging.info(f"Outcome of hearing {hearing_id} removed, status back to {hearing.status.value}")
