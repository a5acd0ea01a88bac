# app/services/reminder_service.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.clock import Clock, SystemClock
from app.core.errors import NotFoundError
from app.models.enums import HearingStatus
from app.models.hearing import Hearing


class ReminderService:
    """Read side of the enrolment reminders. Delivery (email, SMS) lives elsewhere."""

    def __init__(self, db: Session, clock: Optional[Clock] = None):
        self.db = db
        self.clock = clock or SystemClock()

    def list_due_enrolment_reminders(self) -> List[Hearing]:
        return (
            self.db.query(Hearing)
            .filter(
                Hearing.reminder_enabled.is_(True),
                Hearing.enrolment_done.is_(False),
                Hearing.enrolment_reminder_date <= self.clock.now(),
                Hearing.status == HearingStatus.UPCOMING,
            )
            .order_by(Hearing.date.asc(), Hearing.id.asc())
            .all()
        )

    def mark_enrolment_done(self, hearing_id: int) -> Hearing:
        hearing = self.db.get(Hearing, hearing_id)
        if not hearing:
            raise NotFoundError(f"Hearing {hearing_id} not found")
        if not hearing.enrolment_done:
            hearing.enrolment_done = True
            self.db.commit()
            self.db.refresh(hearing)
            logging.info(f"Enrolment done for hearing {hearing_id}")
        return hearing
