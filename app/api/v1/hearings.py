# app/api/v1/hearings.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.clock import Clock
from app.core.dependencies import get_db, get_clock, get_actor_id
from app.models.enums import HearingStatus, HearingType
from app.schemas.hearing import HearingOut, HearingStatistics, HearingUpdate, OutcomeOut
from app.schemas.outcome import OutcomeCreate, OutcomeUpdate
from app.services.hearing_service import HearingService
from app.services.outcome_service import OutcomeService
from app.services.reminder_service import ReminderService

router = APIRouter()


@router.get("", response_model=List[HearingOut])
def list_hearings(
    case_id: Optional[int] = None,
    status: Optional[HearingStatus] = None,
    type: Optional[HearingType] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    svc = HearingService(db, clock)
    return svc.list_hearings(case_id=case_id, status=status, type=type, date_from=date_from, date_to=date_to)


# static paths must be declared before /{hearing_id}
@router.get("/statistics", response_model=HearingStatistics)
def hearing_statistics(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return HearingService(db, clock).get_statistics()


@router.get("/enrolment-reminders", response_model=List[HearingOut])
def due_enrolment_reminders(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """
    Hearings whose enrolment reminder is due and still pending
    """
    return ReminderService(db, clock).list_due_enrolment_reminders()


@router.get("/{hearing_id}", response_model=HearingOut)
def get_hearing(hearing_id: int, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return HearingService(db, clock).get_hearing(hearing_id)


@router.patch("/{hearing_id}", response_model=HearingOut)
def update_hearing(
    hearing_id: int,
    payload: HearingUpdate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    return HearingService(db, clock).update_hearing(hearing_id, payload)


@router.delete("/{hearing_id}", status_code=204)
def delete_hearing(hearing_id: int, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    HearingService(db, clock).delete_hearing(hearing_id)
    return Response(status_code=204)


@router.patch("/{hearing_id}/enrolment", response_model=HearingOut)
def mark_enrolment_done(hearing_id: int, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return ReminderService(db, clock).mark_enrolment_done(hearing_id)


@router.post("/{hearing_id}/outcome", response_model=OutcomeOut, status_code=201)
def record_outcome(
    hearing_id: int,
    payload: OutcomeCreate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    actor_id: Optional[str] = Depends(get_actor_id),
):
    return OutcomeService(db, clock).record_outcome(hearing_id, payload, actor_id)


@router.get("/{hearing_id}/outcome", response_model=OutcomeOut)
def get_outcome(hearing_id: int, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return OutcomeService(db, clock).get_outcome(hearing_id)


@router.patch("/{hearing_id}/outcome", response_model=OutcomeOut)
def update_outcome(
    hearing_id: int,
    payload: OutcomeUpdate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    return OutcomeService(db, clock).update_outcome(hearing_id, payload)


@router.delete("/{hearing_id}/outcome", status_code=204)
def remove_outcome(hearing_id: int, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    OutcomeService(db, clock).remove_outcome(hearing_id)
    return Response(status_code=204)
