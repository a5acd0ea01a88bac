# app/api/v1/cases.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.core.clock import Clock
from app.core.dependencies import get_db, get_clock, get_actor_id
from app.core.errors import NotFoundError
from app.schemas.case import CaseCreate, CaseOut, CaseListOut
from app.schemas.hearing import HearingCreate, HearingOut
from app.services.case_service import CaseService
from app.services.hearing_service import HearingService
from typing import List, Optional

router = APIRouter()

@router.post("", response_model=CaseOut)
def create_case(payload: CaseCreate, db: Session = Depends(get_db)):
    svc = CaseService(db)
    case = svc.create_case(payload)
    return case

@router.get("/list-cases", response_model=List[CaseListOut])
def list_cases(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, le=100),
    db: Session = Depends(get_db),
):
    service = CaseService(db)
    return service.list_cases(skip=skip, limit=limit)

@router.get("/{case_id}", response_model=CaseOut)
def get_case(case_id: int, db: Session = Depends(get_db)):
    svc = CaseService(db)
    c = svc.get_case(case_id)
    if not c:
        raise NotFoundError(f"Case {case_id} not found")
    return c

@router.post("/{case_id}/hearings", response_model=HearingOut, status_code=201)
def create_hearing(
    case_id: int,
    payload: HearingCreate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    actor_id: Optional[str] = Depends(get_actor_id),
):
    """
    Schedule a hearing on a business day for an existing case
    """
    return HearingService(db, clock).create_hearing(case_id, payload, actor_id)

@router.get("/{case_id}/hearings", response_model=List[HearingOut])
def list_case_hearings(case_id: int, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return HearingService(db, clock).list_case_hearings(case_id)
