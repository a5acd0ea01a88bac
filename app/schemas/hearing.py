# app/schemas/hearing.py
from pydantic import AfterValidator, BaseModel, Field
from typing import Annotated, Optional
from datetime import datetime, timezone
from app.models.enums import HearingStatus, HearingType, OutcomeType


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # stored values are naive UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# output dates carry an explicit UTC offset so clients never shift the calendar day
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]

# 24h "HH:MM", the width of the hearings.time column
CLOCK_TIME_PATTERN = r"^([01][0-9]|2[0-3]):[0-5][0-9]$"


class HearingCreate(BaseModel):
    date: str  # YYYY-MM-DD
    time: Optional[str] = Field(None, pattern=CLOCK_TIME_PATTERN)
    type: HearingType = HearingType.CASE_MANAGEMENT
    jurisdiction: Optional[str] = Field(None, max_length=255)
    chamber: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=255)
    status: Optional[HearingStatus] = None
    preparation_notes: Optional[str] = None
    is_prepared: bool = False
    reminder_enabled: bool = False


class HearingUpdate(BaseModel):
    """Partial update: only fields the caller actually sent are applied."""
    date: Optional[str] = None
    time: Optional[str] = Field(None, pattern=CLOCK_TIME_PATTERN)
    type: Optional[HearingType] = None
    jurisdiction: Optional[str] = Field(None, max_length=255)
    chamber: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=255)
    status: Optional[HearingStatus] = None
    preparation_notes: Optional[str] = None
    is_prepared: Optional[bool] = None
    reminder_enabled: Optional[bool] = None
    enrolment_done: Optional[bool] = None


class OutcomeOut(BaseModel):
    id: int
    hearing_id: int
    type: OutcomeType
    new_date: Optional[UtcDatetime] = None
    postponement_reason: Optional[str] = None
    strike_off_reason: Optional[str] = None
    deliberation_text: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None

    class Config:
        from_attributes = True



class HearingOut(BaseModel):
    id: int
    case_id: int
    date: UtcDatetime
    time: Optional[str] = None
    type: HearingType
    jurisdiction: Optional[str] = None
    chamber: Optional[str] = None
    city: Optional[str] = None
    status: HearingStatus
    preparation_notes: Optional[str] = None
    is_prepared: bool
    reminder_enabled: bool
    enrolment_reminder_date: UtcDatetime
    enrolment_done: bool
    outcome: Optional[OutcomeOut] = None
    created_by: Optional[str] = None
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None

    class Config:
        from_attributes = True



class HearingStatistics(BaseModel):
    total: int
    upcoming: int
    reported: int
    past_unreported: int
