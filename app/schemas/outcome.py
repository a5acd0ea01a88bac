# app/schemas/outcome.py
from pydantic import BaseModel
from typing import Optional
from app.models.enums import OutcomeType


class OutcomeCreate(BaseModel):
    type: OutcomeType
    new_date: Optional[str] = None  # YYYY-MM-DD, required for POSTPONEMENT
    postponement_reason: Optional[str] = None
    strike_off_reason: Optional[str] = None
    deliberation_text: Optional[str] = None


class OutcomeUpdate(BaseModel):
    type: Optional[OutcomeType] = None
    new_date: Optional[str] = None
    postponement_reason: Optional[str] = None
    strike_off_reason: Optional[str] = None
    deliberation_text: Optional[str] = None
