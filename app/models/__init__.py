# app/models/__init__.py
from app.models import case, hearing, hearing_outcome
from app.models.case import Case
from app.models.enums import HearingStatus, HearingType, OutcomeType
from app.models.hearing import Hearing
from app.models.hearing_outcome import HearingOutcome

__all__ = [
    "Case",
    "Hearing",
    "HearingOutcome",
    "HearingStatus",
    "HearingType",
    "OutcomeType",
]
