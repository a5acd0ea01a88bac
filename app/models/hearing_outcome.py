# app/models/hearing_outcome.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.enums import OutcomeType


class HearingOutcome(Base):
    __tablename__ = "hearing_outcomes"

    id = Column(Integer, primary_key=True, index=True)
    # unique: a hearing carries at most one outcome, enforced by the database
    hearing_id = Column(
        Integer,
        ForeignKey("hearings.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    type = Column(Enum(OutcomeType, name="outcome_type"), nullable=False)
    new_date = Column(DateTime, nullable=True)  # only for POSTPONEMENT
    postponement_reason = Column(Text, nullable=True)
    strike_off_reason = Column(Text, nullable=True)
    deliberation_text = Column(Text, nullable=True)

    created_by = Column(String(64), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    hearing = relationship("Hearing", back_populates="outcome")
