# app/models/hearing.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Enum, Index, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.enums import HearingStatus, HearingType


class Hearing(Base):
    __tablename__ = "hearings"
    __table_args__ = (
        # backs the due-reminder selector
        Index(
            "ix_hearings_enrolment_reminder",
            "reminder_enabled",
            "enrolment_done",
            "enrolment_reminder_date",
            "status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    case_id = Column(Integer, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True)

    # calendar day pinned to a fixed UTC hour, see calendar_service.to_storage
    date = Column(DateTime, nullable=False)
    time = Column(String(5), nullable=True)  # "HH:MM", free clock time
    type = Column(Enum(HearingType, name="hearing_type"), nullable=False, default=HearingType.CASE_MANAGEMENT)
    jurisdiction = Column(String(255), nullable=True)
    chamber = Column(String(255), nullable=True)
    city = Column(String(255), nullable=True)
    status = Column(Enum(HearingStatus, name="hearing_status"), nullable=False, default=HearingStatus.UPCOMING)

    preparation_notes = Column(Text, nullable=True)
    is_prepared = Column(Boolean, nullable=False, default=False)
    reminder_enabled = Column(Boolean, nullable=False, default=False)
    enrolment_reminder_date = Column(DateTime, nullable=False)
    enrolment_done = Column(Boolean, nullable=False, default=False)

    created_by = Column(String(64), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    case = relationship("Case", back_populates="hearings")
    outcome = relationship(
        "HearingOutcome",
        back_populates="hearing",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"Hearing(id={self.id}, case={self.case_id}, date={self.date}, status={self.status})"
