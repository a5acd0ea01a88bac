# app/models/enums.py
import enum


class HearingType(str, enum.Enum):
    CASE_MANAGEMENT = "CASE_MANAGEMENT"
    PLEADINGS = "PLEADINGS"
    SUMMARY_PROCEEDING = "SUMMARY_PROCEEDING"
    EVOCATION = "EVOCATION"
    CONCILIATION = "CONCILIATION"
    MEDIATION = "MEDIATION"
    OTHER = "OTHER"


class HearingStatus(str, enum.Enum):
    UPCOMING = "UPCOMING"
    PAST_UNREPORTED = "PAST_UNREPORTED"
    REPORTED = "REPORTED"  # only reachable by recording an outcome


class OutcomeType(str, enum.Enum):
    POSTPONEMENT = "POSTPONEMENT"
    STRIKE_OFF = "STRIKE_OFF"
    DELIBERATION = "DELIBERATION"
