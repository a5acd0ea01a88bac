"""Integration tests for hearing scheduling and updates."""

from datetime import datetime

import pytest

from app.core.errors import InputValidationError, InvalidScheduleError, NotFoundError
from app.models import Hearing, HearingOutcome, HearingStatus, HearingType, OutcomeType
from app.schemas.hearing import HearingCreate, HearingUpdate
from app.schemas.outcome import OutcomeCreate
from app.services.hearing_service import HearingService
from app.services.outcome_service import OutcomeService


@pytest.fixture
def service(db, clock):
    return HearingService(db, clock)


def schedule(service, case, day, **fields):
    return service.create_hearing(case.id, HearingCreate(date=day, **fields), actor_id="clerk-1")


@pytest.mark.integration
class TestCreateHearing:
    def test_wednesday_hearing(self, service, case):
        hearing = schedule(service, case, "2026-03-18", jurisdiction="Tribunal de commerce", city="Abidjan")

        assert hearing.id is not None
        assert hearing.status == HearingStatus.UPCOMING
        assert hearing.date == datetime(2026, 3, 18, 12, 0)
        assert hearing.enrolment_reminder_date == datetime(2026, 3, 12, 12, 0)
        assert hearing.type == HearingType.CASE_MANAGEMENT
        assert hearing.enrolment_done is False
        assert hearing.created_by == "clerk-1"

    def test_saturday_rejected_and_nothing_written(self, service, case, db):
        with pytest.raises(InvalidScheduleError) as exc:
            schedule(service, case, "2026-03-21")

        assert "Saturday" in exc.value.message
        assert db.query(Hearing).count() == 0

    def test_sunday_names_the_day(self, service, case):
        with pytest.raises(InvalidScheduleError, match="Sunday"):
            schedule(service, case, "2026-03-22")

    def test_unknown_case(self, service):
        with pytest.raises(NotFoundError):
            service.create_hearing(9999, HearingCreate(date="2026-03-18"))

    @pytest.mark.parametrize("value", ["2026-02-31", "18-03-2026"])
    def test_bad_date_string(self, service, case, value):
        with pytest.raises(InputValidationError):
            schedule(service, case, value)

    def test_explicit_initial_status(self, service, case):
        hearing = schedule(service, case, "2026-03-18", status=HearingStatus.PAST_UNREPORTED)
        assert hearing.status == HearingStatus.PAST_UNREPORTED

    def test_reported_cannot_be_set_at_creation(self, service, case):
        with pytest.raises(InputValidationError):
            schedule(service, case, "2026-03-18", status=HearingStatus.REPORTED)

    def test_past_hearing_stays_upcoming_until_written(self, service, case):
        """No background sweep: only the next update flips the status."""
        hearing = schedule(service, case, "2026-03-02")
        assert hearing.status == HearingStatus.UPCOMING

        untouched = service.update_hearing(hearing.id, HearingUpdate(preparation_notes="bring exhibits"))
        assert untouched.status == HearingStatus.UPCOMING

        rewritten = service.update_hearing(hearing.id, HearingUpdate(date="2026-03-02"))
        assert rewritten.status == HearingStatus.PAST_UNREPORTED


@pytest.mark.integration
class TestUpdateHearing:
    def test_new_date_recomputes_reminder(self, service, case):
        hearing = schedule(service, case, "2026-03-18")
        updated = service.update_hearing(hearing.id, HearingUpdate(date="2026-03-25"))

        assert updated.date == datetime(2026, 3, 25, 12, 0)
        # Tue 24, Mon 23, Fri 20, Thu 19
        assert updated.enrolment_reminder_date == datetime(2026, 3, 19, 12, 0)
        assert updated.status == HearingStatus.UPCOMING

    def test_moving_into_the_past(self, service, case):
        hearing = schedule(service, case, "2026-03-18")
        updated = service.update_hearing(hearing.id, HearingUpdate(date="2026-03-04"))
        assert updated.status == HearingStatus.PAST_UNREPORTED

    def test_rescheduling_forward_recovers(self, service, case):
        hearing = schedule(service, case, "2026-03-04")
        service.update_hearing(hearing.id, HearingUpdate(date="2026-03-04"))

        recovered = service.update_hearing(hearing.id, HearingUpdate(date="2026-03-25"))
        assert recovered.status == HearingStatus.UPCOMING

    def test_explicit_status_wins_over_date(self, service, case):
        hearing = schedule(service, case, "2026-03-18")
        updated = service.update_hearing(
            hearing.id, HearingUpdate(date="2026-03-04", status=HearingStatus.UPCOMING)
        )
        assert updated.status == HearingStatus.UPCOMING
        assert updated.enrolment_reminder_date == datetime(2026, 2, 26, 12, 0)

    def test_explicit_status_without_date(self, service, case):
        hearing = schedule(service, case, "2026-03-18")
        updated = service.update_hearing(hearing.id, HearingUpdate(status=HearingStatus.PAST_UNREPORTED))
        assert updated.status == HearingStatus.PAST_UNREPORTED

    def test_field_only_update_leaves_derived_fields(self, service, case):
        hearing = schedule(service, case, "2026-03-18")
        updated = service.update_hearing(
            hearing.id, HearingUpdate(chamber="2nd chamber", is_prepared=True, time="09:30")
        )

        assert updated.chamber == "2nd chamber"
        assert updated.is_prepared is True
        assert updated.time == "09:30"
        assert updated.enrolment_reminder_date == datetime(2026, 3, 12, 12, 0)
        assert updated.status == HearingStatus.UPCOMING

    def test_weekend_update_rejected(self, service, case, db):
        hearing = schedule(service, case, "2026-03-18")
        with pytest.raises(InvalidScheduleError, match="Saturday"):
            service.update_hearing(hearing.id, HearingUpdate(date="2026-03-28"))

        db.refresh(hearing)
        assert hearing.date == datetime(2026, 3, 18, 12, 0)

    def test_null_date_rejected(self, service, case):
        hearing = schedule(service, case, "2026-03-18")
        with pytest.raises(InputValidationError):
            service.update_hearing(hearing.id, HearingUpdate(date=None))

    def test_reported_hearing_keeps_status_on_reschedule(self, service, case, db, clock):
        hearing = schedule(service, case, "2026-03-18")
        OutcomeService(db, clock).record_outcome(hearing.id, OutcomeCreate(type=OutcomeType.DELIBERATION))

        updated = service.update_hearing(hearing.id, HearingUpdate(date="2026-03-04"))
        assert updated.status == HearingStatus.REPORTED

    def test_reported_cannot_be_forced_without_outcome(self, service, case):
        hearing = schedule(service, case, "2026-03-18")
        with pytest.raises(InputValidationError):
            service.update_hearing(hearing.id, HearingUpdate(status=HearingStatus.REPORTED))

    @pytest.mark.parametrize("status", [HearingStatus.UPCOMING, HearingStatus.PAST_UNREPORTED])
    def test_reported_hearing_cannot_be_forced_back(self, service, case, db, clock, status):
        """A hearing with an outcome stays REPORTED until the outcome is removed."""
        hearing = schedule(service, case, "2026-03-18", reminder_enabled=True)
        OutcomeService(db, clock).record_outcome(hearing.id, OutcomeCreate(type=OutcomeType.DELIBERATION))

        with pytest.raises(InputValidationError, match="has an outcome"):
            service.update_hearing(hearing.id, HearingUpdate(date="2026-03-25", status=status))

        db.refresh(hearing)
        assert hearing.status == HearingStatus.REPORTED
        assert hearing.date == datetime(2026, 3, 18, 12, 0)

    def test_missing_hearing(self, service):
        with pytest.raises(NotFoundError):
            service.update_hearing(404, HearingUpdate(city="Paris"))


@pytest.mark.integration
class TestQueries:
    def test_list_filters_and_order(self, service, case):
        late = schedule(service, case, "2026-03-25", type=HearingType.PLEADINGS)
        early = schedule(service, case, "2026-03-18")

        assert [h.id for h in service.list_hearings()] == [early.id, late.id]
        assert [h.id for h in service.list_hearings(type=HearingType.PLEADINGS)] == [late.id]
        assert [h.id for h in service.list_hearings(date_from="2026-03-19")] == [late.id]
        assert [h.id for h in service.list_hearings(date_to="2026-03-18")] == [early.id]

    def test_case_hearings_for_unknown_case(self, service):
        with pytest.raises(NotFoundError):
            service.list_case_hearings(9999)

    def test_delete_removes_outcome_too(self, service, case, db, clock):
        hearing = schedule(service, case, "2026-03-18")
        OutcomeService(db, clock).record_outcome(hearing.id, OutcomeCreate(type=OutcomeType.STRIKE_OFF))

        service.delete_hearing(hearing.id)

        with pytest.raises(NotFoundError):
            service.get_hearing(hearing.id)
        assert db.query(HearingOutcome).count() == 0

    def test_statistics(self, service, case, db, clock):
        schedule(service, case, "2026-03-18")
        past = schedule(service, case, "2026-03-04")
        service.update_hearing(past.id, HearingUpdate(date="2026-03-04"))
        reported = schedule(service, case, "2026-03-20")
        OutcomeService(db, clock).record_outcome(reported.id, OutcomeCreate(type=OutcomeType.DELIBERATION))

        stats = service.get_statistics()
        assert (stats.total, stats.upcoming, stats.past_unreported, stats.reported) == (3, 1, 1, 1)
