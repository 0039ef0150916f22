"""Tests for the mapping-backed gate and mock schedule generation."""

from boarding.schemas.availability_schema import AvailabilityStatus, DayAvailability
from boarding.tools.availability import ScheduleGate, build_mock_schedule
from tests.conftest import TODAY, day


class TestScheduleGate:
    def test_unknown_day_returns_none(self):
        assert ScheduleGate({}).get_availability(day(1)) is None

    def test_set_availability(self):
        gate = ScheduleGate({})
        gate.set_availability(DayAvailability(date=day(1), status=AvailabilityStatus.FULL))
        assert gate.get_availability(day(1)).is_full
        assert gate.known_days() == [day(1)]


class TestMockSchedule:
    def test_covers_requested_days(self):
        schedule = build_mock_schedule(TODAY, days=30)
        assert sorted(schedule) == [day(i) for i in range(30)]

    def test_is_reproducible(self):
        assert build_mock_schedule(TODAY, days=30) == build_mock_schedule(TODAY, days=30)

    def test_seed_changes_schedule(self):
        a = build_mock_schedule(TODAY, days=60, seed=1)
        b = build_mock_schedule(TODAY, days=60, seed=2)
        assert a != b

    def test_spots_within_capacity(self):
        schedule = build_mock_schedule(TODAY, days=60, total_spots=5)
        assert all(0 <= d.available_spots <= 5 for d in schedule.values())
        assert all(d.total_spots == 5 for d in schedule.values())
