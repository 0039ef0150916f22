"""Shared test fixtures and helpers."""

import datetime as dt
from typing import Optional

import pytest

from boarding.booking.session import BookingSession
from boarding.schemas.availability_schema import AvailabilityStatus, DayAvailability
from boarding.schemas.booking_schema import BookingForm, BookingRequest
from boarding.schemas.pet_schema import DogSize, PetCount, PetType
from boarding.pricing.calculator import build_quote
from boarding.selection.date_range_selector import DateRangeSelector
from boarding.tools.availability import ScheduleGate
from boarding.tools.booking import BookingStore
from boarding.tools.reminders import ReminderScheduler

TODAY = dt.date(2026, 3, 2)


def day(offset: int) -> dt.date:
    """Calendar day ``offset`` days from the fixed test today."""
    return TODAY + dt.timedelta(days=offset)


def make_gate(
    full: tuple[int, ...] = (),
    limited: tuple[int, ...] = (),
    unknown: tuple[int, ...] = (),
    days: int = 120,
) -> ScheduleGate:
    """Gate covering yesterday through ``days`` ahead, with chosen offsets overridden."""
    schedule = {}
    for offset in range(-1, days):
        if offset in unknown:
            continue
        status = AvailabilityStatus.AVAILABLE
        if offset in full:
            status = AvailabilityStatus.FULL
        elif offset in limited:
            status = AvailabilityStatus.LIMITED
        schedule[day(offset)] = DayAvailability(date=day(offset), status=status)
    return ScheduleGate(schedule)


def make_form(
    names: Optional[list[str]] = None,
    pet_count: PetCount = PetCount.ONE,
    **overrides,
) -> BookingForm:
    """A valid single-pet form unless overridden."""
    data = {
        "pet_count": pet_count,
        "pet_names": names if names is not None else ["Coco", ""],
        "owner_name": "Jamie Rivera",
        "owner_email": "jamie@example.com",
        "agreed_to_terms": True,
    }
    data.update(overrides)
    return BookingForm(**data)


def make_request(
    check_in: dt.date,
    check_out: dt.date,
    pet_type: PetType = PetType.CAT,
    dog_size: Optional[DogSize] = None,
    pet_count: PetCount = PetCount.ONE,
    names: tuple[str, ...] = ("Coco",),
) -> BookingRequest:
    nights = (check_out - check_in).days
    return BookingRequest(
        pet_names=names,
        pet_type=pet_type,
        dog_size=dog_size,
        pet_count=pet_count,
        check_in=check_in,
        check_out=check_out,
        owner_name="Jamie Rivera",
        owner_email="jamie@example.com",
        agreed_to_terms=True,
        quote=build_quote(pet_type, dog_size, pet_count, nights),
    )


@pytest.fixture
def gate():
    return make_gate()


@pytest.fixture
def selector(gate):
    return DateRangeSelector(gate, today=lambda: TODAY)


@pytest.fixture
def store():
    return BookingStore(total_spots=5, limited_threshold=2)


@pytest.fixture
def reminders():
    return ReminderScheduler(authorized=True, enabled=True, lead_days=1, today=lambda: TODAY)


@pytest.fixture
def session(store, reminders):
    return BookingSession(gate=store, store=store, reminders=reminders, today=lambda: TODAY)
