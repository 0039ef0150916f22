"""Tests for the in-memory booking store and its capacity calendar."""

import re

from boarding.schemas.availability_schema import AvailabilityStatus
from boarding.schemas.booking_schema import BookingStatus
from boarding.selection.availability_gate import AvailabilityGate
from boarding.selection.date_range_selector import DateRangeSelector, SelectionPhase
from tests.conftest import TODAY, day, make_request


class TestAddBooking:
    def test_add_booking_returns_pending_record(self, store):
        record = store.add_booking(make_request(day(3), day(5)))
        assert re.fullmatch(r"BK-[0-9A-F]{6}", record.booking_ref)
        assert record.status == BookingStatus.PENDING

    def test_newest_first(self, store):
        first = store.add_booking(make_request(day(3), day(5)))
        second = store.add_booking(make_request(day(1), day(2)))
        assert [b.booking_ref for b in store.bookings] == [second.booking_ref, first.booking_ref]

    def test_get_booking(self, store):
        record = store.add_booking(make_request(day(3), day(5)))
        assert store.get_booking(record.booking_ref) is record
        assert store.get_booking("BK-NOPE00") is None

    def test_reset(self, store):
        store.add_booking(make_request(day(3), day(5)))
        store.reset()
        assert store.bookings == []


class TestStatus:
    def test_cancel_booking(self, store):
        record = store.add_booking(make_request(day(3), day(5)))
        assert store.cancel_booking(record.booking_ref)
        assert record.status == BookingStatus.CANCELLED

    def test_unknown_booking(self, store):
        assert not store.update_booking_status("BK-NOPE00", BookingStatus.CONFIRMED)

    def test_upcoming_sorted_by_check_in(self, store):
        late = store.add_booking(make_request(day(10), day(12)))
        early = store.add_booking(make_request(day(2), day(4)))
        store.update_booking_status(late.booking_ref, BookingStatus.CONFIRMED)
        assert [b.booking_ref for b in store.upcoming_bookings()] == [
            early.booking_ref, late.booking_ref,
        ]

    def test_past_sorted_by_check_out_descending(self, store):
        a = store.add_booking(make_request(day(1), day(3)))
        b = store.add_booking(make_request(day(4), day(8)))
        store.update_booking_status(a.booking_ref, BookingStatus.COMPLETED)
        store.cancel_booking(b.booking_ref)
        assert [r.booking_ref for r in store.past_bookings()] == [b.booking_ref, a.booking_ref]
        assert store.upcoming_bookings() == []

    def test_active_bookings(self, store):
        record = store.add_booking(make_request(day(1), day(3)))
        store.update_booking_status(record.booking_ref, BookingStatus.IN_PROGRESS)
        assert store.active_bookings() == [record]


class TestAvailability:
    def test_store_is_an_availability_gate(self, store):
        assert isinstance(store, AvailabilityGate)

    def test_empty_store_fully_available(self, store):
        availability = store.get_availability(day(3))
        assert availability.status == AvailabilityStatus.AVAILABLE
        assert availability.available_spots == 5

    def test_three_bookings_leave_limited_spots(self, store):
        for _ in range(3):
            store.add_booking(make_request(day(2), day(6)))
        availability = store.get_availability(day(4))
        assert availability.status == AvailabilityStatus.LIMITED
        assert availability.available_spots == 2

    def test_checkout_day_occupies_a_spot(self, store):
        store.add_booking(make_request(day(2), day(6)))
        assert store.get_availability(day(6)).available_spots == 4
        assert store.get_availability(day(7)).available_spots == 5

    def test_full_day(self, store):
        for _ in range(5):
            store.add_booking(make_request(day(2), day(4)))
        assert store.get_availability(day(3)).status == AvailabilityStatus.FULL
        assert not store.is_date_available(day(3))

    def test_cancelled_bookings_free_their_spot(self, store):
        records = [store.add_booking(make_request(day(2), day(4))) for _ in range(5)]
        store.cancel_booking(records[0].booking_ref)
        assert store.is_date_available(day(3))

    def test_selector_refuses_full_day_from_store(self, store):
        for _ in range(5):
            store.add_booking(make_request(day(2), day(4)))
        selector = DateRangeSelector(store, today=lambda: TODAY)
        selector.select_date(day(3))
        assert selector.phase == SelectionPhase.EMPTY
