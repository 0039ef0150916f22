"""
In-memory booking store.

Stands in for the app's booking persistence. It is also the authoritative
calendar of existing stays, so it doubles as an availability gate: each
day has a fixed number of spots and every non-cancelled booking covering
the day takes one.
"""

import datetime as dt
import logging
import uuid
from typing import Optional

from boarding.config import settings
from boarding.schemas.availability_schema import DayAvailability
from boarding.schemas.booking_schema import BookingRecord, BookingRequest, BookingStatus

logger = logging.getLogger(__name__)

UPCOMING_STATUSES = (BookingStatus.PENDING, BookingStatus.CONFIRMED)
PAST_STATUSES = (BookingStatus.COMPLETED, BookingStatus.CANCELLED)


class BookingStore:
    """Bookings kept newest first and looked up by reference number."""

    def __init__(
        self,
        total_spots: Optional[int] = None,
        limited_threshold: Optional[int] = None,
    ) -> None:
        self.total_spots = total_spots if total_spots is not None else settings.business.total_spots
        self.limited_threshold = (
            limited_threshold
            if limited_threshold is not None
            else settings.business.limited_spots_threshold
        )
        self._bookings: list[BookingRecord] = []

    def add_booking(self, request: BookingRequest) -> BookingRecord:
        """Store a new booking as pending and return its record."""
        record = BookingRecord(
            booking_ref=f"BK-{uuid.uuid4().hex[:6].upper()}",
            request=request,
            status=BookingStatus.PENDING,
            created_at=dt.datetime.now(dt.timezone.utc),
        )
        self._bookings.insert(0, record)
        logger.info(
            "Booking created: %s for %s, %s to %s",
            record.booking_ref, request.display_pet_names,
            request.check_in.isoformat(), request.check_out.isoformat(),
        )
        return record

    def get_booking(self, booking_ref: str) -> Optional[BookingRecord]:
        for record in self._bookings:
            if record.booking_ref == booking_ref:
                return record
        return None

    def update_booking_status(self, booking_ref: str, status: BookingStatus) -> bool:
        """Set a booking's status. Returns False for unknown references."""
        record = self.get_booking(booking_ref)
        if record is None:
            logger.warning("Status update for unknown booking %s", booking_ref)
            return False
        record.status = status
        logger.info("Booking %s is now %s", booking_ref, status.value)
        return True

    def cancel_booking(self, booking_ref: str) -> bool:
        return self.update_booking_status(booking_ref, BookingStatus.CANCELLED)

    @property
    def bookings(self) -> list[BookingRecord]:
        return list(self._bookings)

    def upcoming_bookings(self) -> list[BookingRecord]:
        """Pending or confirmed, earliest check-in first."""
        return sorted(
            (b for b in self._bookings if b.status in UPCOMING_STATUSES),
            key=lambda b: b.request.check_in,
        )

    def past_bookings(self) -> list[BookingRecord]:
        """Completed or cancelled, latest check-out first."""
        return sorted(
            (b for b in self._bookings if b.status in PAST_STATUSES),
            key=lambda b: b.request.check_out,
            reverse=True,
        )

    def active_bookings(self) -> list[BookingRecord]:
        return [b for b in self._bookings if b.status == BookingStatus.IN_PROGRESS]

    def get_availability(self, day: dt.date) -> Optional[DayAvailability]:
        """Spots left on a day. Check-out day still occupies a spot."""
        used = sum(
            1
            for b in self._bookings
            if b.status != BookingStatus.CANCELLED
            and b.request.check_in <= day <= b.request.check_out
        )
        return DayAvailability.from_spots(
            day,
            available_spots=self.total_spots - used,
            total_spots=self.total_spots,
            limited_threshold=self.limited_threshold,
        )

    def is_date_available(self, day: dt.date) -> bool:
        availability = self.get_availability(day)
        return availability is not None and not availability.is_full

    def reset(self) -> None:
        """Clear all bookings. Used by test fixtures for isolation."""
        self._bookings.clear()
