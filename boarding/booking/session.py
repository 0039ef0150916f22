"""
One user's booking session: pet configuration, date selection, quote and
submission.

The quote is never stored. It is rebuilt from the current selection and
pet configuration every time it is read, so a change to either can never
leave a stale price behind.

Usage:
    session = BookingSession(gate=store, store=store, reminders=ReminderScheduler())
    session.set_pet_configuration(PetType.DOG, DogSize.SMALL)
    session.select_date(date(2026, 11, 2))
    session.select_date(date(2026, 11, 6))
    session.quote.total            # Decimal('170.0000')
    result = session.submit(form)
"""

import datetime as dt
import uuid
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Union

from boarding.booking.form_validator import FieldId, validate
from boarding.config import RateTable
from boarding.logging_context import get_session_logger, set_session_id
from boarding.pricing.quote_builder import BookingQuoteBuilder
from boarding.schemas.booking_schema import (
    BookingForm,
    BookingRecord,
    BookingRequest,
    PricingQuote,
)
from boarding.schemas.pet_schema import DogSize, PetCount, PetType
from boarding.selection.availability_gate import AvailabilityGate
from boarding.selection.date_range_selector import (
    CompleteRange,
    DateRange,
    DateRangeSelector,
    SelectionState,
)
from boarding.utils import normalize_phone

logger = get_session_logger(__name__)


class BookingPersistence(Protocol):
    def add_booking(self, request: BookingRequest) -> BookingRecord:
        ...


class ReminderScheduling(Protocol):
    def schedule_booking_reminder(
        self, request: BookingRequest, booking_ref: Optional[str] = None
    ) -> object:
        ...


@dataclass
class SubmissionResult:
    """Outcome of a submit attempt."""
    success: bool
    message: str
    booking_ref: Optional[str] = None
    request: Optional[BookingRequest] = None
    missing_fields: frozenset[FieldId] = field(default_factory=frozenset)


def _optional_text(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


class BookingSession:
    """Wires the selector, quote builder and validator for one user."""

    def __init__(
        self,
        gate: AvailabilityGate,
        store: BookingPersistence,
        reminders: ReminderScheduling,
        *,
        today: Callable[[], dt.date] = dt.date.today,
        rate_table: Optional[RateTable] = None,
    ) -> None:
        self.session_id = f"SES-{uuid.uuid4().hex[:8]}"
        self.pet_type = PetType.CAT
        self.dog_size: Optional[DogSize] = None
        self.pet_count = PetCount.ONE
        self.selector = DateRangeSelector(gate, today=today)
        self._quotes = BookingQuoteBuilder(rate_table)
        self._store = store
        self._reminders = reminders

    def _bind(self) -> None:
        set_session_id(self.session_id)

    # ------------------------------------------------------------------ #
    # Configuration and selection
    # ------------------------------------------------------------------ #

    def set_pet_configuration(
        self,
        pet_type: PetType,
        dog_size: Optional[DogSize] = None,
        pet_count: Optional[PetCount] = None,
    ) -> None:
        """Dogs default to SMALL when no size is given; cats carry no size."""
        self.pet_type = pet_type
        if pet_type == PetType.DOG:
            self.dog_size = dog_size or self.dog_size or DogSize.SMALL
        else:
            self.dog_size = None
        if pet_count is not None:
            self.pet_count = pet_count

    def select_date(self, day: Union[dt.date, dt.datetime]) -> SelectionState:
        self._bind()
        return self.selector.select_date(day)

    def clear(self) -> SelectionState:
        self._bind()
        return self.selector.clear()

    @property
    def date_range(self) -> DateRange:
        return self.selector.date_range

    @property
    def quote(self) -> Optional[PricingQuote]:
        return self._quotes.build(
            self.selector.state, self.pet_type, self.dog_size, self.pet_count
        )

    # ------------------------------------------------------------------ #
    # Submission
    # ------------------------------------------------------------------ #

    def submit(self, form: BookingForm) -> SubmissionResult:
        """
        Validate the form and, if everything is in place, hand a booking
        request to the store and the reminder scheduler.

        A form whose pet count differs from the session's is rejected, so
        the quote the user was shown is the quote that gets booked.
        """
        self._bind()
        result = validate(form)
        if not result.valid:
            logger.info("Submission blocked, missing: %s", result.describe())
            return SubmissionResult(
                success=False,
                message=f"Please complete: {result.describe()}.",
                missing_fields=result.missing_fields,
            )

        if form.pet_count != self.pet_count:
            logger.info(
                "Submission blocked, form has %s pet(s) but quote is for %s",
                form.pet_count.count, self.pet_count.count,
            )
            return SubmissionResult(
                success=False,
                message=(
                    f"The form lists {form.pet_count.count} pet(s) but the quote is for "
                    f"{self.pet_count.count}. Update your pet selection first."
                ),
            )

        state = self.selector.state
        quote = self.quote
        if not isinstance(state, CompleteRange) or quote is None:
            return SubmissionResult(
                success=False,
                message="Select both a check-in and a check-out date first.",
            )

        request = BookingRequest(
            pet_names=tuple(name.strip() for name in form.pet_names[: form.pet_count.count]),
            pet_type=self.pet_type,
            dog_size=self.dog_size,
            pet_count=self.pet_count,
            check_in=state.start,
            check_out=state.end,
            owner_name=form.owner_name.strip(),
            owner_email=form.owner_email.strip(),
            owner_phone=_optional_text(normalize_phone(form.owner_phone)),
            special_requests=_optional_text(form.special_requests),
            agreed_to_terms=form.agreed_to_terms,
            quote=quote,
        )

        record = self._store.add_booking(request)
        self._reminders.schedule_booking_reminder(request, record.booking_ref)
        logger.info(
            "Booking %s submitted: %d night(s), total %s",
            record.booking_ref, quote.nights, quote.formatted()["total"],
        )
        self.selector.clear()

        return SubmissionResult(
            success=True,
            message=f"Booking received. Reference number: {record.booking_ref}.",
            booking_ref=record.booking_ref,
            request=request,
        )
