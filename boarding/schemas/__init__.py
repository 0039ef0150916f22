from boarding.schemas.availability_schema import AvailabilityStatus, DayAvailability
from boarding.schemas.booking_schema import (
    BookingForm,
    BookingRecord,
    BookingRequest,
    BookingStatus,
    PricingQuote,
)
from boarding.schemas.pet_schema import DogSize, PetCount, PetType

__all__ = [
    "PetType", "DogSize", "PetCount",
    "AvailabilityStatus", "DayAvailability",
    "PricingQuote", "BookingForm", "BookingRequest", "BookingStatus", "BookingRecord",
]
