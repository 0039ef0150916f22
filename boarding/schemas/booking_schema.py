"""Quote, form and booking data models."""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from boarding.schemas.pet_schema import DogSize, PetCount, PetType
from boarding.utils import days_between, format_money


class PricingQuote(BaseModel):
    """Price breakdown for one complete range and pet configuration.

    Amounts keep full precision; use ``formatted()`` for display.
    """

    model_config = ConfigDict(frozen=True)

    nightly_rate: Decimal
    nights: int = Field(ge=1)
    subtotal: Decimal
    tax: Decimal
    package_price: Optional[Decimal] = None
    total: Decimal
    savings: Decimal = Decimal("0")

    @property
    def has_package(self) -> bool:
        return self.package_price is not None

    def formatted(self) -> dict[str, str]:
        """Cent-rounded display strings for every amount."""
        amounts = {
            "nightly_rate": self.nightly_rate,
            "subtotal": self.subtotal,
            "tax": self.tax,
            "total": self.total,
            "savings": self.savings,
        }
        if self.package_price is not None:
            amounts["package_price"] = self.package_price
        return {name: format_money(value) for name, value in amounts.items()}


class BookingForm(BaseModel):
    """Raw owner/pet input as typed into the booking form."""

    pet_count: PetCount = PetCount.ONE
    pet_names: list[str] = Field(default_factory=lambda: ["", ""])
    owner_name: str = ""
    owner_email: str = ""
    owner_phone: str = ""
    special_requests: str = ""
    agreed_to_terms: bool = False


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingRequest(BaseModel):
    """Validated, immutable request handed to the booking collaborators."""

    model_config = ConfigDict(frozen=True)

    pet_names: tuple[str, ...] = Field(min_length=1, max_length=2)
    pet_type: PetType
    dog_size: Optional[DogSize] = None
    pet_count: PetCount
    check_in: dt.date
    check_out: dt.date
    owner_name: str
    owner_email: str
    owner_phone: Optional[str] = None
    special_requests: Optional[str] = None
    agreed_to_terms: bool
    quote: PricingQuote

    @field_validator("pet_names")
    @classmethod
    def _names_not_blank(cls, names: tuple[str, ...]) -> tuple[str, ...]:
        if any(not name.strip() for name in names):
            raise ValueError("pet names must not be blank")
        return names

    @model_validator(mode="after")
    def _check_consistency(self) -> "BookingRequest":
        if self.check_in >= self.check_out:
            raise ValueError("check_in must be strictly before check_out")
        if len(self.pet_names) != self.pet_count.count:
            raise ValueError(
                f"expected {self.pet_count.count} pet name(s), got {len(self.pet_names)}"
            )
        if self.quote.nights != days_between(self.check_in, self.check_out):
            raise ValueError("quote does not match the booked range")
        return self

    @property
    def nights(self) -> int:
        return days_between(self.check_in, self.check_out)

    @property
    def display_pet_names(self) -> str:
        return " & ".join(self.pet_names)


class BookingRecord(BaseModel):
    """A stored booking: the request plus store-owned status."""

    booking_ref: str
    request: BookingRequest
    status: BookingStatus = BookingStatus.PENDING
    created_at: dt.datetime
