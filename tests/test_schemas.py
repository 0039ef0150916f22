"""Tests for data model invariants."""

import pytest
from pydantic import ValidationError

from boarding.pricing.calculator import build_quote
from boarding.schemas.availability_schema import AvailabilityStatus, DayAvailability
from boarding.schemas.booking_schema import BookingRequest
from boarding.schemas.pet_schema import PetCount, PetType
from tests.conftest import day, make_request


class TestDayAvailability:
    def test_no_spots_is_full(self):
        assert DayAvailability.from_spots(day(1), 0, 5).status == AvailabilityStatus.FULL

    def test_negative_spots_clamped(self):
        availability = DayAvailability.from_spots(day(1), -2, 5)
        assert availability.available_spots == 0
        assert availability.is_full

    @pytest.mark.parametrize("spots", [1, 2])
    def test_few_spots_is_limited(self, spots):
        assert DayAvailability.from_spots(day(1), spots, 5).status == AvailabilityStatus.LIMITED

    def test_plenty_of_spots_is_available(self):
        assert DayAvailability.from_spots(day(1), 3, 5).status == AvailabilityStatus.AVAILABLE


class TestBookingRequest:
    def test_nights(self):
        assert make_request(day(2), day(9)).nights == 7

    def test_is_immutable(self):
        request = make_request(day(2), day(4))
        with pytest.raises(ValidationError):
            request.owner_name = "Someone Else"

    def test_check_out_must_follow_check_in(self):
        with pytest.raises(ValidationError):
            BookingRequest(
                pet_names=("Coco",),
                pet_type=PetType.CAT,
                pet_count=PetCount.ONE,
                check_in=day(4),
                check_out=day(4),
                owner_name="Jamie",
                owner_email="jamie@example.com",
                agreed_to_terms=True,
                quote=build_quote(PetType.CAT, None, PetCount.ONE, 1),
            )

    def test_name_count_must_match_pet_count(self):
        with pytest.raises(ValidationError):
            make_request(day(2), day(4), pet_count=PetCount.TWO, names=("Coco",))

    def test_quote_must_match_range(self):
        with pytest.raises(ValidationError):
            BookingRequest(
                pet_names=("Coco",),
                pet_type=PetType.CAT,
                pet_count=PetCount.ONE,
                check_in=day(2),
                check_out=day(4),
                owner_name="Jamie",
                owner_email="jamie@example.com",
                agreed_to_terms=True,
                quote=build_quote(PetType.CAT, None, PetCount.ONE, 5),
            )
