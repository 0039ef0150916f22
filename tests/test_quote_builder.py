"""Tests for composing a selection with pricing."""

from decimal import Decimal

from boarding.pricing.quote_builder import BookingQuoteBuilder
from boarding.schemas.pet_schema import DogSize, PetCount, PetType
from boarding.selection.date_range_selector import AnchoredRange, CompleteRange, EmptyRange
from tests.conftest import day


class TestBookingQuoteBuilder:
    def setup_method(self):
        self.builder = BookingQuoteBuilder()

    def test_no_quote_while_empty(self):
        assert self.builder.build(EmptyRange(), PetType.CAT, None, PetCount.ONE) is None

    def test_no_quote_while_anchored(self):
        state = AnchoredRange(start=day(3))
        assert self.builder.build(state, PetType.CAT, None, PetCount.ONE) is None

    def test_nights_exclude_checkout_day(self):
        state = CompleteRange(start=day(3), end=day(8))
        quote = self.builder.build(state, PetType.CAT, None, PetCount.ONE)
        assert quote.nights == 5
        assert quote.total == Decimal("132.8125")

    def test_range_across_month_end(self):
        state = CompleteRange(start=day(28), end=day(58))
        quote = self.builder.build(state, PetType.CAT, None, PetCount.ONE)
        assert quote.nights == 30
        assert quote.total == Decimal("743.75")

    def test_configuration_change_gives_new_quote(self):
        state = CompleteRange(start=day(1), end=day(3))
        small = self.builder.build(state, PetType.DOG, DogSize.SMALL, PetCount.ONE)
        large = self.builder.build(state, PetType.DOG, DogSize.LARGE, PetCount.TWO)
        assert small.nightly_rate == Decimal("40")
        assert large.nightly_rate == Decimal("110")
