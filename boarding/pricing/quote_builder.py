"""Composes a complete date selection with the pricing calculator."""

import logging
from typing import Optional

from boarding.config import RateTable, settings
from boarding.pricing.calculator import build_quote
from boarding.schemas.booking_schema import PricingQuote
from boarding.schemas.pet_schema import DogSize, PetCount, PetType
from boarding.selection.date_range_selector import CompleteRange, SelectionState
from boarding.utils import days_between

logger = logging.getLogger(__name__)


class BookingQuoteBuilder:
    """Stateless: builds a quote only once a range is complete."""

    def __init__(self, table: Optional[RateTable] = None) -> None:
        self._table = table or settings.pricing

    def build(
        self,
        selection: SelectionState,
        pet_type: PetType,
        dog_size: Optional[DogSize],
        pet_count: PetCount,
    ) -> Optional[PricingQuote]:
        """Return None while the selection is empty or only anchored."""
        if not isinstance(selection, CompleteRange):
            logger.debug("No quote while selection is %s", selection.phase.value)
            return None
        nights = days_between(selection.start, selection.end)
        return build_quote(pet_type, dog_size, pet_count, nights, table=self._table)
