"""
Deterministic boarding price calculation.

All rates, the tax rate and package tiers come from a ``RateTable``
(``settings.pricing`` by default). Amounts are ``Decimal`` and are never
rounded here; rounding to cents happens only when a quote is displayed.

Usage:
    quote = build_quote(PetType.CAT, None, PetCount.ONE, nights=30)
    quote.total          # Decimal('743.7500')
    quote.formatted()    # {'total': '$743.75', ...}
"""

import logging
from decimal import Decimal
from typing import Optional

from boarding.config import RateKey, RateTable, settings
from boarding.schemas.booking_schema import PricingQuote
from boarding.schemas.pet_schema import DogSize, PetCount, PetType

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _require_nights(nights: int) -> None:
    if nights < 1:
        raise ValueError(f"nights must be >= 1, got {nights}")


def _rate_key(
    pet_type: PetType, dog_size: Optional[DogSize], pet_count: PetCount
) -> RateKey:
    if pet_type == PetType.CAT:
        return (pet_type, pet_count, None)
    if dog_size is None:
        raise ValueError("dog_size is required when pet_type is dog")
    return (pet_type, pet_count, dog_size)


def calculate_nightly_rate(
    pet_type: PetType,
    dog_size: Optional[DogSize],
    pet_count: PetCount,
    *,
    table: Optional[RateTable] = None,
) -> Decimal:
    """Exact table lookup of the per-night rate. ``dog_size`` is ignored for cats."""
    table = table or settings.pricing
    key = _rate_key(pet_type, dog_size, pet_count)
    rate = table.nightly_rate(key)
    if rate is None:
        raise ValueError(f"No nightly rate configured for {key}")
    return rate


def calculate_total(
    pet_type: PetType,
    dog_size: Optional[DogSize],
    pet_count: PetCount,
    nights: int,
    *,
    includes_grooming: bool = False,
    pickup_distance_miles: Decimal = ZERO,
    table: Optional[RateTable] = None,
) -> Decimal:
    """
    Nightly total including tax.

    Tax is applied once to the whole subtotal. Optional grooming and
    pickup (beyond the free radius) are flat fees added before tax.
    """
    _require_nights(nights)
    table = table or settings.pricing
    subtotal = calculate_nightly_rate(pet_type, dog_size, pet_count, table=table) * nights

    if includes_grooming:
        subtotal += table.grooming_fee
    if Decimal(pickup_distance_miles) > table.pickup_free_radius_miles:
        subtotal += table.pickup_fee

    return subtotal + subtotal * table.tax_rate


def get_package_price(
    pet_type: PetType,
    dog_size: Optional[DogSize],
    pet_count: PetCount,
    nights: int,
    *,
    table: Optional[RateTable] = None,
) -> Optional[Decimal]:
    """
    Tax-inclusive flat package price for long stays, or None.

    Tiers are matched from the longest threshold down, so a 90-night cat
    stay gets the 60-night package and nothing else.
    """
    _require_nights(nights)
    table = table or settings.pricing
    key = _rate_key(pet_type, dog_size, pet_count)

    tiers = sorted(
        (t for t in table.packages if (t.pet_type, t.pet_count, t.dog_size) == key),
        key=lambda t: t.min_nights,
        reverse=True,
    )
    for tier in tiers:
        if nights >= tier.min_nights:
            return tier.base_price * table.tax_multiplier
    return None


def build_quote(
    pet_type: PetType,
    dog_size: Optional[DogSize],
    pet_count: PetCount,
    nights: int,
    *,
    table: Optional[RateTable] = None,
) -> PricingQuote:
    """Full price breakdown; the package price replaces the nightly total when one applies."""
    _require_nights(nights)
    table = table or settings.pricing

    nightly_rate = calculate_nightly_rate(pet_type, dog_size, pet_count, table=table)
    subtotal = nightly_rate * nights
    tax = subtotal * table.tax_rate
    package_price = get_package_price(pet_type, dog_size, pet_count, nights, table=table)

    if package_price is not None:
        total = package_price
        savings = subtotal + tax - package_price
    else:
        total = subtotal + tax
        savings = ZERO

    logger.debug(
        "Quote for %s/%s/%s x%d nights: total=%s package=%s",
        pet_type.value, pet_count.value, dog_size.value if dog_size else "-",
        nights, total, package_price,
    )
    return PricingQuote(
        nightly_rate=nightly_rate,
        nights=nights,
        subtotal=subtotal,
        tax=tax,
        package_price=package_price,
        total=total,
        savings=savings,
    )
