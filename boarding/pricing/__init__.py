from boarding.pricing.calculator import (
    build_quote,
    calculate_nightly_rate,
    calculate_total,
    get_package_price,
)
from boarding.pricing.quote_builder import BookingQuoteBuilder

__all__ = [
    "calculate_nightly_rate", "calculate_total", "get_package_price", "build_quote",
    "BookingQuoteBuilder",
]
