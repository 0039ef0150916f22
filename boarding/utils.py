"""Shared utilities used across the booking core."""

import datetime as dt
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENT = Decimal("0.01")


def normalize_phone(value: str) -> str:
    """Normalize a phone number by stripping everything except digits and a leading +.

    Examples:
        >>> normalize_phone("(617) 555-0134")
        '6175550134'
        >>> normalize_phone("+1 617 555 0134")
        '+16175550134'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)


def to_calendar_day(value: Union[dt.date, dt.datetime]) -> dt.date:
    """Drop the time component so taps compare as plain calendar days."""
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def days_between(start: dt.date, end: dt.date) -> int:
    """Calendar-day difference; the end day itself is not counted."""
    return (to_calendar_day(end) - to_calendar_day(start)).days


def round_money(amount: Decimal) -> Decimal:
    """Round to whole cents. Only for presentation, never mid-calculation."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    """
    Examples:
        >>> format_money(Decimal("132.8125"))
        '$132.81'
        >>> format_money(Decimal("1487.5"))
        '$1,487.50'
    """
    return f"${round_money(amount):,.2f}"
