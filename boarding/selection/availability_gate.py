"""Read-only per-day capacity lookup consumed by the date selector."""

import datetime as dt
from typing import Optional, Protocol, runtime_checkable

from boarding.schemas.availability_schema import DayAvailability


@runtime_checkable
class AvailabilityGate(Protocol):
    """Anything that can report capacity for a calendar day.

    Implementations return None when they hold no data for the day. The
    data must already be resident: the selector never waits on a gate.
    """

    def get_availability(self, day: dt.date) -> Optional[DayAvailability]:
        ...


def is_selectable(gate: AvailabilityGate, day: dt.date, today: dt.date) -> bool:
    """A day can be tapped only if it is not past, is known, and is not full.

    Unknown days are treated exactly like full ones.
    """
    if day < today:
        return False
    availability = gate.get_availability(day)
    return availability is not None and not availability.is_full
