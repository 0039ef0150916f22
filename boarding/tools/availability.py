"""
Mock calendar availability.

In production the booking-state manager owns the authoritative calendar;
this module provides a mapping-backed gate and a seeded schedule
generator for tests.
"""

import datetime as dt
import logging
import random
from typing import Mapping, Optional

from boarding.config import settings
from boarding.schemas.availability_schema import DayAvailability

logger = logging.getLogger(__name__)

# Schedule generation parameters
SCHEDULE_DAYS = 90
SCHEDULE_SEED = 42
FULL_DAY_PROBABILITY = 0.1


class ScheduleGate:
    """Availability gate backed by a plain ``{date: DayAvailability}`` mapping.

    Days missing from the mapping are unknown and therefore not selectable.
    """

    def __init__(self, schedule: Mapping[dt.date, DayAvailability]) -> None:
        self._schedule = dict(schedule)

    def get_availability(self, day: dt.date) -> Optional[DayAvailability]:
        return self._schedule.get(day)

    def set_availability(self, availability: DayAvailability) -> None:
        self._schedule[availability.date] = availability

    def known_days(self) -> list[dt.date]:
        return sorted(self._schedule)


def build_mock_schedule(
    start: dt.date,
    days: int = SCHEDULE_DAYS,
    seed: int = SCHEDULE_SEED,
    total_spots: Optional[int] = None,
) -> dict[dt.date, DayAvailability]:
    """Generate a reproducible schedule of ``days`` days from ``start``.

    About one day in ten is fully booked; the rest have a random number of
    spots left.
    """
    rng = random.Random(seed)
    total = total_spots or settings.business.total_spots
    schedule: dict[dt.date, DayAvailability] = {}

    for offset in range(days):
        day = start + dt.timedelta(days=offset)
        if rng.random() < FULL_DAY_PROBABILITY:
            available = 0
        else:
            available = rng.randint(1, total)
        schedule[day] = DayAvailability.from_spots(
            day,
            available_spots=available,
            total_spots=total,
            limited_threshold=settings.business.limited_spots_threshold,
        )

    logger.debug("Mock schedule built: %d days from %s", days, start.isoformat())
    return schedule
