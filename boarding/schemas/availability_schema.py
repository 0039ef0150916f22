"""Per-day capacity models supplied by the availability gate."""

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AvailabilityStatus(str, Enum):
    AVAILABLE = "available"
    LIMITED = "limited"
    FULL = "full"


class DayAvailability(BaseModel):
    """Capacity status of a single calendar day."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    status: AvailabilityStatus
    available_spots: Optional[int] = None
    total_spots: Optional[int] = None

    @property
    def is_full(self) -> bool:
        return self.status == AvailabilityStatus.FULL

    @classmethod
    def from_spots(
        cls,
        day: dt.date,
        available_spots: int,
        total_spots: int,
        limited_threshold: int = 2,
    ) -> "DayAvailability":
        """Derive the status from remaining spots.

        No spots left is FULL, up to ``limited_threshold`` spots is LIMITED,
        anything more is AVAILABLE.
        """
        available_spots = max(0, available_spots)
        if available_spots == 0:
            status = AvailabilityStatus.FULL
        elif available_spots <= limited_threshold:
            status = AvailabilityStatus.LIMITED
        else:
            status = AvailabilityStatus.AVAILABLE
        return cls(
            date=day,
            status=status,
            available_spots=available_spots,
            total_spots=total_spots,
        )
