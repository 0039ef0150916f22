"""
Mock local reminder scheduler.

In production this would register a calendar-triggered local notification
with the device. Here reminders are kept in memory so callers and tests
can inspect what would have been scheduled.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from boarding.config import settings
from boarding.schemas.booking_schema import BookingRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledReminder:
    identifier: str
    fire_on: dt.date
    title: str
    body: str


def _describe_lead(lead_days: int) -> str:
    if lead_days == 0:
        return "today"
    if lead_days == 1:
        return "tomorrow"
    return f"in {lead_days} days"


class ReminderScheduler:
    """Schedules one "stay starts tomorrow" reminder per booking."""

    def __init__(
        self,
        authorized: bool = True,
        enabled: Optional[bool] = None,
        lead_days: Optional[int] = None,
        business_name: Optional[str] = None,
        today: Callable[[], dt.date] = dt.date.today,
    ) -> None:
        self.authorized = authorized
        self.enabled = settings.reminders.enabled if enabled is None else enabled
        self.lead_days = settings.reminders.lead_days if lead_days is None else lead_days
        self.business_name = business_name or settings.business.name
        self._today = today
        self._reminders: dict[str, ScheduledReminder] = {}

    def schedule_booking_reminder(
        self, request: BookingRequest, booking_ref: Optional[str] = None
    ) -> Optional[ScheduledReminder]:
        """
        Schedule a reminder ``lead_days`` before check-in.

        Nothing is scheduled when notifications are not authorized or are
        disabled, or when the reminder day would not be in the future.
        """
        if not (self.authorized and self.enabled):
            logger.debug("Reminders unavailable; skipping %s", booking_ref)
            return None

        fire_on = request.check_in - dt.timedelta(days=self.lead_days)
        if fire_on <= self._today():
            logger.debug("Reminder day %s already passed; skipping", fire_on.isoformat())
            return None

        when = _describe_lead(self.lead_days)
        ref = booking_ref or f"{request.check_in.isoformat()}-{request.owner_email}"
        reminder = ScheduledReminder(
            identifier=f"booking_reminder_{ref}",
            fire_on=fire_on,
            title=f"Upcoming Stay {when.capitalize()}!",
            body=(
                f"{request.display_pet_names}'s stay at {self.business_name} starts "
                f"{when}. Don't forget to prepare their essentials!"
            ),
        )
        self._reminders[reminder.identifier] = reminder
        logger.info("Reminder %s scheduled for %s", reminder.identifier, fire_on.isoformat())
        return reminder

    def pending_reminders(self) -> list[ScheduledReminder]:
        return sorted(self._reminders.values(), key=lambda r: r.fire_on)

    def cancel_reminder(self, identifier: str) -> bool:
        return self._reminders.pop(identifier, None) is not None

    def reset(self) -> None:
        """Drop all scheduled reminders. Used by test fixtures for isolation."""
        self._reminders.clear()
