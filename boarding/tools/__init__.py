from boarding.tools.availability import ScheduleGate, build_mock_schedule
from boarding.tools.booking import BookingStore
from boarding.tools.reminders import ReminderScheduler, ScheduledReminder

__all__ = [
    "ScheduleGate", "build_mock_schedule",
    "BookingStore",
    "ReminderScheduler", "ScheduledReminder",
]
