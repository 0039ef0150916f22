"""
Offline console demo: walks through a booking without any UI.

Uses the real date selector, quote builder, validator and in-memory
booking store. Dates are relative to today so the scripted taps always
land in the future.

Usage:
    python console_demo.py
    python console_demo.py --scenario two-dogs
    python console_demo.py --scenario invalid-form
"""

import argparse
import datetime as dt
import sys
from typing import Any, Optional

from boarding.booking.session import BookingSession
from boarding.config import settings
from boarding.schemas.booking_schema import BookingForm
from boarding.schemas.pet_schema import DogSize, PetCount, PetType
from boarding.tools.booking import BookingStore
from boarding.tools.reminders import ReminderScheduler

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

Step = tuple[str, Any]


def _form(pet_count: PetCount, names: list[str], agreed: bool = True) -> BookingForm:
    return BookingForm(
        pet_count=pet_count,
        pet_names=names,
        owner_name="Jamie Rivera",
        owner_email="jamie.rivera@example.com",
        owner_phone="(617) 555-0134",
        agreed_to_terms=agreed,
    )


class ConsoleSession:
    """Replays a scripted booking and prints every step."""

    # Pre-scripted scenarios for --scenario flag. Tap values are day offsets from today.
    SCENARIOS: dict[str, list[Step]] = {
        "cat-month": [
            ("pets", (PetType.CAT, None, PetCount.ONE)),
            ("tap", 3),
            ("tap", 33),
            ("submit", _form(PetCount.ONE, ["Coco", ""])),
        ],
        "two-dogs": [
            ("pets", (PetType.DOG, DogSize.LARGE, PetCount.TWO)),
            ("tap", -1),
            ("tap", 5),
            ("tap", 2),
            ("tap", 9),
            ("submit", _form(PetCount.TWO, ["Biscuit", "Maple"])),
        ],
        "invalid-form": [
            ("pets", (PetType.CAT, None, PetCount.TWO)),
            ("tap", 1),
            ("tap", 4),
            ("submit", _form(PetCount.TWO, ["Mochi", ""], agreed=False)),
        ],
    }

    def __init__(self, today: Optional[dt.date] = None) -> None:
        self.today = today or dt.date.today()
        self.store = BookingStore()
        self.reminders = ReminderScheduler(today=lambda: self.today)
        self.session = BookingSession(
            gate=self.store,
            store=self.store,
            reminders=self.reminders,
            today=lambda: self.today,
        )

    def say(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def run_scenario(self, scenario: str) -> bool:
        """Auto-play a pre-scripted scenario. Returns False for unknown names."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return False

        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  PET BOARDING BOOKING - Scenario: {scenario}{RESET}")
        print(f"{BOLD}  Business: {settings.business.name}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

        for action, arg in steps:
            if action == "pets":
                self._set_pets(*arg)
            elif action == "tap":
                self._tap(self.today + dt.timedelta(days=arg))
            elif action == "submit":
                self._submit(arg)

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{DIM}  Selection trace: {' -> '.join(self.session.selector.get_state_trace())}{RESET}")
        print(f"{DIM}  Bookings stored: {len(self.store.bookings)}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        return True

    def _set_pets(
        self, pet_type: PetType, dog_size: Optional[DogSize], pet_count: PetCount
    ) -> None:
        self.session.set_pet_configuration(pet_type, dog_size, pet_count)
        size = f" ({self.session.dog_size.value})" if self.session.dog_size else ""
        print(f"\n{BLUE}[User] {RESET}{pet_count.count} x {pet_type.value}{size}")

    def _tap(self, day: dt.date) -> None:
        print(f"\n{BLUE}[User] {RESET}taps {day.strftime('%b %d, %Y')}")
        before = self.session.selector.state
        after = self.session.select_date(day)
        if after is before:
            self.say("That date can't be selected.")
            return
        self.system_log(f"Selection: {after.phase.value}")
        quote = self.session.quote
        if quote is None:
            return
        shown = quote.formatted()
        self.say(
            f"{quote.nights} night(s) at {shown['nightly_rate']}/night. "
            f"Total {shown['total']} incl. tax."
        )
        if quote.has_package:
            self.say(f"Package price applied, you save {shown['savings']}.")

    def _submit(self, form: BookingForm) -> None:
        print(f"\n{BLUE}[User] {RESET}submits the booking form")
        result = self.session.submit(form)
        if result.success:
            self.say(result.message)
            for reminder in self.reminders.pending_reminders():
                self.system_log(f"Reminder on {reminder.fire_on}: {reminder.title}")
        else:
            print(f"{YELLOW}{result.message}{RESET}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Pet boarding booking console demo")
    parser.add_argument(
        "--scenario",
        default="cat-month",
        choices=sorted(ConsoleSession.SCENARIOS),
        help="Scripted scenario to replay",
    )
    args = parser.parse_args(argv)
    return 0 if ConsoleSession().run_scenario(args.scenario) else 1


if __name__ == "__main__":
    sys.exit(main())
